"""
Queue payload parsing.

Dependencies: pydantic
System role: Turns raw queue payloads into validated jobs
"""

import logging

from pydantic import ValidationError

from search_indexer.core.exceptions import DecodeError
from search_indexer.observability.log_utils import safe_log_value

from .models import IndexJob

logger = logging.getLogger(__name__)


def parse_job_payload(payload: str | bytes) -> IndexJob:
    """
    Parse and validate a job payload.

    Args:
        payload: JSON object with document_id, content and model

    Returns:
        IndexJob: Validated job

    Raises:
        DecodeError: Empty payload, invalid UTF-8, invalid JSON or schema mismatch
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                "Job payload is not valid UTF-8",
                details={"payload": safe_log_value(payload, max_length=120)},
            ) from e

    if not payload or not payload.strip():
        raise DecodeError("Empty job payload")

    try:
        job = IndexJob.model_validate_json(payload)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        logger.error(f"{__name__}:parse_job_payload - ValidationError: {errors}")
        raise DecodeError(
            "Invalid job payload",
            details={"errors": errors, "payload": safe_log_value(payload, max_length=120)},
        ) from e

    logger.info(
        f"{__name__}:parse_job_payload - Parsed job",
        extra={"document_id": str(job.document_id), "model": job.model},
    )
    return job
