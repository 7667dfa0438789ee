"""
Vector codec for the search index column.

Providers return Python floats (double precision); pgvector's ``vector``
column stores float32. Each element is narrowed directly, without scaling
or normalization. Dimensionality is not checked here.

Dependencies: numpy, pgvector
System role: Conversion between embedding and upsert stages
"""

from collections.abc import Sequence

import numpy as np
from pgvector import Vector

from search_indexer.core.exceptions import ProviderError

from ..models import Embedding


def to_storage_vector(values: Sequence[float]) -> Vector:
    """
    Narrow a provider vector to float32.

    Args:
        values: Vector elements of any real numeric type

    Returns:
        Vector: pgvector value ready to bind to a ``vector`` column
    """
    return Vector(np.asarray(values, dtype=np.float32))


def encode_embeddings(embeddings: Sequence[Embedding]) -> list[Vector]:
    """
    Convert a batch of embeddings, preserving order.

    Args:
        embeddings: Embeddings in chunk order

    Returns:
        list[Vector]: One storage vector per embedding

    Raises:
        ProviderError: When a vector is not a flat sequence of numbers
    """
    vectors = []
    for embedding in embeddings:
        try:
            vectors.append(to_storage_vector(embedding.vector))
        except (TypeError, ValueError) as e:
            raise ProviderError(
                f"Embedding for chunk {embedding.chunk_index} is not a numeric vector: {e}",
                details={"chunk_index": embedding.chunk_index},
            ) from e
    return vectors
