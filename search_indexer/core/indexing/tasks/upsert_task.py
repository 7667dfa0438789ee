"""
Transactional search index upsert task.

Replaces every stored chunk of a document inside one transaction: a single
DELETE followed by one INSERT per chunk. Readers see either the previous
chunk set or the new one, never a mix. Re-running the same job converges to
the same rows.

Dependencies: sqlalchemy, pgvector
System role: Final stage of the indexing pipeline
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from pgvector import Vector
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from search_indexer.boundary.db.models import SearchIndexModel
from search_indexer.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class SearchIndexUpsertTask:
    """Delete-then-insert a document's chunks atomically."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize upsert task.

        Args:
            session_factory: Async session factory bound to the search index database
        """
        self._session_factory = session_factory

    async def replace_document(
        self,
        document_id: UUID,
        rows: Sequence[tuple[str, Vector]],
    ) -> int:
        """
        Replace all indexed rows of a document.

        ``chunk_index`` is the position of each pair in ``rows``. An empty
        ``rows`` removes the document from the index.

        Args:
            document_id: Document UUID
            rows: Ordered (chunk_text, embedding) pairs

        Returns:
            int: Number of rows inserted

        Raises:
            StorageError: When any statement fails; the transaction is rolled back
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(SearchIndexModel).where(
                            SearchIndexModel.document_id == document_id
                        )
                    )
                    for chunk_index, (chunk_text, embedding) in enumerate(rows):
                        await session.execute(
                            insert(SearchIndexModel).values(
                                document_id=document_id,
                                chunk_index=chunk_index,
                                chunk_text=chunk_text,
                                embedding=embedding,
                            )
                        )
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"{__name__}:replace_document - {type(e).__name__}: {e}",
                extra={"document_id": str(document_id)},
            )
            raise StorageError(
                f"Failed to replace search index rows: {e}",
                document_id=str(document_id),
                details={"chunk_count": len(rows)},
            ) from e

        logger.info(
            f"{__name__}:replace_document - Replaced search index rows",
            extra={"document_id": str(document_id), "chunk_count": len(rows)},
        )
        return len(rows)

    async def fetch_document_rows(self, document_id: UUID) -> list[SearchIndexModel]:
        """
        Load the stored rows of a document.

        Args:
            document_id: Document UUID

        Returns:
            list[SearchIndexModel]: Rows ordered by chunk_index
        """
        async with self._session_factory() as session:
            result = await session.execute(
                select(SearchIndexModel)
                .where(SearchIndexModel.document_id == document_id)
                .order_by(SearchIndexModel.chunk_index)
            )
            return list(result.scalars().all())
