"""
Search index ORM model.

One row per chunk of an indexed document. Rows of a document are always
replaced as a whole by the upsert task, never updated individually.

Dependencies: sqlalchemy, pgvector
System role: Persistence model for chunk text and embeddings
"""

import uuid

from pgvector.sqlalchemy import Vector
from sqlalchemy import Integer, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from search_indexer.boundary.db.base import Base


class SearchIndexModel(Base):
    """
    Indexed chunk of a document.

    Attributes:
        document_id: Owning document (first part of the primary key)
        chunk_index: 0-based chunk position (second part of the primary key)
        chunk_text: Trimmed chunk text
        embedding: float32 vector, width set when the schema is created
    """

    __tablename__ = "search_index"

    document_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
    )
    chunk_index: Mapped[int] = mapped_column(Integer, primary_key=True)
    chunk_text: Mapped[str] = mapped_column(Text, nullable=False)
    embedding = mapped_column(Vector(), nullable=False)

    def __repr__(self) -> str:
        return f"<SearchIndexModel(document_id={self.document_id}, chunk_index={self.chunk_index})>"


def set_embedding_dimensions(dimensions: int) -> None:
    """
    Fix the width of the embedding column used by CREATE TABLE.

    Args:
        dimensions: Vector width produced by the configured embedding model

    Raises:
        ValueError: When dimensions is not positive
    """
    if dimensions <= 0:
        raise ValueError("dimensions must be positive")
    SearchIndexModel.__table__.c.embedding.type = Vector(dimensions)
