"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits document text into non-overlapping, trimmed chunks no longer than the
configured size. Paragraph, line, sentence and word boundaries are tried in
that order before falling back to a hard cut between characters.

Dependencies: langchain_text_splitters
System role: First stage of the indexing pipeline
"""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from ..models import Chunk

DEFAULT_CHUNK_SIZE = 500

# "" must stay last: it is the hard-cut fallback.
SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class ChunkingTask:
    """Split document text into bounded chunks."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self.chunk_size = chunk_size
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=0,
            separators=SEPARATORS,
            keep_separator="end",
            strip_whitespace=True,
            length_function=len,
        )

    def chunk(self, content: str) -> list[Chunk]:
        """
        Split document text into chunks.

        Args:
            content: Full document text

        Returns:
            list[Chunk]: Ordered chunks with contiguous 0-based indices.
            Empty or whitespace-only content yields an empty list.
        """
        if not content or content.isspace():
            return []

        # Pieces the splitter cannot merge are emitted unstripped.
        texts = [text.strip() for text in self._splitter.split_text(content)]
        texts = [text for text in texts if text]
        return [Chunk(index=i, text=text) for i, text in enumerate(texts)]
