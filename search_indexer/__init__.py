"""
search_indexer package.

Background worker that chunks queued documents, embeds the chunks and
stores them in a pgvector-backed search index.
"""

__version__ = "0.1.0"
