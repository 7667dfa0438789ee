"""
LangChain embeddings integrations.

Builds the ``Embeddings`` object for a job's model id. Gemini is wrapped so
every call requests the index column's width: the base class ignores
output_dimensionality in the constructor.

Dependencies: langchain_google_genai, langchain_aws
System role: Embedding provider selection
"""

import logging

from langchain_aws import BedrockEmbeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from search_indexer.boundary.embeddings.client import EmbeddingsFactory
from search_indexer.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests a fixed vector width."""

    _output_dimensionality: int = 1024

    def __init__(self, model: str, output_dimensionality: int = 1024, **kwargs) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID (e.g. models/gemini-embedding-001)
            output_dimensionality: Width requested on every call
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality

    def embed_documents(self, texts: list[str], **kwargs) -> list[list[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_documents(texts, **kwargs)

    async def aembed_documents(self, texts: list[str], **kwargs) -> list[list[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return await super().aembed_documents(texts, **kwargs)


def build_embeddings_factory(settings: EmbeddingSettings) -> EmbeddingsFactory:
    """
    Select the embeddings integration configured for this worker.

    Args:
        settings: Embedding settings

    Returns:
        EmbeddingsFactory: Callable building an Embeddings object per model id

    Raises:
        ValueError: When the provider name is unknown
    """
    provider = settings.provider.lower()

    if provider == "gemini":

        def gemini_factory(model_id: str) -> GoogleGenerativeAIEmbeddings:
            return FixedDimensionEmbeddings(
                model=model_id,
                output_dimensionality=settings.dimensions,
            )

        factory: EmbeddingsFactory = gemini_factory
    elif provider == "bedrock":

        def bedrock_factory(model_id: str) -> BedrockEmbeddings:
            return BedrockEmbeddings(model_id=model_id, region_name=settings.aws_region)

        factory = bedrock_factory
    else:
        raise ValueError(f"Unknown embedding provider: {settings.provider}")

    logger.info(f"{__name__}:build_embeddings_factory - Using provider={provider}")
    return factory
