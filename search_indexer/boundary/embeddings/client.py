"""
Embedding client capability and LangChain-backed implementation.

The pipeline only depends on ``EmbeddingClient.embed``; the concrete
provider can be swapped (or faked in tests) without touching it.

Dependencies: langchain_core
System role: Embedding generation adapter
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from langchain_core.embeddings import Embeddings

from search_indexer.core.exceptions import ProviderError

logger = logging.getLogger(__name__)

EmbeddingsFactory = Callable[[str], Embeddings]


class EmbeddingClient(ABC):
    """Batch text embedding capability."""

    @abstractmethod
    async def embed(self, model_id: str, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            model_id: Provider model identifier
            texts: Texts in chunk order

        Returns:
            list[list[float]]: One vector per text, in input order

        Raises:
            ProviderError: When the call fails or the batch is incomplete
        """


class LangChainEmbeddingClient(EmbeddingClient):
    """Embed through a LangChain ``Embeddings`` integration, one model per id."""

    def __init__(
        self,
        factory: EmbeddingsFactory,
        expected_dimensions: int | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            factory: Builds the LangChain embeddings object for a model id
            expected_dimensions: Reject vectors of any other width (None disables the check)
        """
        self._factory = factory
        self._expected_dimensions = expected_dimensions
        self._models: dict[str, Embeddings] = {}

    def _get_model(self, model_id: str) -> Embeddings:
        """
        Get or create the embeddings object for a model id.

        Raises:
            ProviderError: When the integration rejects the model id or its credentials
        """
        model = self._models.get(model_id)
        if model is None:
            try:
                model = self._factory(model_id)
            except Exception as e:
                raise ProviderError(
                    f"Could not initialize embedding model: {e}", model=model_id
                ) from e
            self._models[model_id] = model
            logger.info(f"{__name__}:_get_model - Initialized embeddings for model={model_id}")
        return model

    async def embed(self, model_id: str, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts with a single provider call.

        No retry is attempted; any failure aborts the whole batch.

        Args:
            model_id: Provider model identifier
            texts: Texts in chunk order

        Returns:
            list[list[float]]: One vector per text, in input order

        Raises:
            ProviderError: Provider failure, short/long response or width mismatch
        """
        if not texts:
            return []

        model = self._get_model(model_id)
        try:
            vectors = await model.aembed_documents(texts)
        except Exception as e:
            raise ProviderError(
                f"Failed to generate embeddings: {type(e).__name__}: {e}",
                model=model_id,
                details={"batch_size": len(texts)},
            ) from e

        if len(vectors) != len(texts):
            raise ProviderError(
                f"Provider returned {len(vectors)} vectors for {len(texts)} texts",
                model=model_id,
            )

        if self._expected_dimensions is not None:
            for position, vector in enumerate(vectors):
                if len(vector) != self._expected_dimensions:
                    raise ProviderError(
                        f"Expected {self._expected_dimensions} dimensions, got {len(vector)}",
                        model=model_id,
                        details={"chunk_index": position},
                    )

        return vectors
