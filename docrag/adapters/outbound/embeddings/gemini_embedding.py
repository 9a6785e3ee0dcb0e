"""Google Gemini embedding provider using the google-genai SDK."""

import logging
import time
from typing import TYPE_CHECKING

from ....common.rate_limiter import is_rate_limit_error
from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingRateLimitError,
    MissingAPIKeyError,
)
from ....core.ports.embedding_port import EmbeddingPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

# Constants
EMBEDDING_BATCH_SIZE = 20
MAX_EMBEDDING_RETRIES = 3
DEFAULT_EMBEDDING_DIMENSION = 1536


class GeminiEmbeddingFunction(EmbeddingPort):
    """Embedding provider backed by the Gemini embeddings API."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-embedding-001",
        dimension: int = DEFAULT_EMBEDDING_DIMENSION,
        max_retries: int = MAX_EMBEDDING_RETRIES,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Google AI API key.
            model_name: Embedding model to call.
            dimension: Requested output dimensionality.
            max_retries: Attempts per request before giving up on rate limits.
        """
        self.api_key = api_key
        self.model_name = model_name
        self._dimension = dimension
        self.max_retries = max_retries
        self._client: "genai.Client | None" = None

    @property
    def dimension(self) -> int:
        return self._dimension

    def _get_client(self) -> "genai.Client":
        """Lazy load the genai client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Set GOOGLE_API_KEY to enable remote embeddings."
                )
            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini embedding client initialized for model: %s", self.model_name)
        return self._client

    def embed_query(self, text: str) -> list[float]:
        """Generate an embedding for a single text."""
        return self._embed_texts([text], task_type="RETRIEVAL_QUERY")[0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for several texts in batches."""
        embeddings: list[list[float]] = []
        for i in range(0, len(texts), EMBEDDING_BATCH_SIZE):
            batch = texts[i : i + EMBEDDING_BATCH_SIZE]
            embeddings.extend(self._embed_texts(batch, task_type="RETRIEVAL_DOCUMENT"))
        return embeddings

    def _embed_texts(self, texts: list[str], task_type: str) -> list[list[float]]:
        """Call the embeddings API with retries on rate limits.

        Raises:
            EmbeddingRateLimitError: Rate limited on every attempt.
            EmbeddingAPIError: Provider error or malformed response.
        """
        from google.genai import types

        client = self._get_client()
        config = types.EmbedContentConfig(
            task_type=task_type,
            output_dimensionality=self._dimension,
        )

        for attempt in range(self.max_retries):
            try:
                result = client.models.embed_content(
                    model=self.model_name,
                    contents=texts,
                    config=config,
                )
            except Exception as e:
                if is_rate_limit_error(e):
                    if attempt < self.max_retries - 1:
                        wait_time = 2**attempt
                        logger.warning("Embedding rate limit hit, retrying in %ds...", wait_time)
                        time.sleep(wait_time)
                        continue
                    raise EmbeddingRateLimitError(
                        "Embedding rate limit exceeded",
                        cause=e,
                        context={"model": self.model_name, "attempts": self.max_retries},
                    ) from e
                raise EmbeddingAPIError(
                    f"Embedding request failed: {e}",
                    cause=e,
                    context={"model": self.model_name},
                ) from e

            return self._parse(result, len(texts))

        raise EmbeddingAPIError("Embedding request failed after retries")

    def _parse(self, result: object, expected: int) -> list[list[float]]:
        embeddings = getattr(result, "embeddings", None) or []
        vectors = [list(getattr(emb, "values", None) or []) for emb in embeddings]

        if len(vectors) != expected or any(not vector for vector in vectors):
            raise EmbeddingAPIError(
                "Malformed embedding response",
                context={"expected": expected, "received": len(vectors)},
            )
        return vectors
