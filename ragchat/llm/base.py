"""Base provider interface for embedding and chat services."""

from typing import List


class LLMProvider:
    """Base class for model service providers.

    A provider turns text into embeddings and answers a query from an
    assembled context. Every call is a single blocking request; streaming
    is not supported.
    """

    def embed_query(self, text: str, model: str) -> List[float]:
        """Embed a single string.

        Args:
            text: Text to embed
            model: Embedding model name (provider-specific)

        Returns:
            Embedding vector
        """
        raise NotImplementedError

    def embed_batch(self, texts: List[str], model: str) -> List[List[float]]:
        """Embed several strings in one request.

        Returns:
            One embedding per input text, in input order
        """
        raise NotImplementedError

    def complete(self, context: str, query: str, model: str) -> str:
        """Answer ``query`` using only ``context``.

        Returns:
            Answer text from the model
        """
        raise NotImplementedError
