"""Worker threads for background operations.

- QueryWorker: one RAG query (keyword search, embeddings, completion)

Workers use QThread to keep the UI responsive during operations.
"""

from .query_worker import QueryWorker

__all__ = [
    "QueryWorker",
]
