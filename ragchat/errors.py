"""Exceptions raised by the RAG pipeline and its service clients."""


class RAGError(Exception):
    """Base class for every failure that aborts a query."""


class ServiceError(RAGError):
    """A call to the embedding, chat or model-listing service failed."""


class TransportError(ServiceError):
    """The service could not be reached (connection refused, timeout, ...)."""


class ServiceStatusError(ServiceError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code, message=""):
        self.status_code = status_code
        detail = f": {message}" if message else ""
        super().__init__(f"HTTP {status_code}{detail}")


class MalformedResponseError(ServiceError):
    """The response body is not a usable JSON object for the calling stage."""


class ContractViolation(RAGError):
    """An internal invariant was broken, e.g. embeddings of different sizes."""
