"""Local RAG chat over a folder of notes, backed by Ollama.

Usage:
    from ragchat import ChatSession, FolderVault, RAGPipeline, SettingsStore

    pipeline = RAGPipeline()
    result = pipeline.answer("what is a cat", FolderVault("~/notes").documents(),
                             SettingsStore.default().load())
"""

from .config import RagConfig, SettingsStore
from .errors import (
    RAGError,
    ServiceError,
    TransportError,
    ServiceStatusError,
    MalformedResponseError,
    ContractViolation,
)
from .rag import RAGPipeline, QueryResult
from .vault import DocumentSource, FolderVault, InMemorySource
from .session import ChatSession

__all__ = [
    'RagConfig',
    'SettingsStore',
    'RAGError',
    'ServiceError',
    'TransportError',
    'ServiceStatusError',
    'MalformedResponseError',
    'ContractViolation',
    'RAGPipeline',
    'QueryResult',
    'DocumentSource',
    'FolderVault',
    'InMemorySource',
    'ChatSession',
]
