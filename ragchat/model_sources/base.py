"""Base interfaces for provider-backed model listings.

Provides a thin abstraction around provider-specific model metadata and
the split of a provider's models into embedding and chat models.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

EMBEDDING_MARKER = "embed"


def is_embedding_model(name: str) -> bool:
    return EMBEDDING_MARKER in name.lower()


def partition_models(names: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split model names into (embedding_models, completion_models).

    A name containing "embed" (any case) is an embedding model; every other
    model is treated as a chat/completion model. Input order is kept.
    """
    embedding: List[str] = []
    completion: List[str] = []
    for name in names:
        (embedding if is_embedding_model(name) else completion).append(name)
    return embedding, completion


@dataclass
class ProviderModel:
    """Normalized model metadata returned by provider sources."""

    provider: str
    name: str
    family: Optional[str] = None
    parameter_size: Optional[str] = None
    size_bytes: Optional[int] = None
    raw_metadata: dict = field(default_factory=dict)

    @property
    def is_embedding(self) -> bool:
        return is_embedding_model(self.name)


class ProviderModelSource:
    """Interface for provider-specific model enumeration."""

    provider_name: str = ""

    def list_models(self) -> List[ProviderModel]:  # pragma: no cover - interface
        raise NotImplementedError

    def list_model_names(self) -> List[str]:
        return [m.name for m in self.list_models()]
