"""Configuration snapshot for the RAG pipeline and its persistence.

The pipeline never reads settings on its own; callers load a ``RagConfig``
from a ``SettingsStore`` and pass it into each query.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from PySide6.QtCore import QSettings

DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_EMBEDDING_MODEL = "mxbai-embed-large"
DEFAULT_COMPLETION_MODEL = "llama3"
DEFAULT_TOKEN_BUDGET = 700
DEFAULT_REQUEST_TIMEOUT = 60

MIN_TOKEN_BUDGET = 256
MAX_TOKEN_BUDGET = 8192

SETTINGS_ORG = "RAGChat"
SETTINGS_APP = "RAGChat"
SETTINGS_PREFIX = "rag/"


def clamp_token_budget(value: int) -> int:
    """Keep a user-supplied budget inside the range offered by the settings screen."""
    return max(MIN_TOKEN_BUDGET, min(MAX_TOKEN_BUDGET, int(value)))


@dataclass(frozen=True)
class RagConfig:
    """Settings used by one pipeline invocation.

    Attributes:
        base_url: Base URL of the Ollama service
        embedding_model: Model used for query and snippet embeddings
        completion_model: Model used to answer the query
        token_budget: Approximate token limit for the assembled context
        request_timeout: Seconds to wait for each service request
        embedding_models: Cached embedding model names for selection
        completion_models: Cached chat model names for selection
    """
    base_url: str = DEFAULT_BASE_URL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    completion_model: str = DEFAULT_COMPLETION_MODEL
    token_budget: int = DEFAULT_TOKEN_BUDGET
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    embedding_models: Tuple[str, ...] = field(default_factory=tuple)
    completion_models: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.token_budget <= 0:
            raise ValueError(f"token_budget must be positive, got {self.token_budget}")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        # Accept lists from callers but keep the snapshot immutable
        object.__setattr__(self, "embedding_models", tuple(self.embedding_models))
        object.__setattr__(self, "completion_models", tuple(self.completion_models))

    def with_models(self, embedding_models, completion_models) -> "RagConfig":
        return replace(self, embedding_models=tuple(embedding_models),
                       completion_models=tuple(completion_models))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "embedding_model": self.embedding_model,
            "completion_model": self.completion_model,
            "token_budget": self.token_budget,
            "request_timeout": self.request_timeout,
            "embedding_models": list(self.embedding_models),
            "completion_models": list(self.completion_models),
        }


def _as_list(value: Any) -> List[str]:
    # QSettings may hand back a single string (or None) for short lists
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


class SettingsStore:
    """Persistence helper for ``RagConfig``.

    Uses QSettings when provided; otherwise falls back to in-memory storage for tests.
    """

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings if isinstance(settings, QSettings) else None
        self._memory: Dict[str, Any] = {}

    @classmethod
    def default(cls) -> "SettingsStore":
        return cls(QSettings(SETTINGS_ORG, SETTINGS_APP))

    def _get(self, key: str, default: Any, type_=None) -> Any:
        full_key = SETTINGS_PREFIX + key
        if self.settings:
            if type_ is not None:
                return self.settings.value(full_key, default, type=type_)
            return self.settings.value(full_key, default)
        return self._memory.get(full_key, default)

    def _set(self, key: str, value: Any) -> None:
        full_key = SETTINGS_PREFIX + key
        if self.settings:
            self.settings.setValue(full_key, value)
        else:
            self._memory[full_key] = value

    def load(self) -> RagConfig:
        """Read the stored configuration, using defaults for missing keys."""
        timeout = float(self._get("request_timeout", DEFAULT_REQUEST_TIMEOUT, float))
        return RagConfig(
            base_url=str(self._get("base_url", DEFAULT_BASE_URL)) or DEFAULT_BASE_URL,
            embedding_model=str(self._get("embedding_model", DEFAULT_EMBEDDING_MODEL)) or DEFAULT_EMBEDDING_MODEL,
            completion_model=str(self._get("completion_model", DEFAULT_COMPLETION_MODEL)) or DEFAULT_COMPLETION_MODEL,
            token_budget=clamp_token_budget(self._get("token_budget", DEFAULT_TOKEN_BUDGET, int)),
            request_timeout=timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT,
            embedding_models=_as_list(self._get("embedding_models", [])),
            completion_models=_as_list(self._get("completion_models", [])),
        )

    def save(self, config: RagConfig) -> None:
        for key, value in config.to_dict().items():
            self._set(key, value)
        if self.settings:
            self.settings.sync()
