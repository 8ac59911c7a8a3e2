"""Provider model sources for the settings model lists."""

from .base import ProviderModel, ProviderModelSource, is_embedding_model, partition_models
from .ollama_source import OllamaModelSource, refresh_config

__all__ = [
    "ProviderModel",
    "ProviderModelSource",
    "OllamaModelSource",
    "is_embedding_model",
    "partition_models",
    "refresh_config",
]
