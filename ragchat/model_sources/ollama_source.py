"""Ollama model source used to populate the model selection lists."""

from __future__ import annotations

from typing import List

import httpx
import ollama

from ragchat.config import RagConfig
from ragchat.errors import ServiceStatusError, TransportError
from .base import ProviderModel, ProviderModelSource, partition_models


class OllamaModelSource(ProviderModelSource):
    provider_name = "Ollama"

    def __init__(self, base_url: str = "http://localhost:11434", timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.client = ollama.Client(host=self.base_url, timeout=timeout)

    @classmethod
    def from_config(cls, config: RagConfig) -> "OllamaModelSource":
        return cls(base_url=config.base_url, timeout=config.request_timeout)

    def list_models(self) -> List[ProviderModel]:
        """List the models installed in Ollama (``GET /api/tags``).

        Raises:
            TransportError: Ollama could not be reached.
            ServiceStatusError: Ollama answered with an error status.
        """
        try:
            response = self.client.list()
        except ollama.ResponseError as exc:
            raise ServiceStatusError(exc.status_code, str(exc.error)) from exc
        except (ConnectionError, httpx.HTTPError) as exc:
            raise TransportError(f"Could not reach Ollama at {self.base_url}: {exc}") from exc

        entries = response.get("models", []) if isinstance(response, dict) else getattr(response, "models", None) or []

        models: List[ProviderModel] = []
        for entry in entries:
            meta = entry if isinstance(entry, dict) else entry.model_dump()
            name = meta.get("model") or meta.get("name")
            if not name:
                continue
            details = meta.get("details") or {}
            models.append(
                ProviderModel(
                    provider=self.provider_name,
                    name=name,
                    family=details.get("family"),
                    parameter_size=details.get("parameter_size"),
                    size_bytes=meta.get("size"),
                    raw_metadata=meta,
                )
            )
        return models


def refresh_config(config: RagConfig, source: ProviderModelSource) -> RagConfig:
    """Return ``config`` with its cached model lists re-read from ``source``."""
    embedding, completion = partition_models(source.list_model_names())
    print(f"[RAG] Found {len(embedding)} embedding and {len(completion)} chat models")
    return config.with_models(embedding, completion)
