"""Ollama provider implementation."""

import math
import numbers
from typing import Any, Dict, List

import requests

from ragchat.errors import MalformedResponseError, ServiceStatusError, TransportError
from .base import LLMProvider
from .response import decode_json_object

DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_TIMEOUT = 60

SYSTEM_PROMPT = (
    "You are a helpful assistant for a notes vault. "
    "Only answer using the context provided."
)
NO_RESPONSE = "[no response]"


def _as_vector(value: Any, what: str) -> List[float]:
    """Validate that ``value`` is a list of finite numbers and return it as floats."""
    if not isinstance(value, list):
        raise MalformedResponseError(f"Expected {what} to be a list, got {type(value).__name__}.")
    vector = []
    for item in value:
        # bool is a subclass of int but never a valid component
        if isinstance(item, bool) or not isinstance(item, numbers.Real):
            raise MalformedResponseError(f"Unexpected value in {what}: {item!r}")
        try:
            component = float(item)
        except OverflowError as exc:
            raise MalformedResponseError(f"Value out of range in {what}.") from exc
        # json accepts NaN and Infinity, which would break ranking
        if not math.isfinite(component):
            raise MalformedResponseError(f"Non-finite value in {what}: {item!r}")
        vector.append(component)
    return vector


class OllamaProvider(LLMProvider):
    """Provider for a local Ollama service, spoken to over its HTTP API.

    Response bodies go through ``decode_json_object`` so that stray text
    around the JSON payload does not break a query.
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, timeout=DEFAULT_TIMEOUT):
        """Initialize Ollama provider.

        Args:
            base_url: Base URL of Ollama service
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(base_url=config.base_url, timeout=config.request_timeout)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST ``payload`` to ``path`` and return the decoded JSON object."""
        url = f"{self.base_url}{path}"
        try:
            response = requests.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Could not reach {url}: {exc}") from exc

        if not response.ok:
            body = (response.text or "").strip()
            raise ServiceStatusError(response.status_code, body[:200])

        return decode_json_object(response.text)

    def embed_query(self, text, model):
        """Embed the query text.

        Accepts either a singular ``embedding`` field or the first entry of
        a non-empty ``embeddings`` list, in that order.
        """
        data = self._post("/api/embed", {"model": model, "input": text})

        if data.get("embedding") is not None:
            return _as_vector(data["embedding"], "'embedding'")

        embeddings = data.get("embeddings")
        if isinstance(embeddings, list) and embeddings:
            return _as_vector(embeddings[0], "'embeddings[0]'")

        raise MalformedResponseError("Embed response has neither 'embedding' nor 'embeddings'.")

    def embed_batch(self, texts, model):
        """Embed all snippet texts in one request.

        Raises:
            MalformedResponseError: 'embeddings' missing, not a list, or of a
                different length than ``texts``.
        """
        texts = list(texts)
        if not texts:
            return []

        data = self._post("/api/embed", {"model": model, "input": texts})

        embeddings = data.get("embeddings")
        if not isinstance(embeddings, list):
            raise MalformedResponseError("Expected 'embeddings' to be an array.")
        if len(embeddings) != len(texts):
            raise MalformedResponseError(
                f"Expected {len(texts)} embeddings, got {len(embeddings)}."
            )
        return [_as_vector(vec, f"'embeddings[{i}]'") for i, vec in enumerate(embeddings)]

    def complete(self, context, query, model):
        """Ask the chat model to answer ``query`` from ``context``.

        The answer is taken from ``message.content``, then ``response``;
        when neither holds text the placeholder ``[no response]`` is returned.
        """
        payload = {
            "model": model,
            "stream": False,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Context:\n{context}\n\nQuery: {query}"},
            ],
        }
        data = self._post("/api/chat", payload)

        message = data.get("message")
        if isinstance(message, dict):
            content = message.get("content")
            if isinstance(content, str) and content:
                return content

        response = data.get("response")
        if isinstance(response, str) and response:
            return response

        return NO_RESPONSE
