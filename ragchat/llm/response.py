"""Tolerant extraction of a JSON object from a raw service response.

Local model servers sometimes wrap the JSON body in log lines or other
noise. The decoder takes everything from the first ``{`` to the last ``}``
and parses that span. Multiple concatenated objects and top-level arrays
are not supported.
"""

import json
from typing import Any, Dict

from ragchat.errors import MalformedResponseError

# Characters of the failing fragment echoed in error output
ERROR_PREVIEW_CHARS = 200


def decode_json_object(raw: str) -> Dict[str, Any]:
    """Return the JSON object embedded in ``raw``.

    Raises:
        MalformedResponseError: No ``{...}`` span exists or it does not parse.
    """
    first_brace = raw.find("{")
    last_brace = raw.rfind("}")
    if first_brace == -1 or last_brace == -1 or last_brace < first_brace:
        raise MalformedResponseError("Invalid response: JSON object not found.")

    fragment = raw[first_brace:last_brace + 1]
    try:
        data = json.loads(fragment)
    except ValueError as exc:
        print(f"[Ollama] Failed to parse JSON extract: {fragment[:ERROR_PREVIEW_CHARS]!r}")
        raise MalformedResponseError("Response could not be parsed as JSON.") from exc
    return data
