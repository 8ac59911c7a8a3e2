"""Model service clients.

Provides an abstract interface (LLMProvider) and the Ollama implementation
used by the RAG pipeline for embeddings and chat completion:
- OllamaProvider: For Ollama (default on localhost:11434)

Usage:
    from ragchat.llm import OllamaProvider

    provider = OllamaProvider()
    vector = provider.embed_query("what is a cat", model="mxbai-embed-large")
"""

from .base import LLMProvider
from .ollama import OllamaProvider, NO_RESPONSE, SYSTEM_PROMPT
from .response import decode_json_object

__all__ = [
    'LLMProvider',
    'OllamaProvider',
    'NO_RESPONSE',
    'SYSTEM_PROMPT',
    'decode_json_object',
]
