"""RAG (Retrieval Augmented Generation) module for answering questions from notes.

This module narrows a note collection by keyword, ranks the matching snippets
by embedding similarity, and packs the best ones into a bounded context for
the chat model.

Main classes:
    RAGPipeline: Orchestrates one query from keywords to answer
    KeywordFilter: Keyword extraction, candidate selection and snippets
    ContextAssembler: Greedy packing of snippets under a token budget
    Document, Candidate, RankedCandidate, QueryResult: Pipeline records
"""

from .engine import RAGPipeline, GENERATING_MESSAGE
from .search import KeywordFilter, STOP_WORDS, SNIPPET_CHARS_BEFORE, SNIPPET_CHARS_AFTER
from .ranking import cosine_similarity, rank_candidates, EPSILON
from .context import ContextAssembler, CHUNK_OVERHEAD_TOKENS
from .models import Document, Candidate, RankedCandidate, QueryResult, NO_MATCHES_MESSAGE

__all__ = [
    'RAGPipeline',
    'KeywordFilter',
    'ContextAssembler',
    'Document',
    'Candidate',
    'RankedCandidate',
    'QueryResult',
    'cosine_similarity',
    'rank_candidates',
    'STOP_WORDS',
    'SNIPPET_CHARS_BEFORE',
    'SNIPPET_CHARS_AFTER',
    'EPSILON',
    'CHUNK_OVERHEAD_TOKENS',
    'GENERATING_MESSAGE',
    'NO_MATCHES_MESSAGE',
]
