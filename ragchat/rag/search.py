"""Keyword-based candidate selection and snippet extraction."""

import re
from typing import Iterable, List, Optional

from .models import Candidate, Document

STOP_WORDS = frozenset({
    "what", "are", "the", "is", "of", "on", "to", "in", "and", "or",
    "a", "an", "for", "this", "that", "with",
})

# Snippet window around the first keyword hit
SNIPPET_CHARS_BEFORE = 50
SNIPPET_CHARS_AFTER = 150

_NON_WORD_RE = re.compile(r"\W+")
_NEWLINES_RE = re.compile(r"\n+")


class KeywordFilter:
    """Narrows a document set to the ones mentioning any query keyword.

    Matching is plain substring containment on lower-cased text, so
    "cat" also matches "category".
    """

    def __init__(self, stop_words=STOP_WORDS, before=SNIPPET_CHARS_BEFORE, after=SNIPPET_CHARS_AFTER):
        self.stop_words = frozenset(stop_words)
        self.before = before
        self.after = after

    def extract_keywords(self, query: str) -> List[str]:
        """Lowercase, split on non-word runs, drop stop words and repeats."""
        tokens = _NON_WORD_RE.split(query.lower())
        keywords = [t for t in tokens if t and t not in self.stop_words]
        return list(dict.fromkeys(keywords))

    def extract_snippet(self, content: str, keywords: List[str]) -> Optional[str]:
        """Return the window around the earliest keyword hit, or None if there is none."""
        content_lower = content.lower()
        first_idx = -1
        for word in keywords:
            idx = content_lower.find(word)
            if idx != -1 and (first_idx == -1 or idx < first_idx):
                first_idx = idx
        if first_idx == -1:
            return None

        window = content[max(0, first_idx - self.before):first_idx + self.after]
        return _NEWLINES_RE.sub(" ", window)

    def find_candidates(self, query: str, documents: Iterable[Document]) -> List[Candidate]:
        """Return a candidate for every document containing a keyword, in input order."""
        keywords = self.extract_keywords(query)
        if not keywords:
            return []
        return self.filter_documents(keywords, documents)

    def filter_documents(self, keywords: List[str], documents: Iterable[Document]) -> List[Candidate]:
        candidates = []
        for doc in documents:
            content_lower = doc.content.lower()
            if not any(word in content_lower for word in keywords):
                continue
            snippet = self.extract_snippet(doc.content, keywords)
            if snippet is None:
                continue
            candidates.append(Candidate(document=doc, snippet=snippet))
        return candidates
