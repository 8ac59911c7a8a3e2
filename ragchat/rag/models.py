"""Data records passed between the pipeline stages."""

from dataclasses import dataclass, field
from typing import List, Optional

NO_MATCHES_MESSAGE = "no matching notes found."


@dataclass(frozen=True)
class Document:
    """A note from the vault: identifier plus full text."""
    doc_id: str
    content: str


@dataclass(frozen=True)
class Candidate:
    """A lexically relevant document and the snippet extracted from it."""
    document: Document
    snippet: str

    @property
    def doc_id(self) -> str:
        return self.document.doc_id


@dataclass(frozen=True)
class RankedCandidate:
    """A candidate with its cosine similarity to the query."""
    candidate: Candidate
    similarity: float

    @property
    def doc_id(self) -> str:
        return self.candidate.doc_id

    @property
    def snippet(self) -> str:
        return self.candidate.snippet

    @property
    def percent(self) -> float:
        """Similarity as a 0-100 value for display; ranking uses the raw score."""
        return max(0.0, min(1.0, self.similarity)) * 100


@dataclass
class QueryResult:
    """Outcome of one pipeline run.

    Attributes:
        status: "answered" or "no_matches"
        answer: Model answer, or the no-match message
        context: Context string sent to the chat model ("" when not answered)
        keywords: Keywords extracted from the query
        ranked: Candidates in ranking order
    """
    status: str
    answer: str
    context: str = ""
    keywords: List[str] = field(default_factory=list)
    ranked: List[RankedCandidate] = field(default_factory=list)

    @property
    def has_answer(self) -> bool:
        return self.status == "answered"

    @classmethod
    def no_matches(cls, keywords: Optional[List[str]] = None) -> "QueryResult":
        return cls(status="no_matches", answer=NO_MATCHES_MESSAGE, keywords=list(keywords or []))
