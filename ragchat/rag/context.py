"""Context assembly for fitting ranked snippets into a token budget."""

from typing import Dict, List, Sequence, Tuple

from ragchat.config import DEFAULT_TOKEN_BUDGET
from .models import RankedCandidate

# Per-snippet allowance for the "File: ..." label and separators
CHUNK_OVERHEAD_TOKENS = 20

BLOCK_SEPARATOR = "\n\n"


class ContextAssembler:
    """Packs ranked snippets into a bounded context string."""

    def __init__(self, token_budget=DEFAULT_TOKEN_BUDGET, overhead=CHUNK_OVERHEAD_TOKENS):
        """Initialize context assembler.

        Args:
            token_budget: Maximum approximate tokens of snippet text
            overhead: Tokens charged per snippet on top of its word count
        """
        self.token_budget = token_budget
        self.overhead = overhead

    def estimate_tokens(self, text: str) -> int:
        """Estimate token count as the number of whitespace-separated words."""
        return len(text.split())

    def cost(self, ranked: RankedCandidate) -> int:
        return self.estimate_tokens(ranked.snippet) + self.overhead

    def format_block(self, ranked: RankedCandidate) -> str:
        return f"File: {ranked.doc_id}\n{ranked.snippet}"

    def assemble(self, ranked: Sequence[RankedCandidate]) -> str:
        context, _ = self.assemble_with_stats(ranked)
        return context

    def assemble_with_stats(self, ranked: Sequence[RankedCandidate],
                            debug: bool = False) -> Tuple[str, Dict]:
        """Greedily take the longest prefix of ``ranked`` that fits the budget.

        Selection stops at the first snippet that would overflow; later
        snippets are not considered even if they are smaller.

        Args:
            ranked: Candidates in descending similarity order
            debug: Print a summary line

        Returns:
            Tuple of (context_string, assembly_stats)
        """
        if not ranked:
            return "", {"status": "no_chunks", "used_tokens": 0, "included": 0,
                        "dropped": 0, "max_allowed": self.token_budget}

        blocks: List[str] = []
        used_tokens = 0
        for item in ranked:
            tokens = self.cost(item)
            if used_tokens + tokens > self.token_budget:
                break
            used_tokens += tokens
            blocks.append(self.format_block(item))

        dropped = len(ranked) - len(blocks)
        stats = {
            "status": "truncated" if dropped else "no_truncation_needed",
            "used_tokens": used_tokens,
            "included": len(blocks),
            "dropped": dropped,
            "max_allowed": self.token_budget,
        }

        if debug:
            if dropped:
                print(f"[Context] Kept {len(blocks)}/{len(ranked)} snippets "
                      f"({used_tokens} tokens, limit {self.token_budget})")
            else:
                print(f"[Context] All {len(ranked)} snippets fit ({used_tokens} tokens, limit {self.token_budget})")

        return BLOCK_SEPARATOR.join(blocks), stats
