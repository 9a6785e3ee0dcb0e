"""Builds the token-bounded context window handed to answer generation."""

from ...common.utils import count_tokens, to_percent, whitespace_tokens
from ..domain import SearchResult

DEFAULT_MAX_TOKENS = 2000
# A partial fragment is only worth adding with at least this much budget left
MIN_PARTIAL_TOKENS = 50


class ContextBuilder:
    """Concatenates ranked documents under a whitespace-token budget.

    Every document is preceded by a provenance header naming its source and
    relevance. Header tokens count toward the budget, so the returned text
    never holds more than ``max_tokens`` whitespace-delimited tokens.
    """

    def __init__(
        self,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        min_partial_tokens: int = MIN_PARTIAL_TOKENS,
    ) -> None:
        self.max_tokens = max_tokens
        self.min_partial_tokens = min_partial_tokens

    @staticmethod
    def format_header(result: SearchResult) -> str:
        name = result.document.metadata.name
        return f'--- From "{name}" ({to_percent(result.similarity)}% relevant) ---'

    def build_context(
        self,
        results: list[SearchResult],
        query: str,
        max_tokens: int | None = None,
    ) -> str:
        """Assemble the context window for a query.

        Documents are added whole, most similar first, while they fit. The
        first document that does not fit is truncated to the remaining
        budget if at least ``min_partial_tokens`` remain, and nothing after
        it is considered.

        Args:
            results: Search results to draw from.
            query: The query being answered.
            max_tokens: Token budget, defaults to the builder's setting.

        Returns:
            The context text, stripped of surrounding whitespace.
        """
        budget = self.max_tokens if max_tokens is None else max_tokens
        if not results or budget <= 0:
            return ""

        ordered = sorted(results, key=lambda result: result.similarity, reverse=True)

        sections: list[str] = []
        used = 0
        for result in ordered:
            header = self.format_header(result)
            header_tokens = count_tokens(header)
            content = result.document.content.strip()
            content_tokens = whitespace_tokens(content)

            if used + header_tokens + len(content_tokens) <= budget:
                sections.append(f"{header}\n{content}")
                used += header_tokens + len(content_tokens)
                continue

            remaining = budget - used - header_tokens
            if remaining >= self.min_partial_tokens:
                partial = " ".join(content_tokens[:remaining])
                sections.append(f"{header}\n{partial}...")
            break

        return "\n\n".join(sections).strip()
