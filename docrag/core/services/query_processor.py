"""Query normalization and synonym expansion."""

import re
from collections.abc import Iterable, Mapping

from .vocabulary import QUERY_STOPWORDS, QUERY_SYNONYMS

_PUNCTUATION_RE = re.compile(r"[^\w\s]")

# Tokens this short carry too little meaning to search on
MIN_TOKEN_LENGTH = 3


class QueryProcessor:
    """Normalizes raw queries and generates synonym variants."""

    def __init__(
        self,
        stopwords: Iterable[str] = QUERY_STOPWORDS,
        synonyms: Mapping[str, Iterable[str]] = QUERY_SYNONYMS,
    ) -> None:
        self.stopwords = frozenset(stopwords)
        self.synonyms = {term: tuple(alternatives) for term, alternatives in synonyms.items()}

    def preprocess(self, query: str) -> str:
        """Lowercase, strip punctuation, drop stopwords and short tokens.

        Args:
            query: Raw user query.

        Returns:
            Space-joined remaining tokens, possibly empty.
        """
        text = _PUNCTUATION_RE.sub(" ", query.lower())
        tokens = [
            token
            for token in text.split()
            if len(token) >= MIN_TOKEN_LENGTH and token not in self.stopwords
        ]
        return " ".join(tokens)

    def expand(self, query: str) -> list[str]:
        """Generate query variants with one token replaced by a synonym.

        The preprocessed query comes first, followed by variants in token
        order and then synonym order. Duplicates are skipped.

        Args:
            query: Raw user query.

        Returns:
            List of distinct query strings.
        """
        base_query = self.preprocess(query)
        expansions = [base_query]
        tokens = base_query.split()

        for position, token in enumerate(tokens):
            for synonym in self.synonyms.get(token, ()):
                variant = " ".join([*tokens[:position], synonym, *tokens[position + 1 :]])
                if variant not in expansions:
                    expansions.append(variant)

        return expansions
