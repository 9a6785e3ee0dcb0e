"""Answer generation with an extractive fallback."""

import logging
import re

from ...common.utils import to_percent
from ..domain import SearchResult
from ..ports.llm_port import LLMPort
from .prompts import build_system_prompt

logger = logging.getLogger(__name__)

INSUFFICIENT_INFORMATION_TEMPLATE = (
    "I don't have enough information in the current document collection to answer "
    '"{query}". Please add more relevant documents or try rephrasing your question.'
)
NO_CONTENT_MESSAGE = "I was unable to generate a response. Please try again."

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
MIN_SENTENCE_LENGTH = 20
MAX_RELEVANT_SENTENCES = 5
FALLBACK_SENTENCES = 3


class AnswerGenerator:
    """Produces a natural-language answer from a query and its context.

    The completion provider is used when available. If it is missing or
    fails, an extractive summary is assembled from the context instead, so
    callers always receive text.
    """

    def __init__(
        self,
        llm: LLMPort | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> None:
        self.llm = llm
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate(self, query: str, context_text: str, sources: list[SearchResult]) -> str:
        """Answer a query.

        Args:
            query: The user's original query.
            context_text: Context window built from the sources.
            sources: Search results the context was built from.

        Returns:
            Answer text.
        """
        if not context_text or not sources:
            return INSUFFICIENT_INFORMATION_TEMPLATE.format(query=query)

        if self.llm is None:
            return self.extractive_answer(query, context_text, sources)

        try:
            answer = self.llm.generate(
                query,
                system_prompt=build_system_prompt(context_text),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.warning(
                "Answer generation failed, using extractive fallback: %s: %s",
                type(e).__name__,
                e,
            )
            return self.extractive_answer(query, context_text, sources)

        if not answer or not answer.strip():
            return NO_CONTENT_MESSAGE
        return answer.strip()

    def extractive_answer(self, query: str, context_text: str, sources: list[SearchResult]) -> str:
        """Summarize the context by picking sentences that mention the query.

        Up to five sentences sharing a token with the query are kept. When
        none match, the first three sentences are used.
        """
        average = sum(source.similarity for source in sources) / len(sources)
        relevance = to_percent(average)
        source_names = ", ".join(source.document.metadata.name for source in sources)

        answer = (
            f"Based on the information from {len(sources)} document(s) ({source_names}), "
            f'here\'s what I found regarding "{query}":\n\n'
        )

        sentences = [
            sentence.strip()
            for sentence in _SENTENCE_SPLIT_RE.split(context_text)
            if len(sentence.strip()) > MIN_SENTENCE_LENGTH
        ]
        query_words = query.lower().split()
        relevant = [
            sentence for sentence in sentences if self._overlaps(query_words, sentence)
        ][:MAX_RELEVANT_SENTENCES]
        selected = relevant or sentences[:FALLBACK_SENTENCES]

        if selected:
            answer += ". ".join(selected) + "."

        answer += (
            f"\n\nThis response is based on {len(sources)} source document(s) "
            f"with an average relevance score of {relevance}%."
        )
        return answer

    @staticmethod
    def _overlaps(query_words: list[str], sentence: str) -> bool:
        sentence_words = sentence.lower().split()
        return any(
            word in sentence_word or sentence_word in word
            for word in query_words
            for sentence_word in sentence_words
        )
