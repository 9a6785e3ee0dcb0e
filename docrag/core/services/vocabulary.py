"""Static term tables used by the lexical vectorizer and the query processor.

These are configuration data. Swap them (via the constructors that accept
them) to tune for another language or domain.
"""

from types import MappingProxyType

LEXICAL_DIMENSIONS = 100

# Reference terms for the lexical vectorizer, in dimension order. Vectors are
# truncated to LEXICAL_DIMENSIONS, so only the first 100 terms contribute.
LEXICAL_VOCABULARY: tuple[str, ...] = (
    # Function words
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before",
    "after", "above", "below", "between", "among", "within", "without",
    "under", "over", "across", "behind", "beyond", "beside",
    # Domain terms
    "data", "information", "system", "process", "method", "result",
    "analysis", "research", "study", "report", "document", "content", "text",
    "file", "website", "application", "software", "technology", "computer",
    "digital", "online", "internet", "web", "database", "algorithm", "model",
    "machine", "learning", "artificial", "intelligence", "neural", "network",
    "deep", "training", "prediction", "classification", "feature", "pattern",
    "recognition", "natural", "language", "processing", "semantic",
    "similarity", "vector", "embedding", "retrieval", "generation", "query",
    "search", "index", "knowledge", "base", "repository", "storage", "memory",
    "cache", "optimization", "performance", "efficiency", "accuracy",
    "precision", "recall", "evaluation", "metric", "score", "threshold",
    "parameter", "configuration", "setting", "option", "choice",
)  # fmt: skip

QUERY_STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through",
        "during", "before", "after", "above", "below", "between", "among",
        "within", "without", "under", "over", "across", "behind", "beyond",
        "beside",
    }
)  # fmt: skip

QUERY_SYNONYMS = MappingProxyType(
    {
        "data": ("information", "content", "facts"),
        "analysis": ("examination", "study", "research"),
        "system": ("platform", "application", "software"),
        "process": ("method", "procedure", "workflow"),
        "result": ("outcome", "finding", "conclusion"),
        "document": ("file", "text", "content"),
        "search": ("find", "locate", "retrieve"),
        "information": ("data", "content", "details"),
    }
)
