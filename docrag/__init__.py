"""docrag - a small in-memory retrieval-augmented generation engine."""

__version__ = "1.0.0"
