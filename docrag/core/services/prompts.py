"""Prompt templates for answer generation."""

SYSTEM_PROMPT_TEMPLATE = """You are a helpful AI assistant that answers questions based on the provided context.
Use the context to provide accurate and relevant answers. If the context doesn't contain enough information
to answer the question, say so clearly.

Context:
{context}

Please provide a comprehensive answer based on the context above."""


def build_system_prompt(context: str) -> str:
    """Embed the retrieved context in the system instruction."""
    return SYSTEM_PROMPT_TEMPLATE.format(context=context or "No context provided.")
