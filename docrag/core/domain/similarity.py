"""Vector similarity measures."""

from collections.abc import Sequence

import numpy as np

from .exceptions import DimensionMismatchError


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Args:
        vec_a: First vector.
        vec_b: Second vector.

    Returns:
        Similarity in [-1, 1]. 0.0 when either vector has zero norm.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    if len(vec_a) != len(vec_b):
        raise DimensionMismatchError(
            "Cannot compare vectors of different dimensions",
            context={"left": len(vec_a), "right": len(vec_b)},
        )

    a = np.asarray(vec_a, dtype=float)
    b = np.asarray(vec_b, dtype=float)

    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    similarity = float(np.dot(a, b)) / (norm_a * norm_b)
    # Clamp floating point drift so identical vectors report exactly 1.0
    return max(-1.0, min(1.0, similarity))
