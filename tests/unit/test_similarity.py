import pytest

from docrag.core.domain import cosine_similarity
from docrag.core.domain.exceptions import DimensionMismatchError

pytestmark = pytest.mark.unit


class TestCosineSimilarity:
    """Tests for the cosine similarity measure."""

    def test_identical_vectors(self):
        assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_vectors(self):
        assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)

    def test_scale_invariant(self):
        assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)

    def test_zero_vector_scores_zero(self):
        """A zero-norm vector has no direction, so similarity is 0."""
        assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
        assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0

    def test_length_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])

        assert exc_info.value.error_code == "RAG_VEC_002"

    def test_result_stays_in_range(self):
        value = cosine_similarity([0.3, 0.1, 0.7], [0.9, 0.4, 0.2])
        assert -1.0 <= value <= 1.0
