import pytest

from docrag.common.rate_limiter import RateLimiter, is_rate_limit_error
from docrag.common.utils import (
    clean_text,
    count_tokens,
    normalize_text,
    to_percent,
    word_tokens,
)


class TestTextUtils:
    """Unit tests for the shared text helpers."""

    @pytest.mark.unit
    def test_clean_text_strips_bom(self):
        assert clean_text("\ufeffhello\ufffd") == "hello"

    @pytest.mark.unit
    def test_normalize_collapses_whitespace(self):
        assert normalize_text("  a \n\n b\t c ") == "a b c"
        assert normalize_text(None) == ""

    @pytest.mark.unit
    def test_count_tokens_is_whitespace_based(self):
        assert count_tokens("don't stop-me now") == 3
        assert count_tokens("") == 0

    @pytest.mark.unit
    def test_word_tokens(self):
        assert word_tokens("Hello, World! 42") == ["hello", "world", "42"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 0), (0.125, 13), (0.5, 50), (0.875, 88), (0.004, 0), (1.0, 100)],
    )
    def test_to_percent_rounds_half_up(self, value, expected):
        assert to_percent(value) == expected


class TestRateLimiter:
    """Unit tests for the token-bucket limiter."""

    @pytest.mark.unit
    def test_disabled_limiter_never_blocks(self):
        limiter = RateLimiter(None)
        assert not limiter.enabled
        for _ in range(100):
            limiter.acquire()

    @pytest.mark.unit
    def test_capacity_consumed(self):
        limiter = RateLimiter(60)
        assert limiter.enabled
        limiter.acquire()
        limiter.acquire()
        assert limiter.tokens == pytest.approx(58, abs=1)

    @pytest.mark.unit
    def test_empty_bucket_reports_wait(self):
        limiter = RateLimiter(2)
        limiter.acquire()
        limiter.acquire()
        assert limiter._take() > 0

    @pytest.mark.unit
    def test_rate_limit_detection(self):
        quota = RuntimeError("Quota exceeded for model")
        throttled = RuntimeError("whatever")
        throttled.code = 429

        assert is_rate_limit_error(quota)
        assert is_rate_limit_error(throttled)
        assert not is_rate_limit_error(RuntimeError("invalid argument"))
