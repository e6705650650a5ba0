"""Range reduction: bounds, zero-range rejection, modulo bias, rejection sampling."""

from __future__ import annotations

import pytest

from fair_random.core.errors import ErrorKind, InvalidRangeError
from fair_random.reduction import (
    ReductionPolicy,
    modulo_bias,
    reduce,
    reduce_from_stream,
    rejection_limit,
    resolve_policy,
)
from fair_random.stream import NumberStream

SEED = bytes(range(1, 33))
_RAWS = [0, 1, 2, 99, 100, 12345, 2**32, 2**63, 2**64 - 2, 2**64 - 1]
_RANGES = [1, 2, 3, 7, 10, 100, 1000, 2**32 + 1, 2**63, 2**64 - 1]


@pytest.mark.parametrize("range_", _RANGES)
def test_reduce_within_range(range_):
    """For every raw word and range > 0: 0 <= reduce(raw, range) < range."""
    for raw in _RAWS:
        v = reduce(raw, range_)
        assert 0 <= v < range_
        assert v == raw % range_


@pytest.mark.parametrize("range_", [0, -1])
def test_reduce_zero_range_fails_fast(range_):
    """Range <= 0 raises InvalidRangeError instead of dividing by zero."""
    with pytest.raises(InvalidRangeError) as exc_info:
        reduce(123, range_)
    assert exc_info.value.kind is ErrorKind.INVALID_RANGE


def test_reduce_rejects_out_of_domain_raw():
    """Raw words outside [0, 2**64) are rejected."""
    with pytest.raises(ValueError):
        reduce(2**64, 10)
    with pytest.raises(ValueError):
        reduce(-1, 10)


def test_range_above_u64_rejected():
    """A range of 2**64 or more does not fit the draw interface."""
    with pytest.raises(InvalidRangeError):
        reduce(1, 2**64)


def test_modulo_bias_values():
    """Zero when range divides 2**64; (range - 2**64 % range) / 2**64 otherwise; always < range / 2**64."""
    assert modulo_bias(1) == 0.0
    assert modulo_bias(256) == 0.0
    assert modulo_bias(2**63) == 0.0
    assert modulo_bias(3) == 2 / 2**64
    for r in (3, 10, 100, 1000, 2**32 + 1, 2**63 + 1):
        b = modulo_bias(r)
        assert 0.0 < b < r / 2**64


def test_rejection_limit():
    """Limit is the largest multiple of range not above 2**64."""
    assert rejection_limit(1) == 2**64
    assert rejection_limit(2**32) == 2**64
    assert rejection_limit(3) == 2**64 - 1
    assert rejection_limit(2**63 + 1) == 2**63 + 1


def test_reduce_from_stream_modulo_consumes_one_word():
    """MODULO uses exactly one word per value."""
    s = NumberStream(SEED)
    ref = NumberStream(SEED)
    for _ in range(10):
        assert reduce_from_stream(s, 100, ReductionPolicy.MODULO) == ref.next_u64() % 100
    assert s.counter == 10


def test_reduce_from_stream_rejection_skips_partial_bucket():
    """With range 2**63 + 1 about half the words are rejected; accepted ones keep their order."""
    range_ = 2**63 + 1
    limit = rejection_limit(range_)
    s = NumberStream(SEED)
    ref = NumberStream(SEED)
    for _ in range(20):
        v = reduce_from_stream(s, range_, "rejection")
        while True:
            raw = ref.next_u64()
            if raw < limit:
                break
        assert v == raw % range_
        assert 0 <= v < range_
    assert s.counter == ref.counter
    assert s.counter > 20


def test_reduce_from_stream_zero_range_does_not_touch_stream():
    """A bad range fails before any word is drawn."""
    s = NumberStream(SEED)
    with pytest.raises(InvalidRangeError):
        reduce_from_stream(s, 0)
    assert s.counter == 0


def test_resolve_policy():
    """Names are case-insensitive; enum members pass through; unknown names raise."""
    assert resolve_policy("MODULO") is ReductionPolicy.MODULO
    assert resolve_policy(ReductionPolicy.REJECTION) is ReductionPolicy.REJECTION
    with pytest.raises(ValueError):
        resolve_policy("nope")


def test_resolve_policy_default_from_config(monkeypatch):
    """None resolves to the configured policy."""
    monkeypatch.delenv("FAIR_RANDOM_REDUCTION_POLICY", raising=False)
    assert resolve_policy(None) is ReductionPolicy.MODULO
    monkeypatch.setenv("FAIR_RANDOM_REDUCTION_POLICY", "rejection")
    assert resolve_policy(None) is ReductionPolicy.REJECTION
