"""Shared test fixtures and helpers for the vertical-label-placement test suite."""

from __future__ import annotations

import random

import pytest

from vertical_label_placement.labels import Label

# --- Documented scenarios ---

SPREAD_POSITIONS = [-10, -1, 1, 10]
SPREAD_SEPARATION = 10


# --- Oracle helpers ---


def _separated_sequences(n: int, separation: int, lo: int, hi: int, prefix: list[int]):
    """Yield every integer sequence in [lo, hi] with consecutive gaps >= separation."""
    if len(prefix) == n:
        yield list(prefix)
        return
    start = lo if not prefix else prefix[-1] + separation
    for y in range(start, hi + 1):
        prefix.append(y)
        yield from _separated_sequences(n, separation, lo, hi, prefix)
        prefix.pop()


def brute_force_max_offset(
    preferred: list[int],
    separation: int,
    min_bound: int | None = None,
    max_bound: int | None = None,
) -> int:
    """Smallest achievable maximum offset, found by exhaustive search.

    Only practical for a handful of labels with small positions.
    """
    n = len(preferred)
    # No optimal label moves further than half the crowded span
    reach = (max(preferred) - min(preferred) + (n - 1) * separation) // 2 + 1
    lo = min(preferred) - reach
    hi = max(preferred) + reach
    if min_bound is not None:
        lo, hi = min_bound, max_bound

    best = None
    for ys in _separated_sequences(n, separation, lo, hi, []):
        cost = max(abs(y - p) for p, y in zip(preferred, ys))
        if best is None or cost < best:
            best = cost
    assert best is not None, "no feasible placement in search window"
    return best


def random_cases(seed: int, count: int, max_labels: int = 4) -> list[tuple[list[int], int]]:
    """Sorted small-integer position lists with a separation each."""
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        n = rng.randint(1, max_labels)
        preferred = sorted(rng.randint(-6, 6) for _ in range(n))
        cases.append((preferred, rng.randint(0, 4)))
    return cases


# --- Pytest fixtures ---


@pytest.fixture
def spread_labels() -> list[Label]:
    """Four captioned markers that crowd together at separation 10."""
    return [
        Label(text="low", position=-10),
        Label(text="mid-low", position=-1),
        Label(text="mid-high", position=1),
        Label(text="high", position=10),
    ]


@pytest.fixture
def shuffled_labels() -> list[Label]:
    """Captioned markers given out of axis order, with one tie."""
    return [
        Label(text="c", position=30),
        Label(text="a", position=0),
        Label(text="b1", position=5),
        Label(text="b2", position=5),
    ]
