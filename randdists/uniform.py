"""Uniform distribution sampler."""

from __future__ import annotations

import getopt
import random
import sys
from collections.abc import Iterator, Sequence

from randdists.normal import _emit, _int_opt, _options, _report, _usage_failure

USAGE = "uniform -c sample_count -l lower-bound -h upper-bound"
_OPTIONS = "c:h:l:"


def uniform_samples(
    count: int, low: float, high: float, rng: random.Random | None = None
) -> Iterator[float]:
    """Return an iterator over count uniform samples in [low, high).

    Raises ValueError when low is not below high.
    """
    if low >= high:
        raise ValueError("lower bound must  be below upper bound")
    source = random if rng is None else rng
    return ((high - low) * source.random() + low for _ in range(count))


def main(argv: Sequence[str] | None = None) -> int:
    """Print uniform samples, one per line."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    low = float(_int_opt(opts, "-l", 0))
    high = float(_int_opt(opts, "-h", 1))
    samples = _int_opt(opts, "-c", 1)

    try:
        values = uniform_samples(samples, low, high, random.Random())
    except ValueError as exc:
        return _report(str(exc))

    return _emit(f"{value:f}" for value in values)


if __name__ == "__main__":
    sys.exit(main())