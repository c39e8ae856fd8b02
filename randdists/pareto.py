"""Pareto distribution: density, quantile and a sampler command.

For shape a and scale b the density is a * b**a / x**(a + 1) and the CDF
is 1 - (b / x)**a over x >= b.
"""

from __future__ import annotations

import getopt
import math
import random
import sys
from collections.abc import Iterator, Sequence

from randdists.normal import (
    _accumulated_table,
    _emit,
    _float_opt,
    _int_opt,
    _options,
    _usage_failure,
)

USAGE = "pareto -a a -b b -c sample_count -l low -h high [-VC]"
_OPTIONS = "a:b:c:h:l:VC"


def pareto_pdf(y: float, a: float, b: float) -> float:
    """Pareto density with shape a and scale b at y."""
    return (a * b**a) / y ** (a + 1.0)


def inverted_pareto_cdf(y: float, a: float, b: float) -> float:
    """Pareto quantile at probability y.

    y == 1 gives infinity; y outside [0, 1] raises ValueError.
    """
    if y < 0 or y > 1:
        raise ValueError(f"probability {y} is outside [0, 1]")
    if y == 1:
        return math.inf
    return b / (1.0 - y) ** (1.0 / a)


def _sample_lines(
    rng: random.Random, samples: int, a: float, b: float, low: float, high: float, values: bool
) -> Iterator[str]:
    for _ in range(samples):
        value = low + (high - low) * rng.random()
        if values:
            yield f"{inverted_pareto_cdf(rng.random(), a, b):f}"
        else:
            yield f"{value:3.4f} {pareto_pdf(value, a, b):3.4f}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print Pareto densities, samples or an accumulated CDF table."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    a = _float_opt(opts, "-a", 1.0)
    b = _float_opt(opts, "-b", 1.0)
    samples = _int_opt(opts, "-c", -1)
    low = float(_int_opt(opts, "-l", 1))
    high = float(_int_opt(opts, "-h", 1))

    if samples < 1:
        return _usage_failure(USAGE)

    # The distribution is defined over x >= b.
    low = max(low, b)

    if "-C" in opts:
        density = lambda y: pareto_pdf(y, a, b)  # noqa: E731
        return _emit(_accumulated_table(density, low, high, samples))

    rng = random.Random()
    return _emit(_sample_lines(rng, samples, a, b, low, high, "-V" in opts))


if __name__ == "__main__":
    sys.exit(main())