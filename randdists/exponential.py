"""Exponential distribution: CDF, quantile and a sampler command."""

from __future__ import annotations

import getopt
import math
import random
import sys
from collections.abc import Sequence

from randdists.normal import _emit, _float_opt, _int_opt, _options, _usage_failure

USAGE = "exponential -l lambda -c sample_count"
_OPTIONS = "c:l:V"


def exp_cdf(x: float, lam: float) -> float:
    """Probability that an exponential variable with rate lam is at most x."""
    if x < 0:
        return 0.0
    return 1.0 - math.exp(-lam * x)


def inv_exp(p: float, lam: float) -> float:
    """Quantile of the exponential distribution with rate lam.

    p == 1 gives infinity; p outside [0, 1] raises ValueError.
    """
    if p < 0 or p > 1:
        raise ValueError(f"probability {p} is outside [0, 1]")
    if p == 1:
        return math.inf
    return -math.log(1.0 - p) / lam


def main(argv: Sequence[str] | None = None) -> int:
    """Print exponentially distributed samples, one per line."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    lam = _float_opt(opts, "-l", 1.0)
    samples = _int_opt(opts, "-c", 0)
    if samples < 1:
        return _usage_failure(USAGE)

    rng = random.Random()
    return _emit(f"{inv_exp(rng.random(), lam):f}" for _ in range(samples))


if __name__ == "__main__":
    sys.exit(main())