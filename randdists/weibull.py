"""Weibull distribution: quantile and a sampler command.

For scale a and shape b the CDF is 1 - exp(-(x / a)**b).
"""

from __future__ import annotations

import getopt
import math
import random
import sys
from collections.abc import Sequence

from randdists.normal import _emit, _float_opt, _int_opt, _options, _report, _usage_failure

USAGE = "weibull -a a -b b [-c sample_count | -q quantile] [-V]"
_OPTIONS = "a:b:c:Vq:"


def inverted_weibull_cdf(y: float, a: float, b: float) -> float:
    """Weibull quantile at probability y for scale a and shape b.

    y == 1 gives infinity; y outside [0, 1] raises ValueError.
    """
    if y < 0 or y > 1:
        raise ValueError(f"probability {y} is outside [0, 1]")
    exponent = 1.0 / b if b else math.copysign(math.inf, b)
    if y == 1:
        return a * math.inf ** exponent
    return a * (-math.log(1.0 - y)) ** exponent


def main(argv: Sequence[str] | None = None) -> int:
    """Print one quantile or a number of Weibull samples."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    a = _float_opt(opts, "-a", 1.0)
    b = _float_opt(opts, "-b", 1.0)
    samples = _int_opt(opts, "-c", -1)
    quantile = _float_opt(opts, "-q", -1.0)

    if samples < 1 and quantile < 0:
        return _usage_failure(USAGE)

    if samples > 0 and 0 < quantile < 1:
        return _report("specify either sample count or quantile of interest")

    try:
        if quantile > 0:
            return _emit([f"{inverted_weibull_cdf(quantile, a, b):f}"])
        rng = random.Random()
        return _emit(f"{inverted_weibull_cdf(rng.random(), a, b):f}" for _ in range(samples))
    except ValueError as exc:
        return _report(str(exc))


if __name__ == "__main__":
    sys.exit(main())