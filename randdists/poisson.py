"""Poisson distribution: probability mass function and a sampler command."""

from __future__ import annotations

import getopt
import math
import random
import sys
from collections.abc import Sequence

from randdists.normal import _emit, _float_opt, _int_opt, _options, _report, _usage_failure

USAGE = "poisson -l lambda -c sample_count [-V]"
_OPTIONS = "c:l:V"


def poisson_pmf(k: int, lam: float) -> float:
    """Probability that a Poisson variable with mean lam equals k."""
    if k < 0:
        raise ValueError(f"count {k} is negative")
    return math.exp(-lam) * math.prod(lam / (i + 1) for i in range(k))


def inverted_poisson_cdf(lam: float, rng: random.Random | None = None) -> int:
    """Draw a Poisson variable with mean lam by multiplying uniforms."""
    source = random if rng is None else rng
    limit = math.exp(-lam)
    n = 0
    x = source.random()
    while x > limit:
        n += 1
        x *= source.random()
    return n


def main(argv: Sequence[str] | None = None) -> int:
    """Print Poisson samples, one per line, when -V is given."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    lam = _float_opt(opts, "-l", 0.0)
    samples = _int_opt(opts, "-c", -1)
    if samples < 1:
        return _usage_failure(USAGE)

    if "-V" not in opts:
        _report("only generates samples (using -V flag) for now")
        return 0

    rng = random.Random()
    return _emit(str(inverted_poisson_cdf(lam, rng)) for _ in range(samples))


if __name__ == "__main__":
    sys.exit(main())