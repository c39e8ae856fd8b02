"""Command that prints the normal cumulative probability of one value."""

from __future__ import annotations

import getopt
import sys
from collections.abc import Sequence

from randdists.normal import _emit, _float_opt, _options, _usage_failure, normal_cdf

USAGE = "normal-prob -m mu -s sigma -v value"
_OPTIONS = "m:s:v:"


def main(argv: Sequence[str] | None = None) -> int:
    """Print P(X <= value) for X ~ N(mu, sigma)."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    mu = _float_opt(opts, "-m", 0.0)
    sigma = _float_opt(opts, "-s", 1.0)
    value = _float_opt(opts, "-v", 0.0)
    return _emit([f"{normal_cdf(value, mu, sigma):f}"])


if __name__ == "__main__":
    sys.exit(main())