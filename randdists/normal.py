"""Normal distribution: density, distribution function, quantile and a sampler command."""

from __future__ import annotations

import getopt
import math
import random
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from functools import reduce

USAGE = "normal -m mu -s sigma -c sample_count -l low -h high [-VCT]"
_OPTIONS = "m:s:c:h:l:VCT"

# The density keeps the historical truncated value of pi.
_PI = 3.14159265

# Coefficients of the rational approximations to the inverse normal CDF.
_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

_P_LOW = 0.02425
_P_HIGH = 0.97575

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _atof(text: str) -> float:
    """Leading float of text, 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _atoi(text: str) -> int:
    """Leading integer of text, 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _options(argv: Sequence[str] | None, optstring: str) -> dict[str, str]:
    """Parse command options; the last occurrence of a flag wins."""
    args = sys.argv[1:] if argv is None else list(argv)
    opts, _ = getopt.getopt(args, optstring)
    return dict(opts)


def _float_opt(opts: Mapping[str, str], flag: str, default: float) -> float:
    return _atof(opts[flag]) if flag in opts else default


def _int_opt(opts: Mapping[str, str], flag: str, default: int) -> int:
    return _atoi(opts[flag]) if flag in opts else default


def _report(*lines: str | None) -> int:
    """Print the given lines on stderr and return a failing exit status."""
    for line in lines:
        if line is not None:
            print(line, file=sys.stderr)
    sys.stderr.flush()
    return 1


def _usage_failure(usage: str, message: str | None = None) -> int:
    return _report(message, f"usage: {usage}")


def _emit(lines: Iterable[str]) -> int:
    """Write lines to stdout and return a successful exit status."""
    out = sys.stdout
    for line in lines:
        out.write(f"{line}\n")
    out.flush()
    return 0


def _accumulated_table(
    density: Callable[[float], float], low: float, high: float, steps: int
) -> Iterator[str]:
    """Rows of a left Riemann sum of density over [low, high)."""
    incr = (high - low) / steps
    curr = low
    acc = 0.0
    for _ in range(steps):
        acc += density(curr) * incr
        yield f"{curr:3.4f} {acc:3.4f}"
        curr += incr


def _horner(coefficients: Sequence[float], x: float) -> float:
    return reduce(lambda acc, coef: acc * x + coef, coefficients, 0.0)


def normal_pdf(y: float, mu: float, sigma: float) -> float:
    """Density of N(mu, sigma) at y."""
    z = (y - mu) / sigma
    return math.exp(-0.5 * z * z) / (math.sqrt(2.0 * _PI) * sigma)


def normal_cdf(x: float, mu: float, sigma: float) -> float:
    """Probability that an N(mu, sigma) variable is at most x."""
    return 0.5 * (1.0 + math.erf((x - mu) / (math.sqrt(2.0) * sigma)))


def inv_normal(p: float, mu: float, sigma: float) -> float:
    """Quantile of N(mu, sigma) at probability p.

    Raises ValueError when p lies outside [0, 1]; p == 0 and p == 1 give
    negative and positive infinity.
    """
    if p < 0 or p > 1:
        raise ValueError(f"probability {p} is outside [0, 1]")
    if p == 0:
        return -math.inf
    if p == 1:
        return math.inf

    if p < _P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        x = _horner(_C, q) / _horner(_D + (1.0,), q)
    elif p > _P_HIGH:
        q = math.sqrt(-2.0 * math.log(1.0 - p))
        x = -_horner(_C, q) / _horner(_D + (1.0,), q)
    else:
        q = p - 0.5
        r = q * q
        x = _horner(_A, r) * q / _horner(_B + (1.0,), r)

    # One step of Halley's method to refine the approximation.
    e = 0.5 * math.erfc(-x / math.sqrt(2.0)) - p
    u = e * math.sqrt(2.0 * math.pi) * math.exp(x * x / 2.0)
    x = x - u / (1.0 + x * u / 2.0)

    return x * sigma + mu


def inv_normal_cond_between(r: float, a: float, b: float, mu: float, sigma: float) -> float:
    """Quantile r of N(mu, sigma) conditioned on lying between a and b."""
    lower = normal_cdf(a, mu, sigma)
    upper = normal_cdf(b, mu, sigma)
    return inv_normal(r * upper + (1.0 - r) * lower, mu, sigma)


def inv_normal_cond_less(r: float, b: float, mu: float, sigma: float) -> float:
    """Quantile r of N(mu, sigma) conditioned on lying below b."""
    upper = normal_cdf(b, mu, sigma)
    return inv_normal(r * upper, mu, sigma)


def inv_normal_cond_greater(r: float, a: float, mu: float, sigma: float) -> float:
    """Quantile r of N(mu, sigma) conditioned on lying above a."""
    lower = normal_cdf(a, mu, sigma)
    return inv_normal(r + (1.0 - r) * lower, mu, sigma)


def _sample_lines(
    rng: random.Random, samples: int, mu: float, sigma: float, low: float, high: float, values: bool
) -> Iterator[str]:
    for _ in range(samples):
        r = rng.random()
        if values:
            yield f"{inv_normal(r, mu, sigma):f}"
        else:
            value = low + (high - low) * r
            yield f"{value:3.4f} {normal_pdf(value, mu, sigma):3.4f}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print normal densities, samples or an accumulated CDF table."""
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _usage_failure(USAGE, f"unrecognize arg: {exc.opt}")

    mu = _float_opt(opts, "-m", 0.0)
    sigma = _float_opt(opts, "-s", 1.0)
    samples = _int_opt(opts, "-c", -1)
    low = float(_int_opt(opts, "-l", -1))
    high = float(_int_opt(opts, "-h", 1))

    if samples < 1:
        return _usage_failure(USAGE)

    if "-C" in opts:
        density = lambda y: normal_pdf(y, mu, sigma)  # noqa: E731
        return _emit(_accumulated_table(density, low, high, samples))

    rng = random.Random(10) if "-T" in opts else random.Random()
    return _emit(_sample_lines(rng, samples, mu, sigma, low, high, "-V" in opts))


if __name__ == "__main__":
    sys.exit(main())