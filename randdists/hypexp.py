"""Hyper-exponential distribution with up to three phases, read from a config file."""

from __future__ import annotations

import dataclasses
import getopt
import math
import random
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

from randdists.normal import _atof, _atoi, _emit, _int_opt, _options, _report

USAGE = "hypexp -f paramfile\n\t-C count\n\t-S seed (optional)\n"
_OPTIONS = "f:C:S:"
_SEPARATORS = re.compile(r"[ \t]+")


@dataclass
class HypExpParams:
    """Phase probabilities and rates of a hyper-exponential model."""

    ep_1: float = 0.0
    ep_2: float = 0.0
    lambda_1: float = 0.0
    lambda_2: float = 0.0
    lambda_3: float = 0.0
    sample_size: float = 0.0

    def set_from_line(self, tokens: Sequence[str]) -> None:
        """Set one parameter from a ``keyword value`` token pair.

        Raises ValueError when the line is too short or the keyword unknown.
        """
        if len(tokens) < 2:
            raise ValueError("parameter line needs a keyword and a value")
        keyword, value = tokens[0], tokens[1]
        if keyword not in _PARAM_NAMES:
            raise ValueError(f"unknown parameter {keyword!r}")
        setattr(self, keyword, _atof(value))


_PARAM_NAMES = frozenset(field.name for field in dataclasses.fields(HypExpParams))


def parse_config_file(path: str | PathLike[str]) -> HypExpParams:
    """Read parameters from a file of ``keyword value`` lines.

    Blank lines and lines starting with '#' are skipped; unknown or
    malformed lines are reported on stderr and ignored. Raises OSError
    when the file cannot be opened.
    """
    params = HypExpParams()
    with open(path, encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            tokens = [token for token in _SEPARATORS.split(line.rstrip("\r\n")) if token]
            if not tokens or tokens[0].startswith("#"):
                continue
            try:
                params.set_from_line(tokens)
            except ValueError:
                print(f"bad param at line number {line_no}", file=sys.stderr)
    return params


def _exponential_draw(r: float, lam: float) -> float:
    magnitude = -math.log(1.0 - r)
    if lam == 0:
        return math.inf if magnitude > 0 else math.nan
    return magnitude / lam


def generate_3p_sample(params: HypExpParams, rng: random.Random | None = None) -> float:
    """Draw one sample from the hyper-exponential model.

    When ep_2 is zero the model has two phases with probabilities ep_1 and
    1 - ep_1. Raises ValueError for an empty model (all rates zero), a
    negative first or second rate, or invalid phase probabilities.
    """
    source = random if rng is None else rng
    lambda1, lambda2, lambda3 = params.lambda_1, params.lambda_2, params.lambda_3
    pr1, pr2 = params.ep_1, params.ep_2

    if lambda1 == 0.0 and lambda2 == 0.0 and lambda3 == 0.0:
        raise ValueError("empty model: every rate is zero")
    if lambda1 < 0.0:
        raise ValueError("specify valid lambda1 value")
    if lambda2 < 0.0:
        raise ValueError("specify valid lambda2 value")
    if not (0.0 <= pr1 <= 1.0) or not (0.0 <= pr2 <= 1.0) or pr1 + pr2 > 1.0:
        raise ValueError("specify valid probabilities")

    if pr2 == 0:
        pr2 = 1.0 - pr1

    r1 = source.random()
    r2 = source.random()
    if r1 < pr1:
        lam = lambda1
    elif r1 < pr1 + pr2:
        lam = lambda2
    else:
        lam = lambda3
    return _exponential_draw(r2, lam)


def _sample_lines(params: HypExpParams, rng: random.Random, count: int) -> Iterator[str]:
    for _ in range(count):
        try:
            value = generate_3p_sample(params, rng)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            value = -1.0
        yield f"{value:f}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print samples drawn from the model in a parameter file."""
    usage = USAGE.rstrip("\n")
    try:
        opts = _options(argv, _OPTIONS)
    except getopt.GetoptError as exc:
        return _report(f"bad param {exc.opt}", usage)

    param_file = opts.get("-f", "")
    count = _int_opt(opts, "-C", 0)
    seed = _atoi(opts["-S"]) if "-S" in opts else None

    if not param_file:
        return _report("must specify paramfile name", usage)
    if count == 0:
        return _report("must specify sample count", usage)

    rng = random.Random(seed) if seed is not None else random.Random()

    try:
        params = parse_config_file(param_file)
    except OSError:
        return _report(f"couldn't open config file {param_file}", "error parsing paramfile")

    return _emit(_sample_lines(params, rng, count))


if __name__ == "__main__":
    sys.exit(main())