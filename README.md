# randdists

Density, cumulative distribution and inverse functions for a handful of
common probability distributions, plus small command-line tools that print
values drawn from them, one per line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from randdists.normal import normal_pdf, normal_cdf, inv_normal
from randdists.exponential import exp_cdf, inv_exp
from randdists.pareto import pareto_pdf, inverted_pareto_cdf
from randdists.weibull import inverted_weibull_cdf

normal_cdf(0.0, 0.0, 1.0)          # 0.5
inv_normal(0.975, 0.0, 1.0)        # about 1.96
inv_exp(0.5, 2.0)                  # median of an exponential with rate 2
inverted_weibull_cdf(0.5, 1.0, 1.0)
```

`inv_normal`, `inv_exp`, `inverted_pareto_cdf` and `inverted_weibull_cdf`
raise `ValueError` for a probability outside [0, 1]. A probability of 1
gives infinity; `inv_normal` also gives negative infinity at 0.

Truncated normal quantiles map a number `r` in [0, 1] into a restricted
range:

```python
from randdists.normal import (
    inv_normal_cond_between,
    inv_normal_cond_less,
    inv_normal_cond_greater,
)

inv_normal_cond_between(0.3, -1.0, 1.0, 0.0, 1.0)  # value in [-1, 1]
inv_normal_cond_less(0.3, 0.0, 0.0, 1.0)           # value below 0
inv_normal_cond_greater(0.3, 0.0, 0.0, 1.0)        # value above 0
```

Functions that draw random numbers take an optional `random.Random`
instance, so results can be made reproducible; without one they use the
`random` module's shared generator:

```python
import random
from randdists.poisson import poisson_pmf, inverted_poisson_cdf
from randdists.uniform import uniform_samples

rng = random.Random(10)
poisson_pmf(2, 3.0)
inverted_poisson_cdf(3.0, rng)
list(uniform_samples(5, 0.0, 10.0, rng))
```

`poisson_pmf` raises `ValueError` for a negative count, and
`uniform_samples` raises `ValueError` when the lower bound is not below the
upper bound.

### Hyperexponential samples

`randdists.hypexp` draws from a mixture of up to three exponential
distributions described by a plain-text parameter file. Each line holds a
keyword and a value separated by spaces or tabs; blank lines and lines
starting with `#` are skipped, and lines with an unknown keyword or no value
are reported on standard error and ignored:

```
# two-phase model
ep_1 0.3
ep_2 0.0
lambda_1 1.5
lambda_2 0.2
lambda_3 0.0
sample_size 1000
```

`ep_1` and `ep_2` are the probabilities of picking the first and second
phase; when `ep_2` is zero the model is two-phase and the second phase takes
the remaining probability. Parameters missing from the file are zero.
`sample_size` is read and kept on `HypExpParams` but not used when drawing.

```python
import random
from randdists.hypexp import HypExpParams, parse_config_file, generate_3p_sample

params = parse_config_file("model.cfg")
generate_3p_sample(params, random.Random(1))

params = HypExpParams()
params.set_from_line(["lambda_1", "2.0"])
```

`generate_3p_sample` raises `ValueError` when every rate is zero, when the
first or second rate is negative, or when the phase probabilities are not
valid. `parse_config_file` raises `OSError` when the file cannot be opened.

## Command-line tools

Each tool prints its values to standard output, one per line. Each can also
be run as `python -m randdists.<module>`.

```
randdists-normal -m 0 -s 1 -c 10 -V         # 10 normal samples
randdists-normal -m 0 -s 1 -c 20 -l -3 -h 3 # (x, density) pairs at random x in [-3, 3)
randdists-normal -c 20 -l -3 -h 3 -C        # running integral of the density on a grid
randdists-normal -c 10 -V -T                # the same samples every run (seed 10)
randdists-normal-prob -m 0 -s 1 -v 1.5      # P(X <= 1.5)
randdists-exponential -l 2.0 -c 10
randdists-pareto -a 2 -b 1 -c 10 -V
randdists-hypexp -f model.cfg -C 100 -S 42
randdists-poisson -l 4 -c 10 -V
randdists-uniform -l 0 -h 10 -c 5
randdists-weibull -a 1 -b 1.5 -c 10
randdists-weibull -a 1 -b 1.5 -q 0.9        # a single quantile
```

The `-l` and `-h` bounds of `randdists-normal`, `randdists-pareto` and
`randdists-uniform` are read as whole numbers. `randdists-pareto` raises a
lower bound below `b` to `b`. `randdists-poisson` prints samples only with
`-V`; without it, it prints a notice on standard error. `randdists-hypexp`
prints `-1.000000` for a draw from an invalid model, with the reason on
standard error. `randdists-uniform` draws one sample when no count is given.

An unknown option, or a missing sample count for the tools that need one,
prints a usage message to standard error and exits with status 1.
`randdists-hypexp` also exits with status 1 when the parameter file is
missing or cannot be opened, `randdists-uniform` when the lower bound is not
below the upper bound, and `randdists-weibull` when both a sample count and a
quantile between 0 and 1 are given.