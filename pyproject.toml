[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randdists"
version = "0.1.0"
description = "Probability distribution functions and random sample generators with small command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "probability",
    "distributions",
    "random",
    "sampling",
    "normal",
    "exponential",
    "pareto",
    "poisson",
    "weibull",
    "hyperexponential",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
randdists-normal = "randdists.normal:main"
randdists-normal-prob = "randdists.normal_prob:main"
randdists-exponential = "randdists.exponential:main"
randdists-pareto = "randdists.pareto:main"
randdists-hypexp = "randdists.hypexp:main"
randdists-poisson = "randdists.poisson:main"
randdists-uniform = "randdists.uniform:main"
randdists-weibull = "randdists.weibull:main"

[tool.hatch.build.targets.wheel]
packages = ["randdists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
