"""Probability distribution functions, random sample generators and small command-line tools."""

__version__ = "0.1.0"