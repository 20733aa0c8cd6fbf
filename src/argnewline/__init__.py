"""Rewrite single-line Go parameter and argument lists to one element per line."""

__version__ = "0.1.0"
