"""RBGN: a line-oriented script interpreter and shell transpiler."""

__version__ = "0.1.0"
__author__ = "the RBGN contributors"
