"""Snippet manager: coordinated snippet writes across metadata and blob stores."""

__version__ = "0.1.0"
