"""Riding-level analysis of Elections Canada poll-by-poll results."""

__version__ = "0.1.0"
