"""Rollouts - list and resolve recorded agent sessions."""

__version__ = "0.1.0"
