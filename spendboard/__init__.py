"""Mini README: Core package initializer for Spendboard.

This module exposes convenience imports so that the CLI, the web interface
and tests can reach shared helpers without knowing the exact module
structure. Finance primitives live in ``spendboard.finance`` and the
pluggable transaction sources in ``spendboard.sources``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
