"""Mini README: Transaction source subsystem package initialiser.

Re-exports the source abstractions so the lifecycle, CLI and web handlers
import from one place. The package is divided into ``base`` for the abstract
interface and error type, ``registry`` for plugin management, and
``providers`` for the concrete backends.
"""

from .base import SourceUnavailable, TransactionSource
from .registry import REGISTRY, TransactionSourceRegistry, source_from_settings
from . import providers  # noqa: F401  # ensure built-in providers register on import

__all__ = [
    "REGISTRY",
    "SourceUnavailable",
    "TransactionSource",
    "TransactionSourceRegistry",
    "source_from_settings",
]
