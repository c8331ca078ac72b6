"""Mini README: Source registry enabling pluggable transaction backends.

Structure:
    * TransactionSourceRegistry - maps identifiers to ``TransactionSource`` classes.
    * REGISTRY - process-wide registry populated by the built-in providers.
    * source_from_settings - build the source named in the runtime settings.

Each source class reads its own options through ``from_settings``, so
third-party backends get configuration without changes here.

New backends register themselves on import, mirroring how the built-in
``sample`` and ``json_file`` providers are wired in.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from ..configuration import SpendboardSettings
from ..logging_utils import get_logger
from .base import TransactionSource

LOGGER = get_logger(__name__)


class TransactionSourceRegistry:
    """Simple registry for mapping source identifiers to classes."""

    def __init__(self) -> None:
        self._sources: Dict[str, Type[TransactionSource]] = {}

    def register(self, source: Type[TransactionSource]) -> None:
        """Register a new source class with the registry."""

        identifier = source.source_name.lower()
        LOGGER.debug("Registering transaction source '%s'", identifier)
        self._sources[identifier] = source

    def available_sources(self) -> Iterable[str]:
        """Return iterable of source identifiers for display."""

        return sorted(self._sources.keys())

    def create(self, identifier: str, **options: object) -> TransactionSource:
        """Instantiate a source matching the identifier."""

        source_cls = self._sources.get(identifier.lower())
        if not source_cls:
            raise KeyError(f"Unknown transaction source '{identifier}'")
        LOGGER.info("Creating transaction source '%s'", identifier)
        return source_cls(**options)

    def create_from_settings(
        self, identifier: str, settings: SpendboardSettings
    ) -> TransactionSource:
        """Instantiate a source, letting its class read its own options from ``settings``."""

        source_cls = self._sources.get(identifier.lower())
        if not source_cls:
            raise KeyError(f"Unknown transaction source '{identifier}'")
        LOGGER.info("Creating transaction source '%s' from settings", identifier)
        return source_cls.from_settings(settings)


REGISTRY = TransactionSourceRegistry()


def source_from_settings(settings: SpendboardSettings) -> TransactionSource:
    """Create the source selected by ``settings.transaction_source``."""

    return REGISTRY.create_from_settings(settings.transaction_source, settings)
