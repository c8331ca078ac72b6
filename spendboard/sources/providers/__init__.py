"""Mini README: Concrete transaction source implementations.

The package demonstrates how backends plug into the registry. New providers
should export a subclass of ``TransactionSource`` and call
``REGISTRY.register`` during module import to keep the system discoverable.
"""

from .json_file_provider import JsonFileTransactionSource
from .sample_provider import SAMPLE_TRANSACTIONS, SampleTransactionSource

__all__ = ["JsonFileTransactionSource", "SAMPLE_TRANSACTIONS", "SampleTransactionSource"]
