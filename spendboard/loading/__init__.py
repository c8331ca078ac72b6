"""Mini README: Data-loading lifecycle for the transaction dashboard.

Exports the lifecycle that owns the fetched transaction collection together
with the phase enum and snapshot type read by the presentation layer.
"""

from .lifecycle import LifecycleSnapshot, LoadPhase, TransactionLifecycle

__all__ = ["LifecycleSnapshot", "LoadPhase", "TransactionLifecycle"]
