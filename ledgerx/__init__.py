"""LedgerX: a double-entry bookkeeping service."""
