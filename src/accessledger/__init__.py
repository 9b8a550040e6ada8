"""AccessLedger - permission ledger for encrypted record key references."""

__version__ = "0.1.0"
