"""Net worth tracker: ledger, derived balances, holdings and spending analytics."""

__version__ = "0.1.0"
