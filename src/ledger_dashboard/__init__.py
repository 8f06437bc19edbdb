"""Personal-finance reporting dashboard over an hledger-style ledger API."""

__version__ = "0.1.0"
