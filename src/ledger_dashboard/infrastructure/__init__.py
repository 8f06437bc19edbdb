"""Infrastructure adapters: ledger HTTP client, settings, logging."""
