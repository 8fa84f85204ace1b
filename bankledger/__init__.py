"""Console bank ledger with savings, checking and fixed deposit accounts."""
