"""Domain services for the ticket indexer."""
