"""Core picker state: models, exclusion filter, inventory cache and history."""
