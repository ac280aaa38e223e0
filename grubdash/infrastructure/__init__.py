"""Infrastructure Layer: the in-memory order store, demo data and logging setup."""
