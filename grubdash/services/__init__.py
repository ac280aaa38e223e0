"""Service Layer: orchestrates validator chains and store mutations for each route."""
