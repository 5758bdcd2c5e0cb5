"""Read operations, grouped by aggregate."""
