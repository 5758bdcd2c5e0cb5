"""Write operations, grouped by aggregate."""
