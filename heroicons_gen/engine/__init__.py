"""Icon compiler engine: naming, emission and the per-style driver."""
