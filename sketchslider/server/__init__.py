"""HTTP surface for a single slider."""
