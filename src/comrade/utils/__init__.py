"""Small helpers shared across the data layer."""
