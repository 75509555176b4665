"""Domain layer for the TDEE engine."""
