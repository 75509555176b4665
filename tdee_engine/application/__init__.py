"""Application layer for the TDEE engine."""
