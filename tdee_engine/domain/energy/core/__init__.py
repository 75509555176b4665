"""Core building blocks of the energy domain."""
