"""Infrastructure utilities: configuration and logging."""
