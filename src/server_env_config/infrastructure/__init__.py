"""Infrastructure layer - logging setup."""
