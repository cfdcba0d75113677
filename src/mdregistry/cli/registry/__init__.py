"""Registry inspection commands."""
