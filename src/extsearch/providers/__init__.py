"""Built-in external search providers."""
