class InvalidConfiguration(ValueError):
    """Raised when grouping parameters cannot produce a valid search."""
