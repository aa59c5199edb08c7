class InvalidArgument(ValueError):
    """Raised when a required argument is missing or malformed."""
