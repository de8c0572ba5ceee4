class InvalidArgument(ValueError):
    """Raised when a caller passes an argument of the wrong shape or type."""
    pass
