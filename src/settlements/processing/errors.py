class InvalidArgumentError(ValueError):
    """Raised when the pipeline is handed no instruction sequence at all."""
