"""Domain error types."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its accepted range."""


__all__ = ["InvalidArgumentError"]
