"""Exception classes for fail-loud error handling.

I/O failures are not wrapped: ``OSError`` raised while writing the document or
copying schema files reaches the caller unchanged.
"""


class ArchimateExchangeError(Exception):
    """Base exception for exchange export errors."""
    pass


class ConfigurationError(ArchimateExchangeError):
    """Raised when export options cannot be loaded or are invalid."""
    pass


class UnknownComponentTypeError(ArchimateExchangeError, ValueError):
    """Raised when a model object has no exchange type name."""
    pass
