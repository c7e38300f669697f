"""Domain-specific exceptions for coworking services."""


class CoworkingServiceError(Exception):
    """Base exception for coworking services."""
    pass


class SessionNotFoundError(CoworkingServiceError):
    """Raised when a coworking session does not exist."""
    pass


class SessionAlreadyFinishedError(CoworkingServiceError):
    """Raised when mutating or finishing a session that is already finished."""
    pass


class ExtraNotFoundError(CoworkingServiceError):
    """Raised when a consumed extra does not belong to the session."""
    pass


class InvalidExtraProductError(CoworkingServiceError):
    """Raised when a product cannot be consumed as a coworking extra."""
    pass
