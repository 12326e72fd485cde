"""Errors raised by the program matching engine."""


class MatchingError(Exception):
    """Base class for matching errors."""
    pass


class ClientNotFoundError(MatchingError):
    """Raised when no client exists for the requested id."""

    def __init__(self, client_id):
        self.client_id = client_id
        super().__init__(f"Client {client_id} not found")


class InvalidClientProfileError(MatchingError):
    """Raised when a stored client carries a value outside a closed enumeration."""
    pass
