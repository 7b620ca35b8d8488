"""
utils/errors.py
---------------
Exceptions raised by validators and services.
Handlers catch ``HotelAppError`` and print its message to the user.
"""


class HotelAppError(Exception):
    """Base class for every error the console reports to the user."""


class InvalidInputError(HotelAppError, ValueError):
    """User input could not be parsed or is out of range."""


class NotFoundError(HotelAppError):
    """A referenced hotel, room, company or user does not exist."""


class PermissionDeniedError(HotelAppError):
    """The logged-in user may not perform the requested operation."""


class ConflictError(HotelAppError):
    """The operation clashes with existing data (e.g. a room already booked)."""
