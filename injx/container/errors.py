#!/usr/bin/env python3

"""
Hierarchy Errors

Exceptions raised by the linking, lookup and promotion protocols.
"""

from typing import Any


class InjxError(Exception):
    """Base class for every error raised by the service hierarchy."""


class IncompatibleCallerError(InjxError, TypeError):
    """Raised when a link is requested from an object that cannot resolve services.

    Args:
        caller: The rejected object.
    """

    def __init__(self, caller: Any) -> None:
        super().__init__(
            f"Argument must have a get_service method, got {type(caller).__name__}"
        )
        self.caller = caller


class UnboundError(InjxError, LookupError):
    """Raised when a key is missing locally and the node has no parent to ask."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Cannot resolve service {key!r}: link_from() or link_to() must be called first"
        )
        self.key = key


class UnknownServiceError(InjxError, LookupError):
    """Raised when a promoted key is not owned by any node up to the effective root."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown service {key!r}")
        self.key = key
