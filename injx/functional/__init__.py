"""
Functional Utilities Module

Result monad used by the non-raising variants of the hierarchy API.
"""

from .result_monad import Result, Success, Failure, from_callable

__all__ = [
    "Result",
    "Success",
    "Failure",
    "from_callable"
]
