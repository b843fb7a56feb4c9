#!/usr/bin/env python3

"""
Result Monad

Lets callers treat lookups, promotions and config loading as values instead
of exceptions. ``Success`` carries the value, ``Failure`` the error that
would otherwise have been raised.
"""

from typing import TypeVar, Generic, Callable, Optional, Any, Tuple, Type
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')

class Result(Generic[T, E], ABC):
    """Outcome of an operation that may fail."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> 'Result[U, E]':
        """Transforms a success value; failures pass through."""
        pass

    @abstractmethod
    def is_success(self) -> bool:
        pass

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def get_value(self) -> Optional[T]:
        pass

    @abstractmethod
    def get_error(self) -> Optional[E]:
        pass

@dataclass(frozen=True)
class Success(Result[T, E]):
    value: T

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        try:
            return Success(func(self.value))
        except Exception as e:
            logger.debug(f"Exception in Success.map: {e}")
            return Failure(e)

    def is_success(self) -> bool:
        return True

    def get_value(self) -> Optional[T]:
        return self.value

    def get_error(self) -> Optional[E]:
        return None

@dataclass(frozen=True)
class Failure(Result[T, E]):
    error: E

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return self

    def is_success(self) -> bool:
        return False

    def get_value(self) -> Optional[T]:
        return None

    def get_error(self) -> Optional[E]:
        return self.error

def from_callable(func: Callable[[], T],
                  catch: Tuple[Type[BaseException], ...] = (Exception,)) -> Result[T, Any]:
    """Runs ``func`` and captures the listed exception types as a Failure.

    Exceptions outside ``catch`` propagate unchanged.
    """
    try:
        return Success(func())
    except catch as e:
        return Failure(e)
