from dataclasses import dataclass
from typing import Generic, TypeVar

from domain.model.errors import DomainError

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome of a store operation: a value or a domain error."""
    value: T | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: T) -> 'Result[T]':
        return Result(value=value)

    @staticmethod
    def failure(error: DomainError) -> 'Result[T]':
        return Result(error=error)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
