from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

# a consumer returns false to stop the producer feeding it
Consumer = Callable[[T], bool]
Producer = Callable[[Consumer[T]], None]
KeyedConsumer = Callable[[K, T], bool]
KeyedProducer = Callable[[KeyedConsumer[K, T]], None]
Predicate = Callable[[T], bool]


class Ok(Generic[T]):
    """a produced item that carries a value"""
    __slots__ = ('value',)

    def __init__(self, value: T):
        self.value = value

    @property
    def error(self) -> None: return None

    @property
    def is_ok(self) -> bool: return True

    def unwrap(self) -> T:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Ok) and self.value == other.value

    def __hash__(self) -> int:
        return hash(('ok', self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


class Err:
    """a produced item that is itself a failure"""
    __slots__ = ('error',)

    def __init__(self, error: BaseException):
        self.error = error

    @property
    def value(self) -> None: return None

    @property
    def is_ok(self) -> bool: return False

    def unwrap(self):
        # a stored error is raised again on every reduction, start from a clean traceback
        raise self.error.with_traceback(None)

    def __eq__(self, other) -> bool:
        # errors compare by kind and message, instances are rarely shared
        return (isinstance(other, Err)
                and type(self.error) is type(other.error)
                and self.error.args == other.error.args)

    def __hash__(self) -> int:
        return hash(('err', type(self.error), self.error.args))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Value = Union[Ok[T], Err]


class Failed:
    """terminal state of a result set: an upstream error and no items"""
    __slots__ = ('error',)

    def __init__(self, error: BaseException):
        self.error = error

    def __repr__(self) -> str:
        return f"Failed({self.error!r})"
