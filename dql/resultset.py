from __future__ import annotations
from abc import ABC, abstractmethod
from .types import *
from .seq import Seq, empty

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class _BaseResultSet(ABC, Generic[T]):
    """
    a lazy set that is either ok (backed by a Seq) or failed (a terminal error, no items).
    the state is fixed at construction, combinators build new sets instead of mutating.
    """

    def __init__(self, state: Union[Seq[T], Failed]):
        if not isinstance(state, (Seq, Failed)):
            raise TypeError(f"result set state must be a Seq or Failed, got {type(state).__name__}")
        self._state = state
        self.to = TerminalAccessor(self)

    @classmethod
    def failed(cls, error: BaseException):
        """a set in the failed state carrying `error` verbatim"""
        return cls(Failed(error))

    @property
    def is_failed(self) -> bool:
        return isinstance(self._state, Failed)

    @property
    def error(self) -> Optional[BaseException]:
        return self._state.error if isinstance(self._state, Failed) else None

    def enum(self) -> Seq[T]:
        """the backing sequence, or the empty sequence when failed"""
        if isinstance(self._state, Failed):
            return empty()
        return self._state

    # --- hooks used by the terminal accessor ---

    @abstractmethod
    def _to_result(self, item: T) -> Value:
        pass

    @abstractmethod
    def _scalar(self, item: T) -> Any:
        pass

    @abstractmethod
    def _record(self, item: T) -> Dict[str, Any]:
        pass

    def __iter__(self) -> Iterator[T]:
        return iter(self.enum())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        if isinstance(self._state, Failed):
            return f"{type(self).__name__}(failed={self._state.error!r})"
        return f"{type(self).__name__}(lazy)"


class ValueSet(_BaseResultSet[Value]):
    """a lazy set of per-item results, each one either Ok(value) or Err(error)"""

    def successes(self) -> 'ValueSet':
        """keep only the Ok items"""
        if self.is_failed:
            return self
        parent = self._state

        def produce_successes(consume: Consumer[Value]) -> None:
            def keep_ok(item: Value) -> bool:
                if item.is_ok:
                    return consume(item)
                return True

            parent.produce(keep_ok)

        return ValueSet(Seq(produce_successes))

    def values(self) -> List[Any]:
        """the successful values, in order"""
        return [item.value for item in self.enum() if item.is_ok]

    def _to_result(self, item: Value) -> Value:
        return item

    def _scalar(self, item: Value) -> Any:
        return item.value

    def _record(self, item: Value) -> Dict[str, Any]:
        return {'value': item.value, 'error': item.error}
