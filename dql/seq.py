from __future__ import annotations
from .types import *


class Seq(Generic[T]):
    """
    a restartable, push-based lazy sequence.
    nothing runs until produce() is called; every call re-runs the producer from the start.
    """

    def __init__(self, producer: Producer[T]):
        self._producer = producer

    def produce(self, consume: Consumer[T]) -> None:
        """feed items to consume until exhausted or consume returns false"""
        self._producer(consume)

    def to_list(self) -> List[T]:
        """drive the whole sequence into a list"""
        items: List[T] = []

        def collect(item: T) -> bool:
            items.append(item)
            return True

        self.produce(collect)
        return items

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"Seq({getattr(self._producer, '__name__', 'producer')})"


class KeyedSeq(Generic[K, T]):
    """a push-based lazy sequence of (key, item) pairs"""

    def __init__(self, producer: KeyedProducer[K, T]):
        self._producer = producer

    def produce(self, consume: KeyedConsumer[K, T]) -> None:
        """feed pairs to consume until exhausted or consume returns false"""
        self._producer(consume)

    def to_list(self) -> List[Tuple[K, T]]:
        pairs: List[Tuple[K, T]] = []

        def collect(key: K, item: T) -> bool:
            pairs.append((key, item))
            return True

        self.produce(collect)
        return pairs

    def __iter__(self) -> Iterator[Tuple[K, T]]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"KeyedSeq({getattr(self._producer, '__name__', 'producer')})"


# --- empty sequences ---

def _nop(consume) -> None:
    pass


_EMPTY: Seq[Any] = Seq(_nop)
_EMPTY_KEYED: KeyedSeq[Any, Any] = KeyedSeq(_nop)


def empty() -> Seq[Any]:
    """the sequence that never calls its consumer"""
    return _EMPTY


def empty_keyed() -> KeyedSeq[Any, Any]:
    """the keyed sequence that never calls its consumer"""
    return _EMPTY_KEYED


def from_iterable(data: Iterable[T]) -> Seq[T]:
    """
    wrap a python collection. pass something re-iterable (list, tuple):
    a one-shot iterator only produces its items the first time.
    """
    def produce_items(consume: Consumer[T]) -> None:
        for item in data:
            if not consume(item):
                return

    return Seq(produce_items)
