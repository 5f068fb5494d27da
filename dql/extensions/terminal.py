from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import EntityNotFound, TooManyEntities

if typing.TYPE_CHECKING:
    from ..resultset import _BaseResultSet


class TerminalAccessor(Generic[T]):
    """reducers and conversions. these are the only operations that drive a sequence."""

    def __init__(self, result_set: '_BaseResultSet[T]'):
        self._set = result_set

    # --- cardinality reducers ---

    def first_result(self) -> Value:
        """the first item's result, Err(EntityNotFound) when empty, the terminal error when failed"""
        state = self._set._state
        if isinstance(state, Failed):
            return Err(state.error)
        found: List[T] = []

        def take_first(item: T) -> bool:
            found.append(item)
            return False

        state.produce(take_first)
        if not found:
            return Err(EntityNotFound())
        return self._set._to_result(found[0])

    def single_result(self) -> Value:
        """
        the only item's result. a second item makes the whole reduction Err(TooManyEntities)
        as soon as it shows up, whatever it carries; iteration stops right there.
        """
        state = self._set._state
        if isinstance(state, Failed):
            return Err(state.error)
        found: List[T] = []

        def take_unique(item: T) -> bool:
            found.append(item)
            return len(found) < 2

        state.produce(take_unique)
        if not found:
            return Err(EntityNotFound())
        if len(found) > 1:
            return Err(TooManyEntities())
        return self._set._to_result(found[0])

    def first(self) -> Any:
        """get first element, raising its error"""
        return self.first_result().unwrap()

    def single(self) -> Any:
        """get single element, raising if not exactly one"""
        return self.single_result().unwrap()

    def first_or_default(self, default: Any = None) -> Any:
        """first element, or default when nothing was found"""
        result = self.first_result()
        if not result.is_ok and isinstance(result.error, EntityNotFound):
            return default
        return result.unwrap()

    # --- conversions, all over enum(): a failed set converts to an empty container ---

    def list(self) -> List[T]:
        """convert to list"""
        return self._set.enum().to_list()

    def count(self) -> int:
        """count elements"""
        total = 0

        def tally(item: T) -> bool:
            nonlocal total
            total += 1
            return True

        self._set.enum().produce(tally)
        return total

    def any(self) -> bool:
        """check if at least one element exists, stopping at the first"""
        seen = False

        def mark(item: T) -> bool:
            nonlocal seen
            seen = True
            return False

        self._set.enum().produce(mark)
        return seen

    def array(self) -> np.ndarray:
        """convert to a one-dimensional numpy object array"""
        scalars = [self._set._scalar(item) for item in self.list()]
        # filled element-wise, tags are iterable and np.array would descend into them
        arr = np.empty(len(scalars), dtype=object)
        for i, scalar in enumerate(scalars):
            arr[i] = scalar
        return arr

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.array(), dtype=object)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per item"""
        return pd.DataFrame([self._set._record(item) for item in self.list()])
