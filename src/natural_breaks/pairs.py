import numbers
from typing import Iterable, NamedTuple

import numpy as np

from natural_breaks.validation import InvalidInputError, check_data, check_pairs


class ValuePair(NamedTuple):
    """A distinct value and its number of occurrences."""

    value: float
    count: int


def unique_with_counts(
    data: np.ndarray, assume_sorted: bool = False
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sorted distinct values of data with their occurrence counts.

    Parameters
    ----------
    data : np.ndarray
        1D array of finite values, any order, duplicates allowed
    assume_sorted : bool
        Skip sorting when data is already ascending

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        (values, counts), values strictly increasing as float64,
        counts as int64
    """
    data = check_data(data)
    if assume_sorted and data.size > 1:
        if (np.diff(data) < 0).any():
            raise InvalidInputError("assume_sorted=True but data is not sorted")
        starts = np.flatnonzero(np.r_[True, data[1:] != data[:-1]])
        values = data[starts]
        counts = np.diff(np.r_[starts, data.size])
    else:
        values, counts = np.unique(data, return_counts=True)
    return values.astype(np.float64), counts.astype(np.int64)


def value_count_pairs(data) -> list[ValuePair]:
    values, counts = unique_with_counts(data)
    return [ValuePair(float(v), int(c)) for v, c in zip(values, counts)]


def _as_count(count) -> int:
    if isinstance(count, (bool, np.bool_)):
        raise InvalidInputError(f"counts must be integers, got {count!r}")
    if isinstance(count, numbers.Integral):
        return int(count)
    if isinstance(count, numbers.Real) and float(count).is_integer():
        return int(count)
    raise InvalidInputError(f"counts must be integers, got {count!r}")


def pairs_to_arrays(
    pairs: Iterable[ValuePair | tuple[float, int]],
) -> tuple[np.ndarray, np.ndarray]:
    """
    Unpack (value, count) pairs into validated value and count arrays.
    Accepts ValuePairs, 2-tuples or the rows of an (m, 2) array.
    """
    pairs = list(pairs)
    for pair in pairs:
        if isinstance(pair, (str, bytes)) or not hasattr(pair, "__len__"):
            raise InvalidInputError(f"expected (value, count) pairs, got {pair!r}")
        if len(pair) != 2:
            raise InvalidInputError(f"expected (value, count) pairs, got {pair!r}")
        value = pair[0]
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise InvalidInputError(f"values must be real numbers, got {value!r}")
    values = np.array([float(pair[0]) for pair in pairs], dtype=np.float64)
    try:
        counts = np.array([_as_count(pair[1]) for pair in pairs], dtype=np.int64)
    except OverflowError as e:
        raise InvalidInputError(f"invalid count in pairs: {e}") from e
    check_pairs(values, counts)
    return values, counts
