import numbers

import numpy as np


class InvalidInputError(ValueError):
    """Raised when data, pairs or the class count violate the input contract."""


def check_n_classes(n_classes) -> int:
    if isinstance(n_classes, (bool, np.bool_)) or not isinstance(
        n_classes, numbers.Integral
    ):
        raise InvalidInputError(
            f"n_classes must be an integer, got {type(n_classes).__name__}"
        )
    if n_classes < 0:
        raise InvalidInputError(f"n_classes must be non-negative, got {n_classes}")
    return int(n_classes)


def check_data(data) -> np.ndarray:
    """Returns data as a 1D float64 array of finite values."""
    data = np.asarray(data, dtype=np.float64)
    if data.ndim != 1:
        raise InvalidInputError("natural_breaks requires a 1D array")
    if not np.isfinite(data).all():
        raise InvalidInputError("please remove NaNs and infinities before classifying")
    return data


def check_pairs(values: np.ndarray, counts: np.ndarray) -> None:
    """
    Validate the (value, count) arrays fed into the DP engines: finite values
    strictly increasing, positive integer counts, and a total weight that
    fits in an int64.
    """
    if values.ndim != 1 or counts.ndim != 1 or values.shape != counts.shape:
        raise InvalidInputError("values and counts must be 1D arrays of equal length")
    if not np.issubdtype(counts.dtype, np.integer):
        raise InvalidInputError(f"counts must be integers, got dtype {counts.dtype}")
    if not np.isfinite(values).all():
        raise InvalidInputError("values must be finite")
    if values.size == 0:
        return
    if (counts <= 0).any():
        bad = int(np.argmax(counts <= 0))
        raise InvalidInputError(
            f"counts must be positive, got {counts[bad]} for value {values[bad]}"
        )
    if (np.diff(values) <= 0).any():
        bad = int(np.argmax(np.diff(values) <= 0))
        raise InvalidInputError(
            "values must be strictly increasing, "
            f"got {values[bad]} followed by {values[bad + 1]}"
        )
    total = sum(int(c) for c in counts)
    if total > np.iinfo(np.int64).max:
        raise InvalidInputError(
            f"total weight {total} overflows the cumulative weight table"
        )
