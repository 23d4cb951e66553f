import logging
import warnings
from typing import Callable, Iterable

import numpy as np

from natural_breaks import loglinear, quadratic
from natural_breaks.metrics import classify, goodness_of_variance_fit, within_class_ssd
from natural_breaks.pairs import (
    ValuePair,
    pairs_to_arrays,
    unique_with_counts,
    value_count_pairs,
)
from natural_breaks.validation import InvalidInputError, check_n_classes

__all__ = [
    "InvalidInputError",
    "ValuePair",
    "classify",
    "goodness_of_variance_fit",
    "natural_breaks",
    "natural_breaks_from_pairs",
    "natural_breaks_quadratic",
    "unique_with_counts",
    "value_count_pairs",
    "within_class_ssd",
]

logger = logging.getLogger(__name__)


def _classify_pairs(
    engine: Callable[[np.ndarray, np.ndarray, int], np.ndarray],
    values: np.ndarray,
    counts: np.ndarray,
    n_classes: int,
) -> np.ndarray:
    if n_classes == 0:
        return np.empty(0, dtype=np.float64)

    n_unique = values.size
    if n_unique <= n_classes:
        if n_unique < n_classes:
            warnings.warn(
                f"Not possible to assign {n_classes} classes to this problem, "
                f"number of unique values is {n_unique}. "
                f"Returning {n_unique} breaks instead, one for each unique value.",
                UserWarning,
                stacklevel=3,
            )
        logger.debug(
            "%d unique values for %d classes, returning unique values",
            n_unique,
            n_classes,
        )
        return values.copy()

    logger.debug(
        "classifying %d unique values into %d classes (buffer size %d)",
        n_unique,
        n_classes,
        n_unique - (n_classes - 1),
    )
    return engine(values, counts, n_classes)


def natural_breaks(
    data: np.ndarray,
    n_classes: int,
    assume_sorted: bool = False,
) -> np.ndarray:
    """
    Compute Jenks-Fisher natural breaks for 1D data.

    This runs the divide-and-conquer dynamic program, which relies on the
    optimal split index being monotone in the class end index, for
    O(k * m log m) time over m unique values.

    Parameters
    ----------
    data : np.ndarray
        1D array of values, any order, duplicates allowed
    n_classes : int
        Number of classes to create
    assume_sorted : bool
        Skip sorting when data is already ascending

    Returns
    -------
    np.ndarray
        Ascending breaks (length min(n_classes, number of unique values)),
        each the minimum value of its class
    """
    n_classes = check_n_classes(n_classes)
    values, counts = unique_with_counts(data, assume_sorted=assume_sorted)
    return _classify_pairs(loglinear.jenks_fisher_loglinear, values, counts, n_classes)


def natural_breaks_quadratic(
    data: np.ndarray,
    n_classes: int,
    assume_sorted: bool = False,
) -> np.ndarray:
    """
    Compute Jenks-Fisher natural breaks for 1D data without speedups.

    Scans every admissible split for every class end index, O(k * m^2).
    Same parameters and result as natural_breaks.
    """
    n_classes = check_n_classes(n_classes)
    values, counts = unique_with_counts(data, assume_sorted=assume_sorted)
    return _classify_pairs(quadratic.jenks_fisher_quadratic, values, counts, n_classes)


def natural_breaks_from_pairs(
    pairs: Iterable[ValuePair | tuple[float, int]],
    n_classes: int,
) -> np.ndarray:
    """
    Compute natural breaks from pre-aggregated (value, count) pairs.

    Parameters
    ----------
    pairs : iterable of ValuePair or (value, count) tuples
        Values strictly increasing, counts positive integers
    n_classes : int
        Number of classes to create

    Returns
    -------
    np.ndarray
        Ascending breaks, as for natural_breaks
    """
    n_classes = check_n_classes(n_classes)
    values, counts = pairs_to_arrays(pairs)
    return _classify_pairs(loglinear.jenks_fisher_loglinear, values, counts, n_classes)
