import numpy as np

from natural_breaks.validation import InvalidInputError, check_data


def classify(data: np.ndarray, breaks: np.ndarray) -> np.ndarray:
    """
    Class index of every value: the last class whose break is <= value.
    Values below breaks[0] are assigned to class 0.
    """
    data = check_data(data)
    breaks = np.asarray(breaks, dtype=np.float64)
    if breaks.size == 0:
        raise InvalidInputError("cannot classify against an empty set of breaks")
    idx = np.searchsorted(breaks, data, side="right") - 1
    return np.clip(idx, 0, breaks.size - 1).astype(np.int64)


def within_class_ssd(data: np.ndarray, breaks: np.ndarray) -> float:
    """Total within-class sum of squared deviations from the class means."""
    data = check_data(data)
    if data.size == 0:
        return 0.0
    labels = classify(data, breaks)
    n_classes = len(breaks)
    sizes = np.bincount(labels, minlength=n_classes)
    sums = np.bincount(labels, weights=data, minlength=n_classes)
    means = np.divide(sums, sizes, out=np.zeros(n_classes), where=sizes > 0)
    return float(np.sum((data - means[labels]) ** 2))


def goodness_of_variance_fit(data: np.ndarray, breaks: np.ndarray) -> float:
    """
    GVF = 1 - SDCM / SDAM, where SDCM is the within-class sum of squared
    deviations and SDAM the sum of squared deviations from the overall mean.
    Equals 1.0 for a perfect fit (or data with no variance).
    """
    data = check_data(data)
    if data.size == 0:
        return 1.0
    sdam = float(np.sum((data - data.mean()) ** 2))
    if sdam == 0.0:
        return 1.0
    return 1.0 - within_class_ssd(data, breaks) / sdam
