import numba as nb
import numpy as np


@nb.njit(cache=True)
def calculate_cumulative_stats(
    values: np.ndarray, counts: np.ndarray, c_wv: np.ndarray, c_w: np.ndarray
) -> None:
    """
    Compute cumulative weighted values and weights for sorted (value, count) pairs.
    c_wv and c_w must be preallocated with length N; index 0 is the first pair.
    """
    N = values.shape[0]
    cwv = 0.0
    cw = 0
    for i in range(N):
        w = counts[i]
        cw += w
        cwv += w * values[i]
        c_wv[i] = cwv
        c_w[i] = cw


@nb.njit(cache=True, inline="always")
def sum_of_weights(b: int, e: int, c_w: np.ndarray) -> int:
    # b == 0 is never queried: the first pair always belongs to the first class.
    return c_w[e] - c_w[b - 1]


@nb.njit(cache=True, inline="always")
def sum_of_weighted_values(b: int, e: int, c_wv: np.ndarray) -> float:
    return c_wv[e] - c_wv[b - 1]


@nb.njit(cache=True, inline="always")
def ssm(b: int, e: int, c_wv: np.ndarray, c_w: np.ndarray) -> float:
    """
    Sum of squared means for the closed range [b, e], i.e. weight * mean^2,
    computed as (sum of weighted values)^2 / (sum of weights).
    """
    s = sum_of_weighted_values(b, e, c_wv)
    return s * s / sum_of_weights(b, e, c_w)


@nb.njit(cache=True)
def first_row_ssm(c_wv: np.ndarray, c_w: np.ndarray, buffer_size: int) -> np.ndarray:
    """SSM of a single class covering [0, i], for every i < buffer_size."""
    ssm_prev = np.empty(buffer_size, dtype=np.float64)
    for i in range(buffer_size):
        ssm_prev[i] = c_wv[i] * c_wv[i] / c_w[i]
    return ssm_prev
