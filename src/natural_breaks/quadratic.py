import numba as nb
import numpy as np

from natural_breaks.loglinear import find_max_break_index
from natural_breaks.utils import calculate_cumulative_stats, first_row_ssm


@nb.njit(cache=True)
def _fill_row_quadratic(
    completed_rows: int,
    S_prev: np.ndarray,
    S_curr: np.ndarray,
    split_row: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> None:
    """
    Fill one split-table row by scanning every admissible split.

    S_curr[i] := max_{p in [0 .. i]} S_prev[p] + SSM(p + completed_rows, i + completed_rows)
    split_row[i] := leftmost maximizing p
    """
    buffer_size = S_prev.shape[0]
    for i in range(buffer_size):
        split_row[i] = find_max_break_index(
            i, 0, i + 1, completed_rows, S_prev, S_curr, c_wv, c_w
        )


@nb.njit(cache=True)
def fill_split_table_quadratic(
    c_wv: np.ndarray, c_w: np.ndarray, K: int, buffer_size: int
) -> tuple[np.ndarray, np.ndarray]:
    n_rows = max(K - 2, 0)
    J = np.zeros((n_rows, buffer_size), dtype=np.int64)
    S_prev = first_row_ssm(c_wv, c_w, buffer_size)

    for completed_rows in range(1, K - 1):
        S_curr = np.empty(buffer_size, dtype=np.float64)
        _fill_row_quadratic(
            completed_rows, S_prev, S_curr, J[completed_rows - 1], c_wv, c_w
        )
        S_prev = S_curr
    return J, S_prev


@nb.njit(cache=True)
def jenks_fisher_quadratic(values: np.ndarray, counts: np.ndarray, K: int) -> np.ndarray:
    """
    Quadratic (O(k * m^2)) Jenks-Fisher natural breaks without the
    divide-and-conquer speedup. Same contract as jenks_fisher_loglinear.
    """
    N = values.size
    breaks = np.empty(K, dtype=np.float64)
    if K == 0:
        return breaks
    breaks[0] = values[0]
    if K == 1:
        return breaks

    buffer_size = N - (K - 1)
    c_wv = np.empty(N, dtype=np.float64)
    c_w = np.empty(N, dtype=np.int64)
    calculate_cumulative_stats(values, counts, c_wv, c_w)

    J, S_prev = fill_split_table_quadratic(c_wv, c_w, K, buffer_size)

    S_curr = np.empty(buffer_size, dtype=np.float64)
    last = find_max_break_index(
        buffer_size - 1, 0, buffer_size, K - 1, S_prev, S_curr, c_wv, c_w
    )
    for j in range(K - 1, 0, -1):
        assert last < buffer_size
        breaks[j] = values[last + j]
        if j > 1:
            last = J[j - 2, last]
    return breaks
