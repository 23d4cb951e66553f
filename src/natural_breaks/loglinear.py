import numba as nb
import numpy as np

from natural_breaks.utils import calculate_cumulative_stats, first_row_ssm, ssm


@nb.njit(cache=True)
def find_max_break_index(
    i: int,
    bp: int,
    ep: int,
    completed_rows: int,
    ssm_prev: np.ndarray,
    ssm_curr: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> int:
    """
    Best split p in [bp, ep) for end index i (buffer coordinates), maximizing
        ssm_prev[p] + SSM(p + completed_rows, i + completed_rows)
    Writes the maximum into ssm_curr[i] and returns the leftmost maximizing p.
    Complexity: O(ep - bp).
    """
    best_ssm = ssm_prev[bp] + ssm(bp + completed_rows, i + completed_rows, c_wv, c_w)
    found_p = bp
    for p in range(bp + 1, ep):
        curr = ssm_prev[p] + ssm(p + completed_rows, i + completed_rows, c_wv, c_w)
        if curr > best_ssm:
            best_ssm = curr
            found_p = p
    ssm_curr[i] = best_ssm
    return found_p


@nb.njit(cache=True)
def fill_row_loglinear(
    bi: int,
    ei: int,
    bp: int,
    ep: int,
    completed_rows: int,
    ssm_prev: np.ndarray,
    ssm_curr: np.ndarray,
    split_row: np.ndarray,
    c_wv: np.ndarray,
    c_w: np.ndarray,
) -> None:
    """
    Divide-and-conquer fill of one split-table row.
    Fills split_row[i] for i in [bi, ei) (half-open), given that every optimal
    split in this range lies in [bp, ep). Optimal splits are non-decreasing in
    the end index, so the midpoint's split bounds both halves.
    Complexity: O(log(ei - bi) * max(ei - bi, ep - bp)).
    """
    if bi == ei:
        return
    assert bp < ep

    mi = (bi + ei) // 2
    mp = find_max_break_index(
        mi, bp, min(ep, mi + 1), completed_rows, ssm_prev, ssm_curr, c_wv, c_w
    )
    assert bp <= mp and mp < ep and mp <= mi

    # lower half of end indices only needs splits up to mp
    fill_row_loglinear(
        bi,
        mi,
        bp,
        min(mi, mp + 1),
        completed_rows,
        ssm_prev,
        ssm_curr,
        split_row,
        c_wv,
        c_w,
    )

    split_row[mi] = mp

    # upper half only needs splits from mp on
    fill_row_loglinear(
        mi + 1, ei, mp, ep, completed_rows, ssm_prev, ssm_curr, split_row, c_wv, c_w
    )


@nb.njit(cache=True)
def fill_split_table(
    c_wv: np.ndarray, c_w: np.ndarray, K: int, buffer_size: int
) -> tuple[np.ndarray, np.ndarray]:
    """
    Run one divide-and-conquer pass per additional class boundary.
    Row r of the split table holds the splits for completed_rows = r + 1.
    Returns the split table and the SSM buffer of the last completed row.
    """
    n_rows = max(K - 2, 0)
    J = np.zeros((n_rows, buffer_size), dtype=np.int64)
    S_prev = first_row_ssm(c_wv, c_w, buffer_size)

    for completed_rows in range(1, K - 1):
        S_curr = np.empty(buffer_size, dtype=np.float64)
        fill_row_loglinear(
            0,
            buffer_size,
            0,
            buffer_size,
            completed_rows,
            S_prev,
            S_curr,
            J[completed_rows - 1],
            c_wv,
            c_w,
        )
        S_prev = S_curr
    return J, S_prev


@nb.njit(cache=True)
def jenks_fisher_loglinear(values: np.ndarray, counts: np.ndarray, K: int) -> np.ndarray:
    """
    Log-linear (O(k * m log m)) Jenks-Fisher natural breaks on sorted unique
    values with positive integer counts. Requires K <= m.
    Returns K ascending breaks; each break is the minimum value of its class.
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

    J, S_prev = fill_split_table(c_wv, c_w, K, buffer_size)

    # last class: split over the whole buffer with K - 1 completed rows
    S_curr = np.empty(buffer_size, dtype=np.float64)
    last = find_max_break_index(
        buffer_size - 1, 0, buffer_size, K - 1, S_prev, S_curr, c_wv, c_w
    )

    # backtrack: class j starts at pair last + j
    for j in range(K - 1, 0, -1):
        assert last < buffer_size
        breaks[j] = values[last + j]
        if j > 1:
            last = J[j - 2, last]
    return breaks
