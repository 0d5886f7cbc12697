import numpy as np

# reflect:   d c b | a b c d | c b a    (edge sample is not repeated)
# symmetric: c b a | a b c d | d c b    (edge sample is repeated)
MODES = ("reflect", "symmetric")


def check_mode(mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown boundary mode: {mode}, expected one of {MODES}")


def fill_buffer(
    lane: np.ndarray,
    radius: int,
    mode: str = "reflect",
    buffer: np.ndarray | None = None,
) -> np.ndarray:
    """
    Prepares the padded buffer of a single lane
    Arguments:
        - lane: 1D input samples
        - radius: number of samples to extend on each side
        - mode: reflect or symmetric
        - buffer: optional scratch array of length len(lane) + 2 * radius,
            overwritten completely; allocated when None
    Returns:
        padded buffer
    """
    check_mode(mode)
    n = len(lane)
    assert radius < n, "Radius should be smaller than the lane length"
    if buffer is None:
        buffer = np.empty(n + 2 * radius, dtype=lane.dtype)
    assert len(buffer) == n + 2 * radius, "Incorrect buffer length"

    # symmetric mirrors around the half-sample point, reflect around the edge sample
    shift = 0 if mode == "symmetric" else 1
    for i in range(radius):
        buffer[i] = lane[radius - i - 1 + shift]
        buffer[n + radius + i] = lane[n - i - 1 - shift]
    buffer[radius : radius + n] = lane
    return buffer


def pad_lanes(data: np.ndarray, radius: int, mode: str = "reflect") -> np.ndarray:
    """
    Pads the last axis of data, every lane at once
    Arguments:
        - data: N-D array, lanes along the last axis
        - radius: number of samples to extend on each side
        - mode: reflect or symmetric
    Returns:
        array with the last axis extended by 2 * radius
    """
    check_mode(mode)
    n = data.shape[-1]
    assert radius < n, "Radius should be smaller than the lane length"
    pad_width = [(0, 0)] * (data.ndim - 1) + [(radius, radius)]
    return np.pad(data, pad_width, mode=mode)
