import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from .boundary import fill_buffer, pad_lanes


class InsufficientExtent(ValueError):
    """Axis is too short for the kernel radius requested by sigma and truncate."""

    def __init__(self, axis: int, extent: int, radius: int) -> None:
        self.axis = axis
        self.extent = extent
        self.radius = radius
        super().__init__(
            "Data size is too small for the inputs (sigma and truncate): "
            f"axis {axis} has {extent} samples, kernel radius is {radius}"
        )


def kernel_half(weights: np.ndarray) -> int:
    assert weights.ndim == 1 and len(weights) % 2 == 1, "Kernel length should be odd"
    return len(weights) // 2


def normalize_axis(axis: int, ndim: int) -> int:
    if not -ndim <= axis < ndim:
        raise ValueError(f"Axis {axis} is out of bounds for array of dimension {ndim}")
    return axis % ndim


def check_extent(shape: tuple, radius: int, axes=None) -> None:
    """
    Checks every axis (or only the given ones) is longer than the kernel radius
    Arguments:
        - shape: array shape
        - radius: kernel half-width
        - axes: iterable of axes to check, all of them if None
    Returns:
        None
    """
    for d in range(len(shape)) if axes is None else axes:
        if radius >= shape[d]:
            raise InsufficientExtent(axis=d, extent=shape[d], radius=radius)


def convolve1d(lane: np.ndarray, weights: np.ndarray, mode: str = "reflect") -> np.ndarray:
    """Convolves a single lane with a symmetric kernel, one window at a time."""
    radius = kernel_half(weights)
    n = len(lane)
    check_extent((n,), radius)

    buffer = fill_buffer(lane, radius, mode=mode)
    output = np.empty(n, dtype=np.result_type(lane, weights))
    for idx in range(n):
        output[idx] = np.dot(buffer[idx : idx + len(weights)], weights)
    return output


def _dot(padded: np.ndarray, weights: np.ndarray) -> np.ndarray:
    windows = sliding_window_view(padded, len(weights), axis=-1)
    return windows @ weights


def _folded(padded: np.ndarray, weights: np.ndarray, n: int) -> np.ndarray:
    # center sample plus mirrored pairs sharing a weight
    radius = kernel_half(weights)
    output = padded[..., radius : radius + n] * weights[radius]
    for k in range(1, radius + 1):
        left = padded[..., radius - k : radius - k + n]
        right = padded[..., radius + k : radius + k + n]
        output += (left + right) * weights[radius + k]
    return output


def convolve_axis(
    data: np.ndarray,
    weights: np.ndarray,
    axis: int,
    mode: str = "reflect",
    folded: bool = False,
) -> np.ndarray:
    """
    Applies the kernel to every lane along one axis
    Arguments:
        - data: N-D input array, left untouched
        - weights: odd-length symmetric kernel
        - axis: axis to convolve along
        - mode: boundary mode, reflect or symmetric
        - folded: sum mirrored pairs first, halves the multiplications
    Returns:
        new array with the shape and dtype of data
    """
    axis = normalize_axis(axis, data.ndim)
    radius = kernel_half(weights)
    n = data.shape[axis]
    check_extent(data.shape, radius, axes=[axis])

    weights = weights.astype(data.dtype, copy=False)
    lanes = np.moveaxis(data, axis, -1)
    if radius == 0:
        convolved = lanes * weights[0]
    else:
        padded = pad_lanes(lanes, radius, mode=mode)
        convolved = _folded(padded, weights, n) if folded else _dot(padded, weights)

    output = np.empty_like(data)
    np.moveaxis(output, axis, -1)[...] = convolved
    return output
