import numpy as np
from math import isfinite


def check_parameters(sigma: float, truncate: float) -> None:
    """
    Validates filter parameters
    Arguments:
        - sigma: standard deviation of the gaussian
        - truncate: truncate the kernel at this many standard deviations
    Returns:
        None
    """
    for name, value in (("sigma", sigma), ("truncate", truncate)):
        if not isfinite(value) or value <= 0:
            raise ValueError(f"{name} should be a positive finite number, got {value}")


def kernel_radius(sigma: float, truncate: float) -> int:
    """
    Half-width of the kernel, truncate standard deviations rounded half up.
    The product is evaluated in the floating type of sigma and truncate
    (float64 for python numbers), so float32 parameters round as float32 does.
    """
    check_parameters(sigma, truncate)
    dtype = np.result_type(sigma, truncate)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    with np.errstate(over="ignore"):
        reach = dtype.type(truncate) * dtype.type(sigma) + dtype.type(0.5)
    if not np.isfinite(reach):
        raise ValueError(
            f"Kernel radius is not finite for sigma={sigma} and truncate={truncate}"
        )
    return int(reach)


def gaussian_kernel(sigma: float, radius: int, dtype=np.float64) -> np.ndarray:
    """
    Generates a normalized 1D Gaussian kernel of length 2 * radius + 1.
    Both halves are computed from x**2, so kernel[radius - k] == kernel[radius + k].
    Weights are computed in at least float64 and cast to dtype at the end.
    Arguments:
        - sigma: standard deviation
        - radius: half-width of the kernel
        - dtype: floating point type of the weights
    Returns:
        numpy array of weights summing to 1
    """
    assert radius >= 0, "Kernel radius should not be negative"
    work = np.result_type(dtype, np.float64)
    sigma2 = work.type(sigma) ** 2
    x = np.arange(-radius, radius + 1, dtype=work)
    phi_x = np.exp(work.type(-0.5) / sigma2 * x**2)
    return (phi_x / np.sum(phi_x)).astype(dtype, copy=False)


def gaussian_weights(sigma: float, truncate: float, dtype=np.float64) -> np.ndarray:
    """Kernel for the given sigma, truncated at truncate standard deviations."""
    return gaussian_kernel(sigma, kernel_radius(sigma, truncate), dtype=dtype)
