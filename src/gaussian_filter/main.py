import numpy as np
import warnings
from .gaussian import check_parameters, gaussian_kernel, gaussian_weights, kernel_radius
from .boundary import check_mode
from .convolve import check_extent, convolve_axis, normalize_axis

DEFAULT_TRUNCATE = 4.0
DEFAULT_MODE = "reflect"


def as_float_array(data) -> np.ndarray:
    """
    Returns data as a floating point numpy array, without copying float inputs
    Arguments:
        - data: array-like with at least one dimension
    Returns:
        numpy array
    """
    array = np.asarray(data)
    if array.ndim == 0:
        raise ValueError("Gaussian filter expects an array with at least one dimension")
    if np.issubdtype(array.dtype, np.floating):
        return array
    if np.issubdtype(array.dtype, np.complexfloating) or array.dtype == object:
        raise TypeError(f"Unsupported array dtype: {array.dtype}")
    warnings.warn(f"Array of dtype {array.dtype} is converted to float64")
    return array.astype(np.float64)


def _prepare(data, sigma, truncate, mode, axes=None):
    check_parameters(sigma, truncate)
    check_mode(mode)
    data = as_float_array(data)
    radius = kernel_radius(sigma, truncate)
    # nothing is allocated or computed unless the kernel fits the axes
    check_extent(data.shape, radius, axes=axes)
    if radius == 0:
        warnings.warn(
            f"Kernel radius is 0 for sigma={sigma} and truncate={truncate}, filter does nothing"
        )
    return data, gaussian_kernel(sigma, radius, dtype=data.dtype)


def gaussian_filter(
    data,
    sigma: float,
    truncate: float = DEFAULT_TRUNCATE,
    mode: str = DEFAULT_MODE,
    folded: bool = False,
) -> np.ndarray:
    """
    Gaussian filter for n-dimensional arrays.
    The same 1D kernel is applied along every axis in ascending order,
    each pass reading the output of the previous one.
    Arguments:
        - data: N-D array, left untouched
        - sigma: standard deviation of the gaussian kernel
        - truncate: truncate the kernel at this many standard deviations
        - mode: boundary mode, reflect (edge not repeated, scipy.ndimage "mirror")
            or symmetric (edge repeated, scipy.ndimage "reflect"); use symmetric
            to match scipy.ndimage.gaussian_filter defaults
        - folded: use the symmetric-kernel fast path
    Returns:
        new array with the same shape and dtype
    Raises:
        InsufficientExtent if some axis is not longer than the kernel radius,
            checked before any work is done
    """
    data, weights = _prepare(data, sigma, truncate, mode)

    output = data
    for d in range(data.ndim):
        output = convolve_axis(output, weights, axis=d, mode=mode, folded=folded)
    return output


def gaussian_filter1d(
    data,
    sigma: float,
    truncate: float = DEFAULT_TRUNCATE,
    axis: int = -1,
    mode: str = DEFAULT_MODE,
    folded: bool = False,
) -> np.ndarray:
    """Applies the gaussian kernel along a single axis of the array."""
    data = as_float_array(data)
    axis = normalize_axis(axis, data.ndim)
    data, weights = _prepare(data, sigma, truncate, mode, axes=[axis])
    return convolve_axis(data, weights, axis=axis, mode=mode, folded=folded)


class GaussianFilter:
    def __init__(
        self,
        sigma: float = 1.0,
        truncate: float = DEFAULT_TRUNCATE,
        mode: str = DEFAULT_MODE,
        folded: bool = False,
    ) -> None:
        self.setup(sigma=sigma, truncate=truncate, mode=mode, folded=folded)

    def setup(self, **kwargs) -> None:
        """
        Updates filter settings, unspecified ones are kept
        Arguments:
            - sigma: standard deviation of the gaussian kernel
            - truncate: truncate the kernel at this many standard deviations
            - mode: reflect or symmetric
            - folded: use the symmetric-kernel fast path
        Returns:
            None
        """
        unknown = set(kwargs) - {"sigma", "truncate", "mode", "folded"}
        assert len(unknown) == 0, f"Unknown filter settings: {sorted(unknown)}"
        sigma = kwargs.get("sigma", getattr(self, "sigma", None))
        truncate = kwargs.get("truncate", getattr(self, "truncate", None))
        mode = kwargs.get("mode", getattr(self, "mode", None))
        check_parameters(sigma, truncate)
        check_mode(mode)
        self.sigma = sigma
        self.truncate = truncate
        self.mode = mode
        self.folded = kwargs.get("folded", getattr(self, "folded", False))

    @property
    def radius(self) -> int:
        return kernel_radius(self.sigma, self.truncate)

    def weights(self, dtype=np.float64) -> np.ndarray:
        return gaussian_weights(self.sigma, self.truncate, dtype=dtype)

    def filter(self, data) -> np.ndarray:
        return gaussian_filter(
            data, self.sigma, truncate=self.truncate, mode=self.mode, folded=self.folded
        )

    def filter1d(self, data, axis: int = -1) -> np.ndarray:
        return gaussian_filter1d(
            data,
            self.sigma,
            truncate=self.truncate,
            axis=axis,
            mode=self.mode,
            folded=self.folded,
        )

    def __call__(self, data) -> np.ndarray:
        return self.filter(data)

    def __repr__(self) -> str:
        return (
            f"<GaussianFilter(sigma={self.sigma}, truncate={self.truncate}), "
            f"radius {self.radius}, mode {self.mode}>"
        )
