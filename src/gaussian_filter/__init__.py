from .main import gaussian_filter, gaussian_filter1d, GaussianFilter
from .gaussian import gaussian_kernel, gaussian_weights, kernel_radius
from .boundary import MODES, fill_buffer, pad_lanes
from .convolve import InsufficientExtent, convolve1d, convolve_axis
