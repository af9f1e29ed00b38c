from eqmomframework.kernel.kernel_base import KERNELS, KernelDensityFunction, register_kernel, new_kernel
from eqmomframework.kernel.kernel_lognormal import LognormalEQMOM
from eqmomframework.kernel.kernel_gamma import GammaEQMOM
from eqmomframework.kernel.kernel_gaussian import GaussianEQMOM
