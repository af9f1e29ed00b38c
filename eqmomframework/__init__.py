from eqmomframework.base.errors import ConfigurationError, RealizabilityFailure, ConvergenceWarning
from eqmomframework.base.eqmom_config import EQMOMConfig, load_config, make_config
from eqmomframework.base.base_inversion import ExtendedMomentInversion, EQMOMResult
from eqmomframework.moments.univariate_moment_set import UnivariateMomentSet
from eqmomframework.kernel import KERNELS, KernelDensityFunction, register_kernel, new_kernel
from eqmomframework.eqmom.eqmom_mstar_realizability import MStarRealizability
from eqmomframework.eqmom.eqmom_moment_matching import MomentMatching
from eqmomframework.eqmom.eqmom_factory import STRATEGIES, register_strategy, new_extended_inversion

__version__ = "1.0.0"
