# -*- coding: utf-8 -*-
"""
Created on Wed Oct  7 09:30:12 2026

"""
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import numpy as np
from eqmomframework.base.errors import RealizabilityFailure, ConvergenceWarning
from eqmomframework.base.eqmom_config import EQMOMConfig
from eqmomframework.kernel.kernel_base import new_kernel
from eqmomframework.moments.univariate_moment_set import UnivariateMomentSet
from eqmomframework.utils.func import jit_qmom
from eqmomframework.utils.func.print import print_highlighted
from eqmomframework.utils.func.static_method import calc_quadrature_moments

@dataclass
class EQMOMResult:
    """Output of one call of ExtendedMomentInversion.invert."""
    primary_weights: np.ndarray
    primary_abscissae: np.ndarray
    secondary_weights: np.ndarray
    secondary_abscissae: np.ndarray
    sigma: float = 0.0
    found_unrealizable_sigma: bool = False
    null_sigma: bool = False
    state: str = "init"
    n_sigma_iter: int = 0

    @classmethod
    def empty(cls, n_primary_nodes, n_secondary_nodes):
        return cls(primary_weights=np.zeros(n_primary_nodes),
                   primary_abscissae=np.zeros(n_primary_nodes),
                   secondary_weights=np.zeros((n_primary_nodes, n_secondary_nodes)),
                   secondary_abscissae=np.zeros((n_primary_nodes, n_secondary_nodes)))

class ExtendedMomentInversion(ABC):
    """
    Extended quadrature method of moments (EQMOM) for univariate distributions.

    The distribution is approximated by a sum of N kernel density functions of
    common width sigma,

        n(x) = sum_i w_i delta_sigma(x, x_i),

    and every kernel is in turn approximated by a secondary Gauss quadrature of
    M nodes, so that source terms can be integrated on N x M nodes.

    References:
        C. Yuan, F. Laurent, R. O. Fox, "An extended quadrature method of moments
        for population balance equations", J. Aerosol Sci. 51, 1-23, 2012.

    Subclasses implement `find_sigma`, the algorithm choosing sigma. Everything
    else (singular distributions, the QMOM fallback, primary and secondary
    quadratures) is handled here.

    The results of `invert` are stored in `self.result` and are overwritten by
    the next call. Use one instance per thread.

    Parameters
    ----------
    config : EQMOMConfig
        Read-only configuration, shared safely between instances.
    """

    def __init__(self, config):
        if not isinstance(config, EQMOMConfig):
            raise TypeError(f"config must be an EQMOMConfig, got {type(config).__name__}.")
        self.config = config
        self.kernel = new_kernel(config.kernel)
        self.reset()

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} instances cannot be copied.")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} instances cannot be copied.")

    @abstractmethod
    def find_sigma(self, moments):
        """
        Find the parameter sigma of the kernel density function.

        Parameters
        ----------
        moments : UnivariateMomentSet
            Realizable moments with at least 2N realizable moments.

        Returns
        -------
        tuple
            (sigma, converged, n_iter)
        """

    def reset(self):
        """Clear the results of the previous inversion."""
        self.result = EQMOMResult.empty(self.config.n_primary_nodes, self.config.n_secondary_nodes)

    def _to_moment_set(self, moments):
        if isinstance(moments, UnivariateMomentSet):
            values = moments.moments
        else:
            values = np.asarray(moments, dtype=np.float64).ravel()
        if len(values) != self.n_moments:
            raise RealizabilityFailure(f"Expected {self.n_moments} moments, got {len(values)}.")
        if not np.all(np.isfinite(values)):
            raise RealizabilityFailure("Moments contain non-finite values.")
        if values[0] <= 0.0:
            raise RealizabilityFailure(f"Moments are NOT realizable (moment[0] = {values[0]} <= 0.0).")
        return UnivariateMomentSet(values, support=self.kernel.support)

    def _is_singular(self, moments):
        if moments.n_realizable_moments < 2*self.n_primary_nodes or moments.n_moments < 3:
            return True
        if self.kernel.support == "RPlus" and moments.mean < self.config.min_mean:
            return True
        return moments.variance < self.config.min_variance

    def invert(self, moments):
        """
        Invert moments to find weights, abscissae and sigma.

        Parameters
        ----------
        moments : array-like or UnivariateMomentSet
            n_moments raw moments, moment[0] > 0.

        Raises
        ------
        RealizabilityFailure
            If moment[0] <= 0, the number of moments is wrong or values are not finite.
        """
        self.reset()
        moments = self._to_moment_set(moments)

        if self._is_singular(moments):
            self.invert_singular(moments)
            return

        sigma, converged, n_iter = self.find_sigma(moments)
        self.result.n_sigma_iter = n_iter
        if not converged:
            self.result.found_unrealizable_sigma = True
            warnings.warn(f"Sigma did not converge in {n_iter} iterations, sigma = {sigma} is used.",
                          ConvergenceWarning, stacklevel=2)

        if sigma < self.config.sigma_min:
            self._invert_qmom(moments)
            return

        self.result.sigma = sigma
        moments_star = self.kernel.moments_to_moments_star(sigma, moments.moments)
        abscissae, weights, _ = jit_qmom.calc_qmom_nodes_weights(
            moments_star[:2*self.n_primary_nodes], self.n_primary_nodes, self.config.use_central)
        self._set_primary(weights, abscissae)
        self.secondary_quadrature(self.result.primary_weights, self.result.primary_abscissae)
        self.result.state = "converged"

    def _invert_qmom(self, moments):
        """Classical QMOM on the raw moments, used when sigma is below sigma_min."""
        if self.config.verbose:
            print_highlighted("Sigma is below sigma_min, QMOM is used.", title="INFO")
        abscissae, weights, _ = jit_qmom.calc_qmom_nodes_weights(
            moments.moments[:2*self.n_primary_nodes], self.n_primary_nodes, self.config.use_central)
        self._set_primary(weights, abscissae)
        self._collapse_secondary()
        self.result.null_sigma = True
        self.result.state = "fallback"

    def invert_singular(self, moments):
        """
        Invert moments of a singular distribution (fewer than 2N realizable
        moments, or mean/variance below their minimum) with a reduced number of
        Dirac delta functions. Sigma is set to zero.
        """
        if self.config.verbose:
            print_highlighted(f"Singular moment set ({moments.n_realizable_moments} realizable moments), "
                              "sigma is set to zero.", title="INFO")
        n_nodes = min(moments.n_realizable_moments // 2, self.n_primary_nodes)
        if n_nodes <= 1 or moments.variance < self.config.min_variance:
            weights = np.array([moments[0]])
            abscissae = np.array([moments.mean])
        else:
            abscissae, weights, _ = jit_qmom.calc_qmom_nodes_weights(
                moments.moments[:2*n_nodes], n_nodes, self.config.use_central)
        self._set_primary(weights, abscissae)
        self._collapse_secondary()
        self.result.null_sigma = True
        self.result.state = "singular"

    def _set_primary(self, weights, abscissae):
        n_nodes = len(weights)
        weights = np.maximum(weights, 0.0)
        if self.kernel.support == "RPlus":
            abscissae = np.maximum(abscissae, 0.0)
        self.result.primary_weights[:] = 0.0
        self.result.primary_abscissae[:] = 0.0
        self.result.primary_weights[:n_nodes] = weights
        self.result.primary_abscissae[:n_nodes] = abscissae

    def _collapse_secondary(self):
        self.result.sigma = 0.0
        self.result.secondary_weights[:] = 1.0 / self.n_secondary_nodes
        self.result.secondary_abscissae[:] = self.result.primary_abscissae[:, None]

    def secondary_quadrature(self, primary_weights, primary_abscissae):
        """
        Compute secondary weights and abscissae of every primary node with the
        Golub-Welsch algorithm applied to the recurrence of the kernel.

        Primary nodes with zero weight keep secondary nodes collapsed on the
        primary abscissa.
        """
        sigma = self.result.sigma
        n_sec = self.n_secondary_nodes
        for i, (weight, abscissa) in enumerate(zip(primary_weights, primary_abscissae)):
            if weight <= 0.0 or (self.kernel.support == "RPlus" and abscissa <= 0.0):
                self.result.secondary_weights[i, :] = 1.0 / n_sec
                self.result.secondary_abscissae[i, :] = abscissa
                continue
            a, b = self.kernel.recurrence_relation(sigma, abscissa, n_sec)
            local_abscissae, local_weights = jit_qmom.recurrence_jacobi_nodes_weights(1.0, a, b)
            self.result.secondary_weights[i, :] = local_weights
            self.result.secondary_abscissae[i, :] = self.kernel.secondary_abscissa(abscissa, local_abscissae, sigma)

    def f(self, x):
        """
        Evaluate the reconstructed number density function at the points x.
        Returns zeros if sigma is zero (sum of Dirac delta functions).
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.zeros_like(x)
        if self.result.sigma <= 0.0:
            return y
        for weight, abscissa in zip(self.result.primary_weights, self.result.primary_abscissae):
            if weight > 0.0:
                y += weight * self.kernel.f(x, abscissa, self.result.sigma)
        return y

    def calc_moments(self, n_moments=None):
        """
        Moments of order 0 ... n_moments-1 of the secondary quadrature
        (of the primary quadrature if sigma is zero).
        """
        if n_moments is None:
            n_moments = self.n_moments
        if self.result.sigma > 0.0:
            return calc_quadrature_moments(self.result.primary_weights[:, None] * self.result.secondary_weights,
                                           self.result.secondary_abscissae, n_moments)
        return calc_quadrature_moments(self.result.primary_weights, self.result.primary_abscissae, n_moments)

    @property
    def n_moments(self):
        return self.config.n_moments

    @property
    def n_primary_nodes(self):
        return self.config.n_primary_nodes

    @property
    def n_secondary_nodes(self):
        return self.config.n_secondary_nodes

    @property
    def sigma(self):
        return self.result.sigma

    @property
    def primary_weights(self):
        return self.result.primary_weights

    @property
    def primary_abscissae(self):
        return self.result.primary_abscissae

    @property
    def secondary_weights(self):
        return self.result.secondary_weights

    @property
    def secondary_abscissae(self):
        return self.result.secondary_abscissae

    @property
    def found_unrealizable_sigma(self):
        return self.result.found_unrealizable_sigma

    @property
    def null_sigma(self):
        return self.result.null_sigma
