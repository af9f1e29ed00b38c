# -*- coding: utf-8 -*-
"""
Created on Wed Oct  7 15:22:40 2026

"""
import numpy as np
from eqmomframework.base.base_inversion import ExtendedMomentInversion

SMALL = 1e-300

class MStarRealizability(ExtendedMomentInversion):
    """
    EQMOM in which sigma is chosen such that the starred moments M*(sigma) lie
    on the boundary of the moment space.

    M*(0) = M is strictly realizable and increasing sigma moves M* towards the
    boundary. The largest sigma for which M* is still realizable is the first
    root of the realizability parameter that is violated first. The parameters
    are the zetas on [0, +inf) and the recurrence coefficients b_k on
    (-inf, +inf), both positive inside the moment space.

    References:
        M. Pigou, J. Morchain, P. Fede, M-I. Penet, G. Laronze, "New developments
        of the Extended Quadrature Method of Moments to solve Population Balance
        Equations", J. Comput. Phys. 365, 243-268, 2018.
    """

    def __init__(self, config):
        super().__init__(config)
        # Scale of the realizability parameters of the current moment set
        self.parameter_scale = 1.0

    def realizability_parameter(self, moments_star):
        """Return the list of realizability parameters, one per moment order beyond the first two."""
        return moments_star.realizability_parameters

    def first_non_realizable_parameter(self, moments_star):
        """Return the index of the first non-positive realizability parameter, or None."""
        if moments_star.n_realizable_moments == 0:
            return 0
        parameters = self.realizability_parameter(moments_star)
        invalid = np.flatnonzero(~(parameters > 0.0))
        if len(invalid) == 0:
            return None
        return int(invalid[0])

    def target_function(self, moments_star, realizability_parameter_i):
        """
        Signed, dimensionless distance of a realizability parameter from the
        boundary of the moment space. Its root is sigma.

        Zetas are divided by the mean and the coefficients b_k by the variance of
        the moments being inverted (parameter_scale, set by find_sigma).
        """
        parameter = self.realizability_parameter(moments_star)[realizability_parameter_i]
        return parameter / self.parameter_scale

    def _moments_star(self, sigma, moments):
        return moments.copy_with(self.kernel.moments_to_moments_star(sigma, moments.moments))

    def _converged(self, sigma_low, sigma_high):
        return sigma_high - sigma_low < self.config.sigma_tol + self.config.sigma_tol_rel*sigma_low

    def find_sigma(self, moments):
        """
        Bracket sigma in [0, sigma_max] and refine it with the Illinois variant of
        the regula falsi, falling back to bisection when the secant step leaves
        the bracket.

        sigma_max is where the lowest order parameter vanishes, so the sign of
        the parameters there is rounding noise. The upper end is never evaluated:
        the bracket is bisected on realizability until an interior sigma is not
        realizable, and its first non-positive parameter becomes the one whose
        root is searched. The binding parameter is re-evaluated at every
        infeasible sigma, since a lower order parameter may become the first one
        to be violated.
        """
        if moments.support == "RPlus":
            self.parameter_scale = max(moments.mean, SMALL)
        else:
            self.parameter_scale = max(moments.variance, SMALL)

        sigma_low = 0.0
        moments_star_low = self._moments_star(sigma_low, moments)
        if self.first_non_realizable_parameter(moments_star_low) is not None:
            return 0.0, True, 0

        sigma_max = self.kernel.sigma_max(moments)
        if sigma_max <= 0.0:
            return 0.0, True, 0

        sigma_high = sigma_max
        param_i = None
        f_low = f_high = np.nan
        side = 0

        for n_iter in range(1, self.config.max_sigma_iter + 1):
            sigma = 0.5*(sigma_low + sigma_high)
            if param_i is not None and np.isfinite(f_low) and np.isfinite(f_high) and f_low - f_high > 0.0:
                sigma_secant = sigma_high - f_high*(sigma_high - sigma_low)/(f_high - f_low)
                if sigma_low < sigma_secant < sigma_high:
                    sigma = sigma_secant

            moments_star = self._moments_star(sigma, moments)
            invalid_i = self.first_non_realizable_parameter(moments_star)

            if invalid_i is None:
                sigma_low, moments_star_low = sigma, moments_star
                if param_i is not None:
                    f_low = self.target_function(moments_star, param_i)
                    if abs(f_low) < self.config.target_function_tol:
                        return sigma, True, n_iter
                    if side == 1:
                        f_high *= 0.5
                    side = 1
            else:
                if invalid_i != param_i:
                    param_i = invalid_i
                    f_low = self.target_function(moments_star_low, param_i)
                    side = 0
                sigma_high = sigma
                f_high = self.target_function(moments_star, param_i)
                if side == -1:
                    f_low *= 0.5
                side = -1

            if self._converged(sigma_low, sigma_high):
                # Every sigma below sigma_max is realizable
                if sigma_high == sigma_max:
                    return sigma_max, True, n_iter
                return sigma_low, True, n_iter

        return sigma_low, False, self.config.max_sigma_iter
