# -*- coding: utf-8 -*-
"""
Created on Thu Oct  8 10:05:19 2026

"""
import numpy as np
from scipy.optimize import brentq
from eqmomframework.base.base_inversion import ExtendedMomentInversion
from eqmomframework.base.errors import ConfigurationError
from eqmomframework.utils.func import jit_qmom

class MomentMatching(ExtendedMomentInversion):
    """
    EQMOM in which sigma is the root of the mismatch between the last moment
    M_2N and the value m2N(sigma) rebuilt from the first 2N moments:

    1. transform M_0 ... M_2N into starred moments for the trial sigma,
    2. invert M*_0 ... M*_(2N-1) into N primary nodes,
    3. rebuild M*_2N from these nodes and transform it back with the kernel.

    References:
        C. Yuan, F. Laurent, R. O. Fox, "An extended quadrature method of moments
        for population balance equations", J. Aerosol Sci. 51, 1-23, 2012.
    """

    def __init__(self, config):
        if config.n_moments < 2*config.n_primary_nodes + 1:
            raise ConfigurationError("The momentMatching algorithm needs n_moments >= 2*n_primary_nodes + 1.")
        super().__init__(config)

    def target_function(self, sigma, moments):
        """
        Relative mismatch (M_2N - m2N(sigma)) / M_2N. Returns -1 where the
        starred moments are no longer realizable.
        """
        n_nodes = self.n_primary_nodes
        last = 2*n_nodes
        moments_star = self.kernel.moments_to_moments_star(sigma, moments.moments[:last + 1])
        if moments.copy_with(moments_star[:last]).n_realizable_moments < last:
            return -1.0
        abscissae, weights, _ = jit_qmom.calc_qmom_nodes_weights(
            moments_star[:last], n_nodes, self.config.use_central)
        moments_star[last] = np.sum(weights * abscissae**last)
        m2n = self.kernel.m2n(sigma, moments.copy_with(moments_star))
        if m2n is None:
            return -1.0
        return (moments[last] - m2n) / moments[last]

    def find_sigma(self, moments):
        sigma_max = self.kernel.sigma_max(moments)
        f_low = self.target_function(0.0, moments)
        if f_low <= self.config.target_function_tol or sigma_max <= 0.0:
            return 0.0, True, 0
        f_high = self.target_function(sigma_max, moments)
        if f_high >= 0.0:
            return sigma_max, True, 0

        sigma, r = brentq(self.target_function, 0.0, sigma_max, args=(moments,),
                          xtol=self.config.sigma_tol,
                          rtol=max(self.config.sigma_tol_rel, 4*np.finfo(float).eps),
                          maxiter=self.config.max_sigma_iter, full_output=True, disp=False)
        return sigma, r.converged, r.iterations
