# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 14:25:51 2026

"""
import numpy as np
from eqmomframework.kernel.kernel_base import KernelDensityFunction, register_kernel

@register_kernel("lognormal")
class LognormalEQMOM(KernelDensityFunction):
    """
    Lognormal kernel with median x_i and shape parameter sigma,

        delta_sigma(x, x_i) = exp(-(ln x - ln x_i)^2 / (2 sigma^2)) / (x sigma sqrt(2 pi)).

    Its k-th moment is x_i^k * exp(k^2 sigma^2 / 2), hence
    M*_k = M_k * exp(-k^2 sigma^2 / 2).
    """
    support = "RPlus"

    def moments_to_moments_star(self, sigma, moments):
        moments = np.asarray(moments, dtype=np.float64)
        k = np.arange(len(moments))
        return moments * np.exp(-0.5 * sigma**2 * k**2)

    def moments_star_to_moments(self, sigma, moments_star):
        moments_star = np.asarray(moments_star, dtype=np.float64)
        k = np.arange(len(moments_star))
        return moments_star * np.exp(0.5 * sigma**2 * k**2)

    def recurrence_relation(self, sigma, primary_abscissa, n_nodes):
        # Stieltjes-Wigert polynomials of the lognormal with unit median
        eta = np.exp(0.5 * sigma**2)
        sq_eta = eta**2
        i = np.arange(n_nodes, dtype=np.float64)

        a = ((sq_eta + 1.0) * sq_eta**i - 1.0) * eta**(2.0*i - 1.0)
        a[0] = eta
        b = eta**(6.0*i - 4.0) * (sq_eta**i - 1.0)
        b[0] = 0.0
        return a, b

    def sigma_max(self, moments):
        sigma_zeta1 = np.sqrt(max(np.log(moments[0]*moments[2] / moments[1]**2), 0.0))
        if moments.n_realizable_moments > 3:
            sigma_zeta2 = np.sqrt(max(np.log(moments[1]*moments[3] / moments[2]**2), 0.0))
            return min(sigma_zeta1, sigma_zeta2)
        return sigma_zeta1

    def secondary_abscissa(self, primary_abscissa, local_abscissa, sigma):
        return primary_abscissa * local_abscissa

    def f(self, x, primary_abscissa, sigma):
        x = np.asarray(x, dtype=np.float64)
        y = np.zeros_like(x)
        pos = x > 0
        y[pos] = (np.exp(-(np.log(x[pos]) - np.log(primary_abscissa))**2 / (2.0*sigma**2))
                  / (x[pos] * sigma * np.sqrt(2.0*np.pi)))
        return y
