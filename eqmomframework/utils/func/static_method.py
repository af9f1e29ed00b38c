# -*- coding: utf-8 -*-
"""
Created on Fri Oct  9 09:16:48 2026

"""
import numpy as np
import scipy.stats as stats
from scipy.integrate import trapezoid

def create_ndf(distribution="lognormal", x_range=(0, 10), points=2000, **kwargs):
    """
    Create a normalized distribution function (probability density function).

    Parameters
    ----------
    distribution : str, optional
        Type of distribution: "normal", "gamma", "lognormal" (default: "lognormal")
    x_range : tuple, optional
        Range of the variable (start, end) (default: (0, 10))
    points : int, optional
        Number of discretization points (default: 2000)
    **kwargs
        Distribution-specific parameters:

        - normal: mean, std_dev
        - gamma: shape, scale
        - lognormal: mean (of log x), sigma

    Returns
    -------
    tuple
        (x, ndf) where x is coordinate array and ndf is distribution values

    Raises
    ------
    ValueError
        If distribution type is unsupported or x_range is invalid for distribution
    """
    x = np.linspace(x_range[0], x_range[1], points)

    if distribution in ["gamma", "lognormal"] and x_range[0] < 0:
        raise ValueError(f"{distribution.capitalize()} distribution requires x_range[0] >= 0.")

    if distribution == "normal":
        ndf = stats.norm.pdf(x, loc=kwargs.get("mean", 0.0), scale=kwargs.get("std_dev", 1.0))
    elif distribution == "gamma":
        ndf = stats.gamma.pdf(x, kwargs.get("shape", 2.0), scale=kwargs.get("scale", 1.0))
    elif distribution == "lognormal":
        ndf = stats.lognorm.pdf(x, kwargs.get("sigma", 0.5), scale=np.exp(kwargs.get("mean", 0.0)))
    else:
        raise ValueError("Unsupported distribution type. Choose from 'normal', 'gamma', 'lognormal'.")

    return x, ndf

def calc_ndf_moments(x, ndf, n_moments):
    """Moments of order 0 ... n_moments-1 of a tabulated NDF (trapezoidal rule)."""
    return np.array([trapezoid(ndf * x**k, x) for k in range(n_moments)])

def calc_quadrature_moments(weights, abscissae, n_moments):
    """Moments of order 0 ... n_moments-1 of a set of weighted nodes."""
    weights = np.ravel(weights)
    abscissae = np.ravel(abscissae)
    return np.array([np.sum(weights * abscissae**k) for k in range(n_moments)])
