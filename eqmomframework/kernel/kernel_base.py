# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 13:48:10 2026

"""
from abc import ABC, abstractmethod
import numpy as np
from eqmomframework.base.errors import ConfigurationError

KERNELS = {}

def register_kernel(name):
    """Class decorator adding a kernel density function to the run-time selection table."""
    def decorator(cls):
        KERNELS[name] = cls
        cls.name = name
        return cls
    return decorator

def new_kernel(name):
    """Construct the kernel density function registered under `name`."""
    try:
        kernel_cls = KERNELS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown kernel density function '{name}'. Valid kernels are: {sorted(KERNELS)}") from None
    return kernel_cls()

class KernelDensityFunction(ABC):
    """
    Kernel density function of EQMOM.

    Every primary quadrature node x_i is replaced by a kernel of width sigma,
    so that the moments of the distribution become

        M_k = sum_i w_i * int x^k delta_sigma(x, x_i) dx

    Each kernel defines the closed-form map between the moments M and the
    moments M* of the underlying point masses ("starred" moments), the
    three-term recurrence of its orthogonal polynomials used to build the
    secondary quadrature and its density formula.

    Attributes
    ----------
    support : str
        Support of the kernel, "RPlus" or "R".
    """
    support = "RPlus"
    name = None

    @abstractmethod
    def moments_to_moments_star(self, sigma, moments):
        """Return the starred moments for a given sigma as numpy array."""

    @abstractmethod
    def moments_star_to_moments(self, sigma, moments_star):
        """Exact inverse of moments_to_moments_star for the same sigma."""

    @abstractmethod
    def recurrence_relation(self, sigma, primary_abscissa, n_nodes):
        """
        Return the recurrence coefficients (a, b) of the orthogonal polynomials of
        the kernel centered at primary_abscissa, in the local frame of the kernel.
        b[0] = 0 by convention.
        """

    @abstractmethod
    def sigma_max(self, moments):
        """Upper bound of sigma for a UnivariateMomentSet."""

    @abstractmethod
    def secondary_abscissa(self, primary_abscissa, local_abscissa, sigma):
        """Map a quadrature abscissa in the local frame of the kernel to physical coordinates."""

    @abstractmethod
    def f(self, x, primary_abscissa, sigma):
        """Evaluate the kernel density at the points x."""

    def m2n(self, sigma, moments_star):
        """
        Value of the last moment in terms of the original moments, given starred
        moments whose last entry was rebuilt from the quadrature of the lower ones.

        Parameters
        ----------
        sigma : float
            Kernel parameter.
        moments_star : UnivariateMomentSet
            Starred moments.

        Returns
        -------
        float or None
            None if fewer than len(moments_star) - 1 starred moments are realizable.
        """
        if moments_star.n_realizable_moments < len(moments_star) - 1:
            return None
        return self.moments_star_to_moments(sigma, np.asarray(moments_star))[-1]
