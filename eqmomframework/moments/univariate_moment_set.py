# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 11:20:36 2026

"""
import numpy as np
from eqmomframework.utils.func import jit_qmom

SUPPORTS = ("RPlus", "R")

class UnivariateMomentSet:
    """
    Ordered set of raw moments [M0, M1, ..., M(K-1)] of a univariate number
    density function together with its realizability bookkeeping.

    The realizability test depends on the support of the distribution:

    - "RPlus" ([0, +inf)): the zeta parameters zeta_1 ... zeta_(K-1) must be positive.
    - "R" ((-inf, +inf)): the recurrence coefficients b_1 ... b_((K-1)//2) must be positive.

    The number of realizable moments is the length of the longest prefix
    of the set that is strictly inside the moment space. It is zero for M0 <= 0.

    Parameters
    ----------
    moments : array-like
        Raw moments, starting from the zeroth order.
    support : str, optional
        "RPlus" (default) or "R".
    """

    def __init__(self, moments, support="RPlus"):
        if support not in SUPPORTS:
            raise ValueError(f"Unsupported support '{support}'. Choose from {SUPPORTS}.")
        self.moments = np.array(moments, dtype=np.float64).ravel()
        self.support = support
        self._check_realizability()

    def _check_realizability(self):
        n_mom = len(self.moments)
        self.zetas = np.zeros(0)
        self.betas = np.zeros(0)
        if n_mom == 0 or not np.all(np.isfinite(self.moments)) or self.moments[0] <= 0.0:
            self.n_realizable_moments = 0
            return

        if self.support == "RPlus":
            self.zetas, self.n_realizable_moments = jit_qmom.calc_zetas(self.moments)
        else:
            self.betas, self.n_realizable_moments = jit_qmom.calc_betas(self.moments)

    def __len__(self):
        return len(self.moments)

    def __getitem__(self, key):
        return self.moments[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.moments.copy()
        return self.moments.astype(dtype)

    def __repr__(self):
        return (f"UnivariateMomentSet({self.moments.tolist()}, support='{self.support}', "
                f"n_realizable_moments={self.n_realizable_moments})")

    @property
    def n_moments(self):
        return len(self.moments)

    @property
    def mean(self):
        return self.moments[1] / self.moments[0]

    @property
    def variance(self):
        return self.moments[2] / self.moments[0] - self.mean**2

    @property
    def is_on_moment_space_boundary(self):
        return self.n_realizable_moments < self.n_moments

    @property
    def realizability_parameters(self):
        """
        One parameter per moment order beyond the first two. Each of them must
        be positive for the set to be strictly realizable.

        RPlus: zeta_2 ... zeta_(K-1). R: b_1 ... b_((K-1)//2), one per even order.
        """
        if self.support == "RPlus":
            return self.zetas[1:]
        return self.betas

    def copy_with(self, moments):
        """Return a new moment set with the same support and the given moment values."""
        return UnivariateMomentSet(moments, support=self.support)
