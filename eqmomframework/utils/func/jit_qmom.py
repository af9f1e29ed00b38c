# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 09:12:44 2026

Jit-compiled moment recurrences and Gauss quadrature used by EQMOM.
The recurrence is the Chebyshev (Wheeler) algorithm as described in
W. Gautschi, "Orthogonal Polynomials: Computation and Approximation", 2004.
"""
import numpy as np
from numba import jit

@jit(nopython=True)
def calc_chebyshev_recurrence(moments):
    """
    Calculate the recurrence coefficients of the monic orthogonal polynomials
    associated with a moment sequence of arbitrary length.

    The coefficient a_k needs the moments up to order 2k+1 and b_k the moments
    up to order 2k, so K moments give K//2 values of a and (K+1)//2 values of b.
    By convention b[0] = 0. The calculation stops at the first non-positive b_k,
    which is left in the array.

    Parameters:
        moments (numpy.ndarray): Array of moments [M0, M1, ..., M(K-1)], M0 > 0.

    Returns:
        tuple: (a, b, n_valid), where n_valid is the index of the first
        non-positive b_k, or len(b) if all of them are positive.
    """
    n_mom = len(moments)
    n_a = n_mom // 2
    n_b = (n_mom + 1) // 2
    a = np.zeros(n_a)
    b = np.zeros(n_b)
    # Row k+1 of sigma holds the modified moments sigma_{k,l}; row 0 is sigma_{-1,l} = 0
    sigma = np.zeros((n_b + 1, n_mom + 1))
    sigma[1, :n_mom] = moments

    if n_a > 0:
        a[0] = moments[1] / moments[0]

    for k in range(1, n_b):
        for l in range(k, n_mom - k):
            sigma[k + 1, l] = sigma[k, l + 1] - a[k - 1]*sigma[k, l] - b[k - 1]*sigma[k - 1, l]
        b[k] = sigma[k + 1, k] / sigma[k, k - 1]
        if b[k] <= 0.0:
            return a, b, k
        if k < n_a:
            a[k] = sigma[k + 1, k + 1]/sigma[k + 1, k] - sigma[k, k]/sigma[k, k - 1]

    return a, b, n_b

@jit(nopython=True)
def calc_zetas(moments):
    """
    Compute the zeta parameters of a moment sequence on the support [0, +inf).

    zeta_1 = a_0, zeta_2k = b_k / zeta_(2k-1), zeta_(2k+1) = a_k - zeta_2k.
    A sequence is strictly realizable on [0, +inf) when all zetas are positive.
    The calculation stops at the first non-positive zeta, the remaining entries
    stay zero.

    Parameters:
        moments (numpy.ndarray): Array of moments [M0, M1, ..., M(K-1)], M0 > 0.

    Returns:
        tuple: (zetas, n_realizable), where zetas[j-1] = zeta_j for j = 1..K-1 and
        n_realizable is the order of the first non-positive zeta (or K).
    """
    n_mom = len(moments)
    zetas = np.zeros(max(n_mom - 1, 0))
    if n_mom < 2:
        return zetas, n_mom

    a, b, n_valid = calc_chebyshev_recurrence(moments)
    for j in range(1, n_mom):
        k = j // 2
        if j == 1:
            zeta = a[0]
        elif j % 2 == 0:
            zeta = b[k] / zetas[j - 2]
        else:
            zeta = a[k] - zetas[j - 2]
        zetas[j - 1] = zeta
        if zeta <= 0.0:
            return zetas, j

    return zetas, n_mom

@jit(nopython=True)
def calc_betas(moments):
    """
    Compute the recurrence coefficients b_1, b_2, ... of a moment sequence on the
    support (-inf, +inf). The sequence is strictly realizable when all of them
    are positive.

    Returns:
        tuple: (betas, n_realizable), where betas[k-1] = b_k and n_realizable is
        2k for the first non-positive b_k (or K).
    """
    n_mom = len(moments)
    if n_mom < 3:
        return np.zeros(0), n_mom
    a, b, n_valid = calc_chebyshev_recurrence(moments)
    # Entries after the first non-positive b_k were never computed and stay zero
    betas = np.copy(b[1:])
    if n_valid < len(b):
        return betas, 2*n_valid
    return betas, n_mom

@jit(nopython=True)
def compute_central_moments_1d(moments):
    """
    Compute normalized central moments of a 1D distribution.

    Returns:
        tuple: (bx, central_moments) where bx is the mean and central_moments[0] = 1.
    """
    n_mom = len(moments)
    bx = moments[1] / moments[0]
    central_moments = np.zeros(n_mom)
    for k in range(n_mom):
        coeff = 1.0
        mom = 0.0
        for p in range(k + 1):
            # coeff is the binomial coefficient C(k, p)
            mom += coeff * (-bx) ** (k - p) * moments[p]
            coeff = coeff * (k - p) / (p + 1)
        central_moments[k] = mom / moments[0]
    central_moments[1] = 0.0
    return bx, central_moments

@jit(nopython=True)
def recurrence_jacobi_nodes_weights(mom0, a, b):
    """
    Construct Jacobi matrix and solve for eigenvalues and eigenvectors to get nodes and weights
    (Golub-Welsch algorithm).

    Parameters:
        mom0 (float): Zeroth moment of the measure.
        a (numpy.ndarray): Recurrence coefficient a.
        b (numpy.ndarray): Recurrence coefficient b, b[0] is ignored.

    Returns:
        tuple: (x, w), sorted nodes and the corresponding weights.
    """
    # Compute square roots for off-diagonal entries.
    sqrt_b = np.sqrt(b[1:])
    jacobi = np.diag(a) + np.diag(sqrt_b, -1) + np.diag(sqrt_b, 1)
    # Eigen-decomposition of the Jacobi matrix.
    eigenvalues, eigenvectors = np.linalg.eigh(jacobi)
    idx = eigenvalues.argsort()
    x = eigenvalues[idx]
    eigenvectors = eigenvectors[:, idx]
    # First row of eigenvectors gives the squared weights.
    w = mom0 * eigenvectors[0, :]**2
    return x, w

@jit(nopython=True)
def calc_qmom_nodes_weights(moments, n, use_central):
    """
    Compute nodes (ξ_i) and weights (w_i) of the n-node Gauss quadrature matching
    the moments [M0, M1, ..., M2n-1].

    If the moments lie on the boundary of the moment space, the number of nodes is
    reduced to the number the moments support. Missing nodes are returned with
    zero weight and zero abscissa.

    Parameters:
        moments (numpy.ndarray): Array of at least 2n moments, M0 > 0.
        n (int): Number of quadrature nodes.
        use_central (bool): If True, use central moments.

    Returns:
        tuple: (x, w, n_eff), nodes, weights and the effective number of nodes.
    """
    x = np.zeros(n)
    w = np.zeros(n)
    if n == 1 or len(moments) < 4:
        w[0] = moments[0]
        x[0] = moments[1] / moments[0]
        return x, w, 1

    mom = np.copy(moments[:2*n])
    bx = 0.0
    if use_central:
        bx, mom = compute_central_moments_1d(mom)

    a, b, n_valid = calc_chebyshev_recurrence(mom)
    n_eff = min(n, n_valid)
    if n_eff == 1:
        w[0] = moments[0]
        x[0] = moments[1] / moments[0]
        return x, w, 1

    x_eff, w_eff = recurrence_jacobi_nodes_weights(mom[0], a[:n_eff], b[:n_eff])
    if use_central:
        x_eff += bx
        w_eff *= moments[0]
    x[:n_eff] = x_eff
    w[:n_eff] = w_eff
    return x, w, n_eff
