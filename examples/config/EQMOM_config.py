config = {
    "n_moments": 5,
    # Number of moments passed to the inverter.

    "n_primary_nodes": None,
    # Number of primary quadrature nodes. None: (n_moments - 1) // 2.

    "n_secondary_nodes": 10,
    # Number of secondary quadrature nodes of each kernel.

    "kernel": "lognormal",
    # Kernel density function: "lognormal", "gamma" or "gaussian".

    "strategy": "mStarRealizability",
    # Algorithm used to find sigma:
    # "mStarRealizability": starred moments on the boundary of the moment space (Pigou 2018)
    # "momentMatching": root of the mismatch of the last moment (Yuan 2012)

    "sigma_tol": 1e-8,
    "sigma_tol_rel": 1e-6,
    "target_function_tol": 1e-10,
    # Convergence tolerances of the sigma search.

    "max_sigma_iter": 1000,
    # Maximum number of iterations of the sigma search.

    "sigma_min": 1e-6,
    # Below this value of sigma, the classical QMOM inversion is used.

    "min_mean": 1e-8,
    "min_variance": 1e-8,
    # Below these values the distribution is treated as singular (sum of Dirac delta functions).

    "verbose": True,
}
