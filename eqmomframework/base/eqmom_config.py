# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 14:03:58 2026

"""
import os
import numbers
import runpy
import dataclasses
import numpy as np
from dataclasses import dataclass
from eqmomframework.base.errors import ConfigurationError
from eqmomframework.utils.func.print import print_highlighted

@dataclass(frozen=True)
class EQMOMConfig:
    """
    Read-only configuration of an extended moment inverter.

    Parameters
    ----------
    n_moments : int
        Number of moments passed to `invert`.
    n_primary_nodes : int, optional
        Number of primary quadrature nodes N, 2N <= n_moments. Defaults to (n_moments - 1) // 2.
    n_secondary_nodes : int
        Number of secondary quadrature nodes per primary node.
    kernel : str
        Name of the kernel density function ("lognormal", "gamma", "gaussian").
    strategy : str
        Name of the algorithm used to find sigma ("mStarRealizability", "momentMatching").
    sigma_tol : float
        Absolute tolerance on the change of sigma.
    sigma_tol_rel : float
        Relative tolerance on the change of sigma.
    target_function_tol : float
        Tolerance on the target function whose root is sigma.
    min_mean : float
        Minimum mean to attempt the EQMOM reconstruction (kernels on [0, +inf) only).
    min_variance : float
        Minimum variance to attempt the EQMOM reconstruction.
    max_sigma_iter : int
        Maximum number of iterations allowed to find sigma.
    sigma_min : float
        Below this value of sigma, the classical QMOM inversion is used.
    use_central : bool
        Invert central moments in the classical inversion.
    verbose : bool
        Print a message when the singular or QMOM branch is taken.
    """
    n_moments: int
    n_primary_nodes: int = None
    n_secondary_nodes: int = 10
    kernel: str = "lognormal"
    strategy: str = "mStarRealizability"
    sigma_tol: float = 1e-8
    sigma_tol_rel: float = 1e-6
    target_function_tol: float = 1e-10
    min_mean: float = 1e-8
    min_variance: float = 1e-8
    max_sigma_iter: int = 1000
    sigma_min: float = 1e-6
    use_central: bool = True
    verbose: bool = False

    def __post_init__(self):
        # Sizes derived from numpy arrays are stored as plain int
        for key in ("n_moments", "n_primary_nodes", "n_secondary_nodes", "max_sigma_iter"):
            if _is_int(getattr(self, key)):
                object.__setattr__(self, key, int(getattr(self, key)))
        if self.n_primary_nodes is None and _is_int(self.n_moments):
            object.__setattr__(self, "n_primary_nodes", max((self.n_moments - 1) // 2, 1))
        check_config(self)

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))

def check_config(config):
    """
    Check the validity of the configuration values.

    Raises
    ------
    ConfigurationError
        If any value is out of its admissible range.
    """
    for key in ("n_moments", "n_primary_nodes", "n_secondary_nodes", "max_sigma_iter"):
        value = getattr(config, key)
        if not _is_int(value) or value <= 0:
            raise ConfigurationError(f"{key} must be a positive integer, got {value!r}.")
    if 2*config.n_primary_nodes > config.n_moments:
        raise ConfigurationError(
            f"2*n_primary_nodes ({2*config.n_primary_nodes}) must not exceed n_moments ({config.n_moments}).")
    for key in ("sigma_tol", "target_function_tol"):
        if not getattr(config, key) > 0:
            raise ConfigurationError(f"{key} must be positive, got {getattr(config, key)!r}.")
    for key in ("sigma_tol_rel", "sigma_min"):
        if not getattr(config, key) >= 0:
            raise ConfigurationError(f"{key} must be non-negative, got {getattr(config, key)!r}.")
    for key in ("kernel", "strategy"):
        if not isinstance(getattr(config, key), str):
            raise ConfigurationError(f"{key} must be a name, got {getattr(config, key)!r}.")

def load_config(config_path):
    """
    Load configuration values from a Python configuration file.

    The file must define a dictionary named `config`. Entries with value None are skipped.

    Parameters
    ----------
    config_path : str
        The file path to the configuration file.

    Returns
    -------
    dict
        The configuration values.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found at: {config_path}.")
    print_highlighted(f"Using config file {config_path}.", title="CONFIG")
    conf = runpy.run_path(config_path)
    if "config" not in conf:
        raise ConfigurationError(f"No dictionary named 'config' found in {config_path}.")
    return {key: value for key, value in conf["config"].items() if value is not None}

def make_config(config=None, config_path=None, **overrides):
    """
    Build an EQMOMConfig from (in increasing priority) a config file, a dict or
    EQMOMConfig, and keyword overrides.
    """
    values = {}
    if config_path is not None:
        values.update(load_config(config_path))
    if isinstance(config, EQMOMConfig):
        values.update(dataclasses.asdict(config))
    elif config is not None:
        values.update(config)
    values.update(overrides)

    valid_keys = {field.name for field in dataclasses.fields(EQMOMConfig)}
    unknown = set(values) - valid_keys
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}.")
    if "n_moments" not in values:
        raise ConfigurationError("n_moments must be given.")
    return EQMOMConfig(**values)
