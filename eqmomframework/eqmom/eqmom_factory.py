# -*- coding: utf-8 -*-
"""
Created on Thu Oct  8 14:47:33 2026

"""
from eqmomframework.base.errors import ConfigurationError
from eqmomframework.base.eqmom_config import make_config
from eqmomframework.eqmom.eqmom_mstar_realizability import MStarRealizability
from eqmomframework.eqmom.eqmom_moment_matching import MomentMatching

STRATEGIES = {
    "mStarRealizability": MStarRealizability,
    "momentMatching": MomentMatching,
}

def register_strategy(name, cls):
    """Add an ExtendedMomentInversion subclass to the run-time selection table."""
    STRATEGIES[name] = cls
    return cls

def new_extended_inversion(config=None, config_path=None, **overrides):
    """
    Construct the extended moment inverter selected by the configuration.

    Parameters
    ----------
    config : EQMOMConfig or dict, optional
        Configuration values.
    config_path : str, optional
        Python configuration file defining a dictionary named `config`.
    **overrides
        Configuration values taking precedence over `config` and `config_path`.

    Returns
    -------
    ExtendedMomentInversion
        The inverter.

    Raises
    ------
    ConfigurationError
        If the strategy or the kernel is unknown or a value is invalid.
    """
    config = make_config(config, config_path, **overrides)
    try:
        inversion_cls = STRATEGIES[config.strategy]
    except KeyError:
        raise ConfigurationError(
            f"Unknown extended moment inversion '{config.strategy}'. "
            f"Valid strategies are: {sorted(STRATEGIES)}") from None
    return inversion_cls(config)
