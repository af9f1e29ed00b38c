# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 10:02:17 2026

Exceptions and warnings raised by the EQMOM inverters.
"""

class ConfigurationError(ValueError):
    """Unknown kernel/strategy name or invalid configuration value."""


class RealizabilityFailure(ValueError):
    """The moments violate basic positivity (e.g. M0 <= 0) and cannot be inverted."""


class ConvergenceWarning(RuntimeWarning):
    """The search for sigma stopped at max_sigma_iter without meeting the tolerances."""
