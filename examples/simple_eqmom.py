# -*- coding: utf-8 -*-
"""
Created on Fri Oct  9 13:40:21 2026

Reconstruct a bimodal lognormal distribution from its first five moments.
"""
import os
import numpy as np
import matplotlib.pyplot as plt
from eqmomframework import new_extended_inversion
from eqmomframework.eqmom.eqmom_post import EQMOMPost
from eqmomframework.utils.func.static_method import create_ndf, calc_ndf_moments

if __name__ == "__main__":
    config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config", "EQMOM_config.py")
    eqmom = new_extended_inversion(config_path=config_path)

    x, ndf1 = create_ndf("lognormal", x_range=(0, 20), points=20000, mean=0.0, sigma=0.3)
    _, ndf2 = create_ndf("lognormal", x_range=(0, 20), points=20000, mean=1.2, sigma=0.3)
    ndf = 0.6*ndf1 + 0.4*ndf2
    moments = calc_ndf_moments(x, ndf, eqmom.n_moments)

    eqmom.invert(moments)
    print(f"sigma = {eqmom.sigma}")
    print(f"primary weights = {eqmom.primary_weights}")
    print(f"primary abscissae = {eqmom.primary_abscissae}")

    post = EQMOMPost(eqmom)
    post.plot_ndf_comparison(x, ndf)
    post.plot_moments_comparison(moments)
    plt.show()
