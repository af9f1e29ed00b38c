# -*- coding: utf-8 -*-
"""
Created on Fri Oct  9 11:02:55 2026

"""
import numpy as np
import matplotlib.pyplot as plt

class EQMOMPost:
    """Plots comparing an EQMOM reconstruction with a reference distribution."""

    def __init__(self, inverter):
        self.inverter = inverter

    def plot_ndf_comparison(self, x, ndf, ax=None):
        """
        Plot the reference NDF, the reconstructed NDF and the primary nodes.

        Parameters:
            x (array-like): Points where the NDFs are evaluated.
            ndf (array-like): Reference NDF at x.
            ax (matplotlib.axes.Axes, optional): Axes to draw on.

        Returns:
            tuple: (ax, fig)
        """
        inverter = self.inverter
        if ax is None:
            fig, ax = plt.subplots()
        else:
            fig = ax.figure
        ax.plot(x, ndf, color='k', label='Original NDF')
        ax.plot(x, inverter.f(x), color='r', linestyle='--',
                label=f'EQMOM ($\\sigma$ = {inverter.sigma:.3g})')
        ax2 = ax.twinx()
        ax2.stem(inverter.primary_abscissae, inverter.primary_weights, linefmt='b-',
                 markerfmt='bo', basefmt=' ', label='Primary nodes')
        ax.set_xlabel('x')
        ax.set_ylabel('NDF')
        ax2.set_ylabel('Weight')
        ax.grid(True)
        ax.legend(loc='upper right')
        fig.tight_layout()
        return ax, fig

    def plot_moments_comparison(self, moments, ax=None):
        """
        Plot the relative error of the moments of the secondary quadrature
        against the moments that were inverted.

        Returns:
            tuple: (ax, fig)
        """
        moments = np.asarray(moments, dtype=np.float64)
        if ax is None:
            fig, ax = plt.subplots()
        else:
            fig = ax.figure
        moments_eqmom = self.inverter.calc_moments(len(moments))
        relative_error = np.maximum(np.abs((moments_eqmom - moments) / moments), 1e-16)
        orders = np.arange(len(moments))
        ax.plot(orders, relative_error, color='r', marker='o', label='Relative Error (EQMOM)')
        ax.set_xlabel('Order of Moment')
        ax.set_ylabel('Relative Error')
        ax.set_yscale('log')
        ax.grid(True, which='minor')
        ax.legend()
        fig.tight_layout()
        return ax, fig
