"""
Tests for the helper functions and the plots of EQMOM reconstructions.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from eqmomframework import new_extended_inversion
from eqmomframework.eqmom.eqmom_post import EQMOMPost
from eqmomframework.utils.func.print import format_highlighted, print_highlighted
from eqmomframework.utils.func.static_method import (calc_ndf_moments, calc_quadrature_moments,
                                                     create_ndf)


class TestStaticMethods:

    def test_lognormal_ndf_moments(self):
        x, ndf = create_ndf("lognormal", x_range=(0, 20), points=20000, mean=0.0, sigma=0.3)
        moments = calc_ndf_moments(x, ndf, 3)
        assert moments[0] == pytest.approx(1.0, rel=1e-4)
        assert moments[1] == pytest.approx(np.exp(0.045), rel=1e-4)
        assert moments[2] == pytest.approx(np.exp(0.18), rel=1e-4)

    def test_normal_ndf(self):
        x, ndf = create_ndf("normal", x_range=(-10, 10), points=4001, mean=1.0, std_dev=2.0)
        assert x[np.argmax(ndf)] == pytest.approx(1.0)

    def test_unsupported_distribution(self):
        with pytest.raises(ValueError):
            create_ndf("weibull")

    def test_negative_range(self):
        with pytest.raises(ValueError):
            create_ndf("gamma", x_range=(-1, 10))

    def test_quadrature_moments(self):
        moments = calc_quadrature_moments([1.0, 1.0], [1.0, 2.0], 4)
        np.testing.assert_allclose(moments, [2.0, 3.0, 5.0, 9.0])


class TestMessages:

    def test_format(self):
        message = format_highlighted("sigma is zero", title="info", timestamp=False)
        assert message.startswith("[EQMOM][INFO] ")
        assert "sigma is zero" in message

    def test_unknown_title_has_no_color(self):
        assert format_highlighted("done", title="result", timestamp=False) == "[EQMOM][RESULT] done"

    def test_warnings_go_to_stderr(self, capsys):
        print_highlighted("no convergence", title="warning", timestamp=False)
        captured = capsys.readouterr()
        assert "no convergence" in captured.err
        assert captured.out == ""


class TestEQMOMPost:

    @pytest.fixture
    def post(self, bimodal_lognormal):
        _, _, _, moments = bimodal_lognormal
        eqmom = new_extended_inversion(n_moments=5)
        eqmom.invert(moments)
        return EQMOMPost(eqmom), moments

    def test_plot_ndf_comparison(self, post):
        post, _ = post
        x = np.linspace(0.0, 10.0, 500)
        ax, fig = post.plot_ndf_comparison(x, np.zeros_like(x))
        assert len(ax.get_lines()) == 2
        plt.close(fig)

    def test_plot_moments_comparison(self, post):
        post, moments = post
        ax, fig = post.plot_moments_comparison(moments)
        errors = ax.get_lines()[0].get_ydata()
        assert len(errors) == 5
        assert np.all(errors < 1e-3)
        plt.close(fig)
