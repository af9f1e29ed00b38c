# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information


import os
import sys

sys.path.insert(0, os.path.abspath(".."))

project = 'eqmomframework: Extended Quadrature Method of Moments'
release = '1.0.0'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = ["sphinx.ext.viewcode",
              "sphinx.ext.autodoc",
              "sphinx.ext.napoleon",
              "myst_parser"]

myst_enable_extensions = ["dollarmath", "amsmath"]

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# External packages are not imported when building the docs
autodoc_mock_imports = ['matplotlib', 'scipy', 'numba']
autodoc_default_options = {'member-order': 'bysource'}

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'sphinx_rtd_theme'
