"""Sphinx configuration file for rowdiff documentation."""

import os
import sys

# Make the package importable without installing it
sys.path.insert(0, os.path.abspath(".."))

from rowdiff import __version__  # noqa: E402

# Project information
project = "rowdiff"
copyright = "2025, Gaurav Sood"
author = "Gaurav Sood"

release = __version__
version = ".".join(__version__.split(".")[:2])

# General configuration
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
language = "en"

# HTML output
html_theme = "furo"
html_title = f"{project} {release}"
html_static_path = ["_static"]
html_theme_options = {
    "light_css_variables": {
        "color-brand-primary": "#2f6f4f",
        "color-brand-content": "#2f6f4f",
    },
}

# Autodoc configuration
autosummary_generate = True
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}

# All docstrings in the package use the NumPy layout
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_rtype = True
napoleon_attr_annotations = True

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

autodoc_typehints = "description"
typehints_fully_qualified = False
