"""Sphinx configuration for the CalcKit documentation."""

project = "CalcKit"
copyright = "2025, CalcKit developers"
author = "CalcKit developers"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.doctest",
]

# AccuracyConfig documents its fields in the class docstring
autoclass_content = "both"
autodoc_member_order = "bysource"
napoleon_google_docstring = True
napoleon_numpy_docstring = False

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = "CalcKit"
