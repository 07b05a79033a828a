# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import re
import sys

import sphinx_rtd_theme

sys.path.insert(0, os.path.abspath("."))
sys.path.insert(0, os.path.abspath("../../kmrsa/python"))


# -- Project information -----------------------------------------------------

project = "kmrsa"
copyright = "2023, The Next-gen Kaldi Development Team"
author = "The Next-gen Kaldi Development Team"


def get_version():
    init_file = "../../kmrsa/python/kmrsa/__init__.py"
    with open(init_file) as f:
        content = f.read()

    version = re.search(r"__version__ = (.*)", content).group(1)
    return version.strip().strip('"')


# The full version, including alpha/beta/rc tags
version = get_version()
release = version


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_autodoc_typehints",
    "sphinx_rtd_theme",
    "sphinx.ext.mathjax",
]

templates_path = ["_templates"]
exclude_patterns = []
master_doc = "index"


# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_theme_path = [sphinx_rtd_theme.get_html_theme_path()]
html_show_sourcelink = True
html_static_path = []

pygments_style = "sphinx"
numfig = True

html_theme_options = {
    "logo_only": False,
    "prev_next_buttons_location": "bottom",
    "style_external_links": True,
}
