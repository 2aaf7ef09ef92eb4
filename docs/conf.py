# Configuration file for the Sphinx documentation builder.

project = "PyAME"
copyright = "2026, Melek Derman"
author = "Melek Derman"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"

# Docstrings are numpy style throughout
napoleon_google_docstring = False
napoleon_numpy_docstring = True
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "h5py": ("https://docs.h5py.org/en/stable/", None),
    "requests": ("https://requests.readthedocs.io/en/latest/", None),
}

# MyST-Parser settings (allows .md files as source)
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
