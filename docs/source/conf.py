"""Sphinx documentation configuration for human-time."""

from __future__ import annotations

import sys
from pathlib import Path

# Make package importable for autodoc (src layout)
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

from human_time import __version__  # noqa: E402

# -- Project information -----------------------------------------------------

project = "human-time"
copyright = "2026, human-time contributors"
author = "human-time contributors"
release = __version__
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

# Results are datetime/tzinfo objects, so link those names to the stdlib docs
intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

# Docstrings use the Google style
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
html_title = f"human-time {release}"
