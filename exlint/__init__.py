"""
exlint - static analysis for Elixir sources.

Runs a set of line-based checks over a project and reports the
findings on the terminal or as a Code Climate engine.
"""

__version__ = "0.4.0"
__author__ = "exlint contributors"
