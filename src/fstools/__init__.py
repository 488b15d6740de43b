"""
fstools - Core Package

A small command-line toolkit re-implementing classic filesystem utilities
(echo, cat, ls, find, grep) behind a single dispatcher.
"""

__version__ = "0.1.0"
__author__ = "fstools Team"
