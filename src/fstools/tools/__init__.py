"""
Search tools and utilities for fstools.

This module contains the breadth-first filesystem walker behind ``find``,
the line scanner behind ``grep``, and the plain file operations used by
``echo``, ``cat`` and ``ls``.
"""
