"""Sparse data cube containers.

This package holds the generic position-to-value cube, the domain
counter helpers and the fixed-arity cubes built on top of them.
"""
