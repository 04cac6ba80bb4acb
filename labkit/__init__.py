"""Numeric and data-structure tools: RC4, bit logic, complex numbers, matrices, a priority queue, big integers and fractions."""

__version__ = "0.1.0"