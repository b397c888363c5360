"""Numeric, text and small-interpreter utilities: extended printf/scanf, base conversion, trees and more."""

__version__ = "1.0.0"