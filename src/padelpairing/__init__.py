"""Padel Pairing: pairing, brackets and results for padel club tournaments."""

__version__ = "0.1.0"
