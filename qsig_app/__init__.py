"""
QSig App - Quantitative Signal Engine

A heuristic signal engine for a single asset's price series. Computes trend
and momentum indicators, a directional probability estimate, support and
resistance levels, a short-horizon projection and a discrete trading signal,
and tracks the lifecycle of an open position with automatic exits.
"""

__version__ = "0.1.0"
__author__ = "QSig Team"
