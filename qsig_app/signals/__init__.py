"""
Signal derivation module.

Turns a close-price series into a directional probability estimate, ranked
support/resistance levels, a short-horizon projection and a discrete
LONG/SHORT/NEUTRAL trade signal.
"""
