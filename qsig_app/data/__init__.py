"""
Price data models, payload parsers and external feed interfaces.
"""
