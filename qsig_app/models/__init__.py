"""
Derived data models shared across components.
"""
