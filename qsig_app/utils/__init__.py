"""
Utility functions module.

Time Semantics:
- Price point timestamps from data feeds are authoritative
- Wall-clock time is only used as a fallback (e.g. position open time
  when the caller supplies none)
"""
