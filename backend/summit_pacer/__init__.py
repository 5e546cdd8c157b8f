"""
Summit Pacer

Arrival-time prediction and fatigue-adjusted re-pacing for a fixed
mountain route.
"""

__version__ = "0.1.0"
