"""
NFL standings, tiebreaker and playoff scenario engine.
"""

__version__ = "1.0.0"
