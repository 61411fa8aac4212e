"""
League Rankings - matchday-by-matchday league standings from match results.
"""

__version__ = "1.0.0"
