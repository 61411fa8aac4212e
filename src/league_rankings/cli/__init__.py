"""
Command line interface for League Rankings.
"""
