"""
warsim: a simulator for the two-player card game War.
"""

__version__ = "0.1.0"
