"""
Treasure Hunter - a turn-based text adventure.

A hunter travels from town to town, shopping, brawling, digging and
searching for a crown, a trophy and a gem.
"""

__version__ = "0.1.0"
