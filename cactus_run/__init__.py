"""
cactus_run
----------
Side-scrolling reflex game: jump over the cactus traps, survive for score.
"""

__version__ = "0.1.0"
