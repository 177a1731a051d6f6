"""
puffbird: a small pygame Flappy Bird clone.
"""

__version__ = "0.1.0"
