"""
Pongo: single-player Pong on pygame
"""

__version__ = "0.1.0"
