"""
connectfour - Connect Four board state and win detection

This package provides a fixed-size Connect Four board with gravity drops,
a full-grid four-in-a-row scan and a plain text dump of the grid.
"""

# Version number
__version__ = '0.1.0'
