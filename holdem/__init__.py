"""
holdem: Texas Hold'em hand ranking and Monte Carlo equity

Finds the best five-card hand in a seven-card set and estimates how
often a hero hand wins, loses or ties against random opponents by
repeatedly dealing out the rest of the board.
"""

__version__ = "0.1.0"
