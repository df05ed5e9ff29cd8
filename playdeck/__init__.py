"""A tiled game menu with fade transitions, hosting Blackjack and Yacht table games."""

__version__ = "0.1.0"