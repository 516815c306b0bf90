"""A small clicker game with a randomized upgrade store, built on pygame."""

__version__ = "0.2.0"