"""Pokedex API: Pokemon species data with fun translations."""

__version__ = "0.1.0"
