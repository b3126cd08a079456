"""Scene-based pygame engine and start screen for a dance arcade game."""

__version__ = "0.1.0"