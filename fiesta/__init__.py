"""Configuration, column inserts, a collector service and tokens for game-server activity logs."""

__version__ = "0.1.0"