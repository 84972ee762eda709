"""Game rules, client/server state with input replay, menu pages and widgets for a pygame arcade game."""

__version__ = "0.1.0"