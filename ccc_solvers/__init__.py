"""Solutions to selected Canadian Computing Competition problems, as functions and commands."""

__version__ = "0.1.0"