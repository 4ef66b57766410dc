"""Solutions to introductory competitive-programming problems, as functions and a command."""

__version__ = "0.1.0"