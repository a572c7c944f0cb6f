"""Checking of compile-and-fix exercises and their progress, with worked solutions to course topics."""

__version__ = "5.5.1"