"""Translate Hack VM stack code into Hack assembly."""

__version__ = "0.1.0"