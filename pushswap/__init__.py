"""Sort integers with a two-stack instruction set and report the operations used."""

__version__ = "1.0.0"