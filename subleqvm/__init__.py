"""A SUBLEQ assembler, interpreter and command-line runner."""

__version__ = "0.1.0"