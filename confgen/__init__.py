"""Build-time config.h to Python module generator."""

__version__ = "0.1.0"
