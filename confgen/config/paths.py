"""
File name and header vocabulary constants for the generator.

Centralizes the names to avoid magic strings in individual steps.
"""

from pathlib import Path

# Generated module, written to the current working directory
OUTPUT_FILE = Path("config.py")

# Out-of-band build tag override
BUILD_TAGS_ENV = "GO_BUILD_TAGS"

# Header vocabulary
DEFINE_MARKER = "#define"
PREFIX_NAME = "PREFIX"
