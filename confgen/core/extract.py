"""
Config header parsing.

Turns ``#define NAME VALUE...`` lines into ordered entries and pulls out the
install prefix.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from confgen.config.paths import BUILD_TAGS_ENV, DEFINE_MARKER, PREFIX_NAME


class ConfigError(ValueError):
    """Header content that cannot produce a valid module."""


@dataclass(frozen=True)
class ConfigEntry:
    """One ``#define`` line: a name and its whitespace-separated value tokens."""

    name: str
    value_tokens: tuple[str, ...]

    def __post_init__(self):
        if not self.name:
            raise ConfigError("Entry name must not be empty")
        if not self.value_tokens:
            raise ConfigError(f"Entry {self.name} has no value")

    @property
    def expression(self) -> str:
        """Value tokens joined into a concatenation expression."""
        return " + ".join(self.value_tokens)


@dataclass(frozen=True)
class ExtractedConfig:
    """Everything the renderer needs from a header."""

    entries: tuple[ConfigEntry, ...]
    prefix: str


def parse_line(line: str) -> ConfigEntry | None:
    """
    Parse a single header line.

    Returns None for anything that is not a ``#define`` with a name and at
    least one value token (comments, blank lines, bare guards).
    """
    words = line.split()
    if len(words) < 3 or words[0] != DEFINE_MARKER:
        return None
    return ConfigEntry(words[1], tuple(words[2:]))


def strip_quotes(token: str) -> str:
    """Drop the outer delimiter characters of a quoted token."""
    if len(token) < 2:
        raise ConfigError(f"Expected a quoted value, got {token!r}")
    return token[1:-1]


def raw_string_literal(value: str) -> str:
    """
    Quote a value as a literal string expression.

    Uses a raw string so backslashes pass through untouched, and falls back
    to repr() for values a single-line raw string cannot hold.
    """
    if '"' in value or "\n" in value or "\r" in value or value.endswith("\\"):
        return repr(value)
    return f'r"{value}"'


def build_tags_entry(build_tags: str) -> ConfigEntry:
    """Synthetic entry carrying the build tag override."""
    return ConfigEntry(BUILD_TAGS_ENV, (raw_string_literal(build_tags),))


def extract_config(
    lines: Iterable[str],
    build_tags: str | None = None,
) -> ExtractedConfig:
    """
    Extract ordered entries and the install prefix from header lines.

    Entries keep input order and duplicates are kept as-is.

    Args:
        lines: Header text, one line per item
        build_tags: Optional build tag override, appended as a last entry

    Returns:
        Extracted entries and the unquoted install prefix

    Raises:
        ConfigError: If PREFIX is missing or has other than one value token
    """
    entries: list[ConfigEntry] = []
    prefix: str | None = None

    for line in lines:
        entry = parse_line(line)
        if entry is None:
            continue
        if entry.name == PREFIX_NAME:
            if len(entry.value_tokens) != 1:
                raise ConfigError(
                    f"Expected {PREFIX_NAME} to have exactly one value, "
                    f"got {len(entry.value_tokens)}"
                )
            prefix = strip_quotes(entry.value_tokens[0])
        entries.append(entry)

    if prefix is None:
        raise ConfigError(f"Failed to find value of {PREFIX_NAME}")

    if build_tags:
        entries.append(build_tags_entry(build_tags))

    return ExtractedConfig(tuple(entries), prefix)
