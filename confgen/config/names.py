"""
Recognized constant names and installation layout.

Defines which header entries need runtime resolution and the binary layout
the generated module uses to find its install prefix.
"""

from dataclasses import dataclass

# Entries resolved against the discovered install prefix at startup
RELOCATABLE_NAMES = frozenset(
    {
        "BINDIR",
        "LIBEXECDIR",
        "SYSCONFDIR",
        "SESSIONDIR",
        "APPTAINER_CONFDIR",
        "PLUGIN_ROOTDIR",
    }
)

# Entry whose header value is replaced by filesystem inspection
SUID_INSTALL_NAME = "APPTAINER_SUID_INSTALL"

# Any value mentioning this name depends on a relocated path
CONFDIR_MARKER = "APPTAINER_CONFDIR"


@dataclass(frozen=True)
class InstallLayout:
    """
    Where the binaries of an installation live relative to its prefix.

    Layout:
    - PREFIX/bin/<frontend>
    - PREFIX/libexec/<app>/bin/<helper>
    """

    app: str
    frontend: str
    helpers: tuple[str, ...]
    suid_helper: str

    @property
    def helper_dir(self) -> str:
        """Helper binary directory relative to the prefix."""
        return f"libexec/{self.app}/bin"

    @property
    def suid_helper_path(self) -> str:
        """Setuid helper path relative to the prefix."""
        return f"{self.helper_dir}/{self.suid_helper}"

    @property
    def root_dirs(self) -> tuple[str, ...]:
        """Absolute roots relocated even though they sit outside the prefix."""
        # Packages usually put only these outside of /usr
        return (f"/etc/{self.app}", f"/var/{self.app}")


APPTAINER_LAYOUT = InstallLayout(
    app="apptainer",
    frontend="apptainer",
    helpers=("starter", "starter-suid"),
    suid_helper="starter-suid",
)
