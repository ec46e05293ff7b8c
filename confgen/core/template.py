"""
Source template for the generated build configuration module.

Placeholders use string.Template syntax so the braces of the generated
code need no escaping.
"""

GENERATED_BANNER = "# Code generated by confgen; DO NOT EDIT."

MODULE_TEMPLATE = '''$banner
"""Build configuration for $app, relocated against its install prefix."""

import logging
import os
import sys
import threading
from typing import Final

logger = logging.getLogger("$app.buildcfg")

_BUILD_PREFIX: Final = $build_prefix
_FRONTEND: Final = $frontend
_HELPERS: Final = $helpers
_SUID_HELPER_PATH: Final = $suid_helper_path
_ROOT_DIRS: Final = $root_dirs


class _Once:
    """Run a function exactly once per process, even under concurrent first use."""

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    def do(self, func):
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            try:
                func()
            finally:
                self._done = True


_prefix_once = _Once()
_install_prefix = None
_suid_once = _Once()
_suid_install = False


def _executable_path():
    """Absolute, symlink-resolved path of the running program."""
    if getattr(sys, "frozen", False):
        path = sys.executable
    elif sys.argv and sys.argv[0] not in ("", "-c"):
        path = sys.argv[0]
    else:
        raise FileNotFoundError("program path is not available")
    path = os.path.realpath(path)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"program path {path} is not a file")
    return path


def _discover_prefix():
    global _install_prefix
    try:
        executable = _executable_path()
    except OSError as err:
        logger.warning("Error getting executable path, using default: %s", err)
        _install_prefix = _BUILD_PREFIX
        return

    bin_dir = os.path.dirname(executable)
    base = os.path.basename(executable)

    if base == _FRONTEND:
        # PREFIX/bin/$frontend_name
        _install_prefix = os.path.dirname(bin_dir)
    elif base in _HELPERS:
        # PREFIX/$helper_dir/<helper>
        _install_prefix = os.path.dirname(os.path.dirname(os.path.dirname(bin_dir)))
    else:
        # don't relocate unknown programs
        _install_prefix = _BUILD_PREFIX
    logger.debug("Install prefix is %s", _install_prefix)


def get_prefix():
    """Install prefix of the running program, discovered once per process."""
    _prefix_once.do(_discover_prefix)
    return _install_prefix


def _detect_suid_install():
    global _suid_install
    _suid_install = os.path.exists(os.path.join(get_prefix(), _SUID_HELPER_PATH))


# This must run only once. Otherwise the first lookup could be made to fail,
# then a symlink to a setuid $suid_helper_name elsewhere slipped in, fooling
# relocation into an attacker-controlled configuration file.
def is_suid_install():
    """Whether the install carries a setuid $suid_helper_name."""
    _suid_once.do(_detect_suid_install)
    return _suid_install


# Exits the whole process, whichever thread hits it.
def _fatal(message):
    logger.critical(message)
    logging.shutdown()
    os._exit(255)


def _relative_to(path, base):
    if os.path.isabs(path) != os.path.isabs(base):
        raise ValueError(f"can't make {path} relative to {base}")
    return os.path.relpath(path, base)


def relocate_path(original):
    """Rewrite a build-time path to sit under the discovered install prefix."""
    if _BUILD_PREFIX in ("", "/"):
        return original

    root_relative = False
    if not original.startswith(_BUILD_PREFIX):
        if not original.startswith(_ROOT_DIRS):
            return original
        # typically the only pieces outside the prefix in packages
        root_relative = True

    prefix = get_prefix()
    if prefix == _BUILD_PREFIX:
        return original

    if is_suid_install():
        _fatal("Relocation not allowed with $suid_helper_name")

    try:
        relative = _relative_to(original, "/" if root_relative else _BUILD_PREFIX)
    except ValueError as err:
        _fatal(str(err))

    return os.path.normpath(os.path.join(prefix, relative))


$declarations
'''
