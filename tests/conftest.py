"""Shared pytest fixtures."""

import importlib.util
import itertools
import sys

import pytest

from confgen.core.extract import extract_config
from confgen.core.render import render_module

SAMPLE_HEADER = """\
/* config.h.  Generated by mconfig. */
#ifndef __APPTAINER_CONFIG_H_
#define __APPTAINER_CONFIG_H_

#define PREFIX "/usr"
#define BINDIR "/usr/bin"
#define LIBEXECDIR "/usr/libexec"
#define SYSCONFDIR "/etc"
#define SESSIONDIR "/var/apptainer/mnt/session"
#define APPTAINER_CONFDIR "/etc/apptainer"
#define PLUGIN_ROOTDIR "/usr/libexec/apptainer/plugin"
#define APPTAINER_SUID_INSTALL 0
#define APPTAINER_CONF_FILE APPTAINER_CONFDIR "/apptainer.conf"
#define PACKAGE_VERSION "1.3.0"
#define FOO "/usr/local"

#endif
"""


@pytest.fixture(autouse=True)
def no_build_tags_env(monkeypatch):
    """Keep a build tag override from the outer environment out of tests."""
    monkeypatch.delenv("GO_BUILD_TAGS", raising=False)


@pytest.fixture
def header_file(tmp_path):
    """Write header text to a file and return its path."""

    def write(text=SAMPLE_HEADER, name="config.h"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return write


@pytest.fixture
def make_program():
    """Create an empty file standing in for an installed program."""

    def make(path):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        return path

    return make


@pytest.fixture
def load_generated(tmp_path, monkeypatch, make_program):
    """
    Render header text and import the result as a fresh module.

    sys.argv[0] is pointed at program first, so prefix discovery sees it as
    the running executable.
    """
    counter = itertools.count()

    def load(text=SAMPLE_HEADER, program=None):
        if program is None:
            program = make_program(tmp_path / "elsewhere" / "bin" / "tool")
        monkeypatch.setattr(sys, "argv", [str(program)])

        source = render_module(extract_config(text.splitlines()))
        path = tmp_path / f"generated_config_{next(counter)}.py"
        path.write_text(source)

        spec = importlib.util.spec_from_file_location(path.stem, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return load


@pytest.fixture
def sample_header():
    """Header text covering every declaration kind."""
    return SAMPLE_HEADER
