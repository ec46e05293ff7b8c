"""
Module rendering.

Fills the runtime template with the install prefix, the install layout and
one declaration per extracted entry.
"""

from string import Template

from confgen.config.names import APPTAINER_LAYOUT, InstallLayout
from confgen.core.declarations import render_declaration
from confgen.core.extract import ExtractedConfig
from confgen.core.template import GENERATED_BANNER, MODULE_TEMPLATE


def render_declarations(config: ExtractedConfig) -> str:
    """Render all entries in input order, one per line."""
    return "\n".join(render_declaration(entry) for entry in config.entries)


def render_module(
    config: ExtractedConfig,
    layout: InstallLayout = APPTAINER_LAYOUT,
) -> str:
    """
    Render the complete generated module.

    Output depends only on the arguments, so identical input gives
    byte-identical source.

    Args:
        config: Extracted entries and install prefix
        layout: Binary layout baked into prefix discovery

    Returns:
        Python source text

    Raises:
        KeyError: If the template references an unknown placeholder
    """
    return Template(MODULE_TEMPLATE).substitute(
        banner=GENERATED_BANNER,
        app=layout.app,
        build_prefix=repr(config.prefix),
        frontend=repr(layout.frontend),
        frontend_name=layout.frontend,
        helpers=repr(layout.helpers),
        helper_dir=layout.helper_dir,
        suid_helper_path=repr(layout.suid_helper_path),
        suid_helper_name=layout.suid_helper,
        root_dirs=repr(layout.root_dirs),
        declarations=render_declarations(config),
    )
