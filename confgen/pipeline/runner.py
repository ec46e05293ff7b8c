"""
Generation pipeline orchestration.

Runs read, extract, render and write in order, stopping at the first failure.
"""

import sys
from collections.abc import Callable
from pathlib import Path

from confgen.config.paths import OUTPUT_FILE
from confgen.core.extract import ExtractedConfig, extract_config
from confgen.core.module_io import read_header_lines, write_module
from confgen.core.render import render_module
from confgen.utils.logging import logger


def run_steps(steps: list[tuple[str, Callable[[], None]]]) -> None:
    """Run named steps in order, exiting with status 1 on the first failure."""
    for i, (name, func) in enumerate(steps, 1):
        logger.info(f"[{i}/{len(steps)}] Running {name}")
        try:
            func()
            logger.info(f"{name} completed")
        except SystemExit as e:
            if e.code != 0:
                logger.error(f"{name} failed")
                sys.exit(e.code)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            sys.exit(1)


def load_config(header: Path, build_tags: str | None = None) -> ExtractedConfig:
    """Read a header and extract its entries."""
    return extract_config(read_header_lines(header), build_tags)


def run_generate(
    header: Path,
    output: Path = OUTPUT_FILE,
    build_tags: str | None = None,
) -> None:
    """
    Generate the build configuration module from a config header.

    Pipeline:
      1. read    - Read the header and extract entries and PREFIX
      2. render  - Render declarations into the runtime template
      3. write   - Atomically replace the output module

    Args:
        header: Path to the config header
        output: Destination of the generated module
        build_tags: Optional build tag override
    """
    state: dict[str, object] = {}

    def read() -> None:
        config = load_config(header, build_tags)
        logger.info(f"Found {len(config.entries)} entries, prefix {config.prefix!r}")
        state["config"] = config

    def render() -> None:
        state["source"] = render_module(state["config"])

    def write() -> None:
        write_module(output, state["source"])
        logger.info(f"Wrote {output}")

    logger.info(f"Generating {output} from {header}")
    run_steps(
        [
            ("read", read),
            ("render", render),
            ("write", write),
        ]
    )
