"""Convert normalized API metadata to cross-linked Markdown documentation.

The metadata is a YAML or JSON dump of class and interface records, as
produced by a static-analysis step. Inherited members are merged into every
class before the documents are rendered through Jinja2 templates.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from apidoc_md.errors import ConfigError, MetadataError, TemplateLoadError
from apidoc_md.load_config import load_config
from apidoc_md.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        description="Convert API metadata to cross-linked Markdown documentation.",
    )
    ap.add_argument(
        "metadata",
        type=Path,
        help="YAML or JSON file holding the normalized class records",
    )
    ap.add_argument(
        "output_dir",
        type=Path,
        nargs="?",
        help="Destination directory (overrides output_dir from --config)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--template-dir",
        type=Path,
        help="Directory holding class.md.j2 and index.md.j2",
    )
    ap.add_argument(
        "--link-template",
        help="Class document filename pattern, %%c is the class name (default: %%c.md)",
    )
    ap.add_argument(
        "--title",
        help="Heading of the index document (default: API Index)",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "--single-file",
        dest="single_file",
        action="store_true",
        default=None,
        help="Write the index and every class into one document (default)",
    )
    mode.add_argument(
        "--multi-file",
        dest="single_file",
        action="store_false",
        help="Write one document per class plus an index document",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return ap


def apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """Let command line flags take precedence over the configuration file."""
    config = config.copy()
    overrides = {
        "output_dir": args.output_dir,
        "template_dir": args.template_dir,
        "link_template": args.link_template,
        "title": args.title,
        "single_file": args.single_file,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = str(value) if isinstance(value, Path) else value
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generation process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = apply_overrides(load_config(args.config), args)
        return run_generation(args.metadata, config)
    except (ConfigError, MetadataError, TemplateLoadError) as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
