"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apidoc_md.deep_merge import deep_merge
from apidoc_md.document_renderer import CLASS_TEMPLATE, INDEX_TEMPLATE
from apidoc_md.errors import ConfigError
from apidoc_md.link_resolver import DEFAULT_LINK_TEMPLATE

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

DEFAULT_CONFIG: dict[str, Any] = {
    "output_dir": None,
    "template_dir": str(DEFAULT_TEMPLATE_DIR),
    "templates": {
        "class": CLASS_TEMPLATE,
        "index": INDEX_TEMPLATE,
    },
    "link_template": DEFAULT_LINK_TEMPLATE,
    "title": "API Index",
    "single_file": True,
    "index_file": "README.md",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            if not isinstance(config["templates"], dict):
                msg = f"{p}: templates must map class/index to template names"
                raise ConfigError(msg)
    return config
