import logging
import os
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULTS = {
    "all_errors": True,
    "draft": "draft7",
    "check_formats": True,
}


def load_config(path: Optional[str] = None) -> dict:
    """Return matcher options from a YAML file overlaid with environment variables.

    The file is `path` when given, else `$JSONSHAPE_CONFIG` when set. Options
    may sit at the top level or under a `jsonshape:` key.

    Environment variables supported:
      - JSONSHAPE_ALL_ERRORS (true/false)
      - JSONSHAPE_DRAFT (draft4, draft6, draft7, draft201909, draft202012)
    """
    cfg = dict(DEFAULTS)

    path = path or os.environ.get("JSONSHAPE_CONFIG")
    if path:
        if os.path.exists(path):
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file {path} must contain a mapping")
            if "jsonshape" in data:
                data = data["jsonshape"] or {}
                if not isinstance(data, dict):
                    raise ValueError(f"Config file {path}: the jsonshape section must be a mapping")
            cfg.update({k: v for k, v in data.items() if k in DEFAULTS})
            logger.debug("loaded config from %s", path)
        else:
            logger.warning("config file %s not found, using defaults", path)

    # override with env vars when provided
    all_errors = os.environ.get("JSONSHAPE_ALL_ERRORS")
    if all_errors is not None:
        cfg["all_errors"] = all_errors.lower() not in ("0", "false", "no")

    draft = os.environ.get("JSONSHAPE_DRAFT")
    if draft:
        cfg["draft"] = draft

    return cfg
