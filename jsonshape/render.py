import json
from typing import Any


def pretty_print_object(value: Any) -> str:
    """Render `value` as indented JSON; anything json can't encode falls back to repr()."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=repr)
