"""Schema loading utility."""

import json
from pathlib import Path

CONFIG_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


def load_schema(path: Path = CONFIG_SCHEMA_PATH) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)
