"""regroup file I/O — load records and structures, save grouped output."""

import os
import csv
import json

import yaml

from regroup.config import get_config
from regroup.exceptions import RegroupFileError


def read(path: str):
    """Read a file from disk. CSV->list[dict], JSON/YAML->parsed."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    ext = os.path.splitext(path)[1].lower()

    try:
        if ext == ".json":
            with open(path) as f:
                return json.load(f)
        elif ext in (".yaml", ".yml"):
            with open(path) as f:
                return yaml.safe_load(f)
        elif ext == ".csv":
            with open(path, newline="") as f:
                return list(csv.DictReader(f))
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RegroupFileError(f"Could not parse {path}: {e}") from e
    raise RegroupFileError(f"Unsupported file type '{ext}': {path}")


def dumps(data) -> str:
    """Serialize data as JSON with the configured indent."""
    return json.dumps(data, indent=get_config()["output"]["indent"], default=str)


def save(data, path: str):
    """Save data to disk as JSON. Auto-creates directories."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    try:
        with open(path, "w") as f:
            f.write(dumps(data))
    except OSError as e:
        raise RegroupFileError(f"Could not write {path}: {e}") from e

    print(f"Saved: {path}")


def read_records(path: str) -> list:
    """Read a records file, which must hold a list of records."""
    records = read(path)
    if not isinstance(records, list):
        raise RegroupFileError(
            f"{path} must hold a list of records, got {type(records).__name__}"
        )
    return records
