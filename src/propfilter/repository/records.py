# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]


def load_records(path: Path) -> list[dict[str, Any]]:
    """
    Read a list of records from a YAML or JSON file.

    A mapping with a top level `records` key is accepted too.
    """
    try:
        data = load(path.read_text(encoding="utf-8"), Loader=Loader)
    except YAMLError as e:
        raise ValueError(f"{path} is not valid YAML or JSON: {e}") from e
    if data is None:
        return []
    if isinstance(data, dict) and "records" in data:
        data = data["records"]
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of records")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"{path}: record {index} is not a mapping")
    return data
