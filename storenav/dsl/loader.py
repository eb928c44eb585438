"""YAML/JSON loader + schema validation for venue layouts.

Provides a single entrypoint to parse a layout document, run early shape
checks with readable messages, validate against the packaged JSON schema and
return a canonical dictionary. `parse_layout` turns that dictionary into
model records for the registry and graph builder.

Layout documents use the store layout shape::

    sections:
      - name: Aisle 1
        color: "#FFB3BA"
        coordinates: {x: 0, y: 0, width: 100, height: 40}
        count: 12
    paths:
      - {from: Aisle 1, to: Checkout, weight: 3}

JSON is a subset of YAML, so JSON layout files load through the same path.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import jsonschema
import yaml

from storenav.logging import get_logger
from storenav.model.venue import Connection, Section

LOGGER = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("storenav.schemas")
            .joinpath("venue.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged venue schema 'storenav/schemas/venue.json'."
        ) from exc


def _normalize_name_scalars(entry: Dict[str, Any], keys: Tuple[str, ...]) -> None:
    """Turn YAML-typed section names back into strings, in place.

    Unquoted names such as ``10`` or ``1.5`` parse as numbers and are
    converted with ``str()``. YAML 1.1 booleans (``yes``, ``No``, ``off``...) lose
    their original spelling, so those are rejected with a hint to quote them.
    """
    for key in keys:
        value = entry.get(key)
        if isinstance(value, bool):
            raise ValueError(
                f"'{key}' value parsed as boolean {value}; quote section names "
                "such as 'yes', 'no', 'on' or 'off' in the layout"
            )
        if isinstance(value, (int, float)):
            entry[key] = str(value)


def load_layout_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, shape-check and validate a venue layout document.

    Args:
        yaml_str: YAML or JSON text.

    Returns:
        The validated layout dictionary. A missing ``paths`` key is filled
        with an empty list.

    Raises:
        ValueError: On structural problems detected before schema validation.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided layout must map to a dictionary at top-level.")

    # Early shape checks give clearer messages than the schema validator
    if "sections" not in data:
        raise ValueError("Layout must define 'sections'")
    if not isinstance(data["sections"], list):
        raise ValueError("'sections' must be a list")
    for entry in data["sections"]:
        if not isinstance(entry, dict) or "name" not in entry:
            raise ValueError("Each section must be a mapping with a 'name'")
    if "paths" in data:
        if not isinstance(data["paths"], list):
            raise ValueError(
                f"'paths' must be a list, got {type(data['paths']).__name__}"
            )
        for entry in data["paths"]:
            if not isinstance(entry, dict):
                raise ValueError(
                    "Each path definition must be a mapping with 'from', 'to' and 'weight'"
                )
            if "from" not in entry or "to" not in entry:
                raise ValueError("Each path definition must include 'from' and 'to'")

    # YAML scalars that are not strings would otherwise fail schema validation
    for entry in data["sections"]:
        _normalize_name_scalars(entry, ("name",))
    for entry in data.get("paths", []):
        _normalize_name_scalars(entry, ("from", "to"))

    jsonschema.validate(data, _load_schema())

    data.setdefault("paths", [])
    LOGGER.debug(
        "Layout document loaded: sections=%d, paths=%d",
        len(data["sections"]),
        len(data["paths"]),
    )
    return data


def load_layout_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and validate a layout file (``.yaml``, ``.yml`` or ``.json``)."""
    path = Path(path)
    LOGGER.debug("Reading layout from %s", path)
    return load_layout_yaml(path.read_text(encoding="utf-8"))


def parse_layout(data: Dict[str, Any]) -> Tuple[List[Section], List[Connection]]:
    """Convert a validated layout dictionary into model records.

    Args:
        data: Output of `load_layout_yaml` (or an equivalent in-memory dict).

    Returns:
        Tuple of (sections, connections) in document order.

    Raises:
        InvalidWeightError: If a path weight is not positive and finite.
    """
    sections = [Section.from_dict(entry) for entry in data.get("sections", [])]
    connections = [Connection.from_dict(entry) for entry in data.get("paths", [])]
    return sections, connections
