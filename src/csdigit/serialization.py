"""
Serialization helpers for csdigit model objects (CoefficientSet, Coefficient).

Coefficient sets travel as plain dicts of name, places, max_nonzero,
metadata and a list of {name, value, csd} entries, dumped as JSON or YAML.
Documents that are not shaped like that raise ValueError.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from csdigit.model import Coefficient, CoefficientSet


def coefficient_to_dict(c: Coefficient) -> Dict[str, Any]:
    return {"name": c.name, "value": c.value, "csd": c.csd}


def coefficient_from_dict(d: Dict[str, Any]) -> Coefficient:
    if not isinstance(d, dict):
        raise ValueError(f"coefficient entry must be a mapping, got {d!r}")
    missing = [key for key in ("name", "value") if key not in d]
    if missing:
        raise ValueError(f"coefficient entry {d!r} is missing {', '.join(missing)}")
    return Coefficient(name=d["name"], value=d["value"], csd=d.get("csd"))


def coefficient_set_to_dict(s: CoefficientSet) -> Dict[str, Any]:
    return {
        "name": s.name,
        "coefficients": [coefficient_to_dict(c) for c in s.coefficients],
        "places": s.places,
        "max_nonzero": s.max_nonzero,
        "metadata": s.metadata,
    }


def coefficient_set_from_dict(d: Dict[str, Any]) -> CoefficientSet:
    if not isinstance(d, dict):
        raise ValueError(f"coefficient set document must be a mapping, got {d!r}")
    s = CoefficientSet(name=d.get("name", ""))
    s.coefficients = [coefficient_from_dict(c) for c in d.get("coefficients", [])]
    s.places = d.get("places")
    s.max_nonzero = d.get("max_nonzero")
    s.metadata = d.get("metadata", {})
    return s


def coefficient_set_to_json(s: CoefficientSet) -> str:
    return json.dumps(coefficient_set_to_dict(s), sort_keys=True)


def coefficient_set_from_json(s: str) -> CoefficientSet:
    d = json.loads(s)
    return coefficient_set_from_dict(d)


def coefficient_set_to_yaml(s: CoefficientSet) -> str:
    return yaml.safe_dump(coefficient_set_to_dict(s))


def coefficient_set_from_yaml(s: str) -> CoefficientSet:
    d = yaml.safe_load(s)
    return coefficient_set_from_dict(d)


def load_coefficient_set(path: str) -> CoefficientSet:
    """Read a coefficient set from a .json file, or YAML for any other extension."""
    with open(path) as f:
        text = f.read()
    if path.lower().endswith(".json"):
        return coefficient_set_from_json(text)
    return coefficient_set_from_yaml(text)
