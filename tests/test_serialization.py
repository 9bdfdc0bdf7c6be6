"""
Tests for serialization and deserialization of csdigit model objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `csdigit.serialization`.
"""

import pytest

from csdigit.model import Coefficient, CoefficientSet
from csdigit.serialization import (
    coefficient_set_from_json,
    coefficient_set_from_yaml,
    coefficient_set_to_dict,
    coefficient_set_to_json,
    coefficient_set_to_yaml,
    load_coefficient_set,
)


def build_sample_set() -> CoefficientSet:
    coefficient_set = CoefficientSet(name="Serialization Test Set", places=4)
    coefficient_set.coefficients = [
        Coefficient(name="h0", value=-0.5),
        Coefficient(name="h1", value=28.5),
        Coefficient(name="h2", value=0.0),
        Coefficient(name="h3", value=3.0, csd="+0-"),
    ]
    coefficient_set.encode_all()
    coefficient_set.coefficients.append(Coefficient(name="raw", value=1.0))
    coefficient_set.metadata = {"source": "unit test"}
    return coefficient_set


def test_json_roundtrip():
    coefficient_set = build_sample_set()
    before = coefficient_set_to_dict(coefficient_set)
    json_str = coefficient_set_to_json(coefficient_set)
    restored = coefficient_set_from_json(json_str)
    after = coefficient_set_to_dict(restored)
    assert before == after


def test_yaml_roundtrip():
    """CSD strings like "0" and "+0-" must stay strings through YAML."""
    coefficient_set = build_sample_set()
    before = coefficient_set_to_dict(coefficient_set)
    yaml_str = coefficient_set_to_yaml(coefficient_set)
    restored = coefficient_set_from_yaml(yaml_str)
    after = coefficient_set_to_dict(restored)
    assert before == after
    assert restored.get_coefficient("h2").csd == "0"
    assert restored.get_coefficient("raw").csd is None


def test_minimal_yaml_document():
    restored = coefficient_set_from_yaml(
        "name: taps\n"
        "max_nonzero: 2\n"
        "coefficients:\n"
        "  - {name: a, value: 28.5}\n"
    )
    assert restored.max_nonzero == 2
    assert restored.places is None
    assert restored.metadata == {}
    assert restored.get_coefficient("a").csd is None


def test_load_coefficient_set_by_extension(tmp_path):
    coefficient_set = build_sample_set()
    json_file = tmp_path / "taps.json"
    json_file.write_text(coefficient_set_to_json(coefficient_set))
    yaml_file = tmp_path / "taps.yaml"
    yaml_file.write_text(coefficient_set_to_yaml(coefficient_set))

    expected = coefficient_set_to_dict(coefficient_set)
    assert coefficient_set_to_dict(load_coefficient_set(str(json_file))) == expected
    assert coefficient_set_to_dict(load_coefficient_set(str(yaml_file))) == expected


def test_empty_document_rejected():
    with pytest.raises(ValueError, match="must be a mapping"):
        coefficient_set_from_yaml("")


def test_coefficient_without_name_rejected():
    with pytest.raises(ValueError, match="missing name"):
        coefficient_set_from_yaml("coefficients:\n  - {value: 0.5}\n")


def test_coefficient_entry_must_be_mapping():
    with pytest.raises(ValueError, match="must be a mapping"):
        coefficient_set_from_yaml("coefficients:\n  - 0.5\n")
