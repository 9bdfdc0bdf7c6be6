"""
Tests for the coefficient model.

These tests verify:
    - Coefficient and CoefficientSet creation
    - Lookup by name
    - Encoding policy selection (places, nonzero budget, integer default)
"""

import pytest
from csdigit.csd import InvalidArgument
from csdigit.examples import build_example_fir, build_example_integer_constants
from csdigit.model import DEFAULT_PLACES, Coefficient, CoefficientSet


class TestCoefficient:
    """Test single coefficients."""

    def test_create_coefficient(self):
        c = Coefficient(name="h0", value=0.25)
        assert c.name == "h0"
        assert c.value == 0.25
        assert c.csd is None

    def test_unencoded_properties(self):
        c = Coefficient(name="h0", value=0.25)
        assert c.nonzero_count == 0
        assert c.decoded is None

    def test_encoded_properties(self):
        c = Coefficient(name="k", value=28.5, csd="+00-00.+0")
        assert c.nonzero_count == 3
        assert c.decoded == 28.5


class TestCoefficientSet:
    """Test the coefficient container."""

    def test_empty_set(self):
        s = CoefficientSet(name="Empty")
        assert s.coefficients == []
        assert s.places is None
        assert s.max_nonzero is None
        assert s.metadata == {}

    def test_get_coefficient(self):
        s = CoefficientSet(name="S", coefficients=[Coefficient("a", 1.0), Coefficient("b", 2.0)])
        assert s.get_coefficient("b").value == 2.0
        assert s.get_coefficient("missing") is None

    def test_encode_with_places(self):
        s = CoefficientSet(name="S", places=2, coefficients=[Coefficient("a", 28.5)])
        s.encode_all()
        assert s.get_coefficient("a").csd == "+00-00.+0"

    def test_budget_takes_precedence(self):
        s = CoefficientSet(name="S", places=2, max_nonzero=2,
                           coefficients=[Coefficient("a", 28.5)])
        s.encode_all()
        assert s.get_coefficient("a").csd == "+00-00"

    def test_integer_values_encoded_exactly_by_default(self):
        s = CoefficientSet(name="S", coefficients=[Coefficient("a", 28), Coefficient("b", 28.0)])
        s.encode_all()
        assert s.get_coefficient("a").csd == "+00-00"
        assert s.get_coefficient("b").csd == "+00-00"

    def test_non_integer_uses_default_places(self):
        s = CoefficientSet(name="S", coefficients=[Coefficient("a", 0.3)])
        s.encode_all()
        csd = s.get_coefficient("a").csd
        assert len(csd.split(".")[1]) == DEFAULT_PLACES

    def test_encode_all_replaces_existing(self):
        s = CoefficientSet(name="S", places=1, coefficients=[Coefficient("a", 0.5, csd="++")])
        s.encode_all()
        assert s.get_coefficient("a").csd == "0.+"

    def test_invalid_policy_propagates(self):
        s = CoefficientSet(name="S", places=-1, coefficients=[Coefficient("a", 0.5)])
        with pytest.raises(InvalidArgument):
            s.encode_all()


class TestExamples:
    """Test the example builders."""

    def test_example_fir_structure(self):
        s = build_example_fir(places=8)
        assert len(s.coefficients) == 7
        assert s.places == 8
        assert s.get_coefficient("h3").value == 0.5

    def test_example_fir_is_symmetric_after_encoding(self):
        s = build_example_fir(places=8)
        s.encode_all()
        csds = [c.csd for c in s.coefficients]
        assert csds == list(reversed(csds))

    def test_integer_constants(self):
        s = build_example_integer_constants()
        s.encode_all()
        assert s.get_coefficient("c114").csd == "+00-00+0"
        assert s.get_coefficient("c158").csd == "+0+000-0"
