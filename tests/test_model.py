"""Tests for jsonld_decoder.model."""

import pytest

from jsonld_decoder.errors import ConfigurationError
from jsonld_decoder.model import (
    Absent,
    AdaptiveObjectBuilder,
    JSONLDDecodable,
    KeyPath,
    Shape,
    _AbsentType,
    shape_of,
)
from jsonld_decoder.recipe import HowToStep, NutritionInfo


class TestAbsent:
    def test_singleton(self):
        assert Absent is _AbsentType()

    def test_falsy(self):
        assert not Absent

    def test_repr(self):
        assert repr(Absent) == "Absent"

    def test_distinct_from_empty_list(self):
        assert Absent != []


class TestShapeOf:
    @pytest.mark.parametrize("raw", ["text", "", 0, 12, 4.5])
    def test_scalars(self, raw):
        assert shape_of(raw) is Shape.SCALAR

    def test_sequence(self):
        assert shape_of([]) is Shape.SEQUENCE
        assert shape_of(["a", {"b": 1}]) is Shape.SEQUENCE

    def test_keyed(self):
        assert shape_of({"name": "X"}) is Shape.KEYED

    @pytest.mark.parametrize("raw", [None, True, False, Absent])
    def test_no_shape(self, raw):
        assert shape_of(raw) is Shape.NONE


class TestKeyPath:
    def test_parents_and_terminal(self):
        path = KeyPath.of("author", "name")
        assert path.parents == ("author",)
        assert path.terminal == "name"
        assert len(path) == 2

    def test_single_key(self):
        path = KeyPath.of("url")
        assert path.parents == ()
        assert path.terminal == "url"

    def test_parse_dotted(self):
        assert KeyPath.parse("a.b.c") == KeyPath(("a", "b", "c"))

    def test_parse_sequence(self):
        assert KeyPath.parse(["a", "b"]) == KeyPath.of("a", "b")

    def test_parse_keypath_is_identity(self):
        path = KeyPath.of("url")
        assert KeyPath.parse(path) is path

    def test_str(self):
        assert str(KeyPath.of("author", "name")) == "author.name"

    def test_iter(self):
        assert list(KeyPath.of("a", "b")) == ["a", "b"]

    def test_empty_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            KeyPath(())

    def test_empty_string_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            KeyPath.parse("")

    def test_blank_segment_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            KeyPath.parse("a..b")

    def test_immutable(self):
        path = KeyPath.of("url")
        with pytest.raises(AttributeError):
            path.keys = ("other",)

    def test_hashable(self):
        assert {KeyPath.of("a"), KeyPath.parse("a")} == {KeyPath.of("a")}


class TestCapabilities:
    def test_step_is_builder_and_decodable(self):
        assert isinstance(HowToStep, AdaptiveObjectBuilder)
        assert isinstance(HowToStep, JSONLDDecodable)

    def test_nutrition_is_decodable_only(self):
        assert isinstance(NutritionInfo, JSONLDDecodable)
        assert not isinstance(NutritionInfo, AdaptiveObjectBuilder)

    def test_str_is_neither(self):
        assert not isinstance(str, JSONLDDecodable)
        assert not isinstance(str, AdaptiveObjectBuilder)
