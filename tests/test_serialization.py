"""
Tests for the Rectangle model and JSON helpers.

Run with: pytest tests/test_serialization.py -v
"""

import math
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from selector_chain.config import SerializerOptions
from selector_chain.models import Rectangle
from selector_chain.serialization import (
    SerializationError,
    from_json,
    get_json,
    to_json,
)


class Circle(BaseModel):
    radius: float

    def get_circumference(self) -> float:
        return 2 * 3.14 * self.radius


@dataclass
class Point:
    x: int
    y: int


class TestRectangle:
    """Test Rectangle value object."""

    def test_fields(self):
        """Test width and height are stored."""
        r = Rectangle(width=10, height=20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self):
        """Test area is width times height."""
        assert Rectangle(width=10, height=20).get_area() == 200
        assert Rectangle(width=1.5, height=2).get_area() == 3.0

    def test_ints_stay_ints(self):
        """Test integer sizes are not coerced to float."""
        r = Rectangle(width=10, height=20)
        assert isinstance(r.width, int)


class TestToJson:
    """Test JSON encoding."""

    def test_list(self):
        """Test compact list output."""
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        """Test keys are written in insertion order."""
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_sort_keys(self):
        """Test sorted key output."""
        options = SerializerOptions(sort_keys=True)
        assert to_json({"width": 10, "height": 20}, options) == '{"height":20,"width":10}'

    def test_indent(self):
        """Test indented output."""
        options = SerializerOptions(indent=2)
        assert to_json({"a": 1}, options) == '{\n  "a": 1\n}'

    def test_model(self):
        """Test pydantic models are encoded as objects."""
        assert to_json(Rectangle(width=10, height=20)) == '{"width":10,"height":20}'

    def test_nested(self):
        """Test nested records, sequences and primitives."""
        value = {"shapes": [Rectangle(width=1, height=2)], "ok": True, "name": None}
        assert to_json(value) == (
            '{"shapes":[{"width":1,"height":2}],"ok":true,"name":null}'
        )

    def test_dataclass(self):
        """Test dataclasses are encoded as objects."""
        assert to_json(Point(x=1, y=2)) == '{"x":1,"y":2}'

    def test_non_ascii_kept(self):
        """Test non-ASCII text is not escaped by default."""
        assert to_json("žalias") == '"žalias"'
        assert to_json("žalias", SerializerOptions(ensure_ascii=True)) == '"\\u017ealias"'

    def test_unserializable(self):
        """Test values without JSON form raise SerializationError."""
        with pytest.raises(SerializationError):
            to_json(object())

    @pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf])
    def test_non_finite_float(self, number):
        """Test NaN and infinity raise instead of producing invalid JSON."""
        with pytest.raises(SerializationError):
            to_json([number])

    def test_get_json_alias(self):
        """Test get_json is an alias of to_json."""
        assert get_json is to_json


class TestFromJson:
    """Test JSON decoding into shapes."""

    def test_rectangle(self):
        """Test decoded rectangle has its methods."""
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200

    def test_circle(self):
        """Test decoding into another model."""
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.get_circumference() == pytest.approx(62.8)

    def test_dataclass(self):
        """Test decoding into a dataclass."""
        assert from_json(Point, '{"x":1,"y":2}') == Point(x=1, y=2)

    def test_builtin_shape(self):
        """Test decoding into builtin container types."""
        assert from_json(list[int], "[1,2,3]") == [1, 2, 3]
        assert from_json(dict, '{"a":1}') == {"a": 1}

    def test_invalid_json(self):
        """Test malformed text raises SerializationError."""
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json(Rectangle, '{"width":')

    def test_shape_mismatch(self):
        """Test data not matching the shape raises SerializationError."""
        with pytest.raises(SerializationError, match="Rectangle"):
            from_json(Rectangle, '{"radius":10}')

    def test_serialization_error_is_value_error(self):
        """Test SerializationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            from_json(list[int], '["a"]')

    def test_model_text_back_to_model(self):
        """Test model text decodes to an equal model."""
        r = Rectangle(width=3, height=4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_extra_keys_kept(self):
        """Test keys outside the model fields survive decoding and encoding."""
        text = '{"width":10,"height":20,"color":"red"}'
        r = from_json(Rectangle, text)
        assert r.color == "red"
        assert r.get_area() == 200
        assert to_json(r) == text
