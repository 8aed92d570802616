"""
Value objects for selector-chain.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

Number = Union[int, float]


class Rectangle(BaseModel):
    """Rectangle with width and height.

    Keys other than width and height are kept, so decoded rectangles
    carry every property of their JSON source.

    Example:
        >>> r = Rectangle(width=10, height=20)
        >>> r.get_area()
        200
    """

    model_config = ConfigDict(extra="allow")

    width: Number
    height: Number

    def get_area(self) -> Number:
        """Return width multiplied by height."""
        return self.width * self.height
