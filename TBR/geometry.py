import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """Width and height of an image or a box, both positive"""
    width: int
    height: int

    def __post_init__(self) -> None:
        for name, value in (('width', self.width), ('height', self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"Size {name} must be a positive integer, got {value!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Size):
            return (self.width, self.height) == (other.width, other.height)
        if isinstance(other, tuple):
            return (self.width, self.height) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def scale(self, ratio: float) -> 'Size':
        """Scales both sides by ratio, rounding halves up (2.5 -> 3)"""
        return Size(_round_half_up(self.width * ratio), _round_half_up(self.height * ratio))

    def contains(self, other: 'Size') -> bool:
        return other.width <= self.width and other.height <= self.height

    def __repr__(self) -> str:
        return f'Size({self.width}x{self.height})'


@dataclass(frozen=True)
class Point:
    """Top-left corner of a crop region or of a pasted image"""
    x: int
    y: int

    def __post_init__(self) -> None:
        for name, value in (('x', self.x), ('y', self.y)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Point {name} must be a non-negative integer, got {value!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return (self.x, self.y) == (other.x, other.y)
        if isinstance(other, tuple):
            return (self.x, self.y) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def centered_offset(outer: Size, inner: Size) -> Point:
    """Offset that centers inner over outer

    Odd differences are rounded up, so the region is shifted one pixel
    to the bottom-right.

    Parameters
    ----------
    outer: Size
        Bigger area (scaled image when cropping, canvas when filling)
    inner: Size
        Smaller area (crop box when cropping, scaled image when filling)

    Returns
    -------
    Point
        Top-left corner of inner inside outer
    """
    x = math.ceil(abs(outer.width - inner.width) / 2)
    y = math.ceil(abs(outer.height - inner.height) / 2)
    return Point(x, y)
