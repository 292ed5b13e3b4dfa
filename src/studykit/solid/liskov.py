"""
Liskov Substitution: every subtype must be usable wherever its base is.

``MutableSquare`` inherits width and height setters from a rectangle and has
to couple them, so code written against ``MutableRectangle`` breaks. The
refactored shapes share only ``get_area``.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from loguru import logger

from studykit.utils.registry import register_demo


class MutableRectangle:
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def set_width(self, width: float):
        self.width = width

    def set_height(self, height: float):
        self.height = height

    def get_area(self) -> float:
        return self.width * self.height


class MutableSquare(MutableRectangle):
    def __init__(self, size: float):
        super().__init__(size, size)

    def set_width(self, width: float):
        self.width = width
        self.height = width

    def set_height(self, height: float):
        self.width = height
        self.height = height


class Shape(ABC):
    @abstractmethod
    def get_area(self) -> float:
        ...


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def get_area(self) -> float:
        return self.width * self.height


class Square(Shape):
    def __init__(self, size: float):
        self.size = size

    def get_area(self) -> float:
        return self.size * self.size


def areas(shapes: Iterable[Shape]) -> List[float]:
    return [shape.get_area() for shape in shapes]


@register_demo("liskov")
def demo():
    for area in areas([Rectangle(5, 10), Square(6)]):
        logger.info(area)


if __name__ == "__main__":
    demo()
