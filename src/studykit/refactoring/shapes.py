from abc import ABC, abstractmethod

from loguru import logger

from studykit.utils.registry import register_demo


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class RectangleSquare(Rectangle):
    # a square that still carries two independent sides
    def __init__(self, side: float):
        super().__init__(side, side)


class Square(Shape):
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side * self.side


def print_area(shape: Shape) -> str:
    message = f"Area: {shape.area()}"
    logger.info(message)
    return message


@register_demo("shapes")
def demo():
    print_area(RectangleSquare(5))
    print_area(Square(5))
    print_area(Rectangle(4, 6))


if __name__ == "__main__":
    demo()
