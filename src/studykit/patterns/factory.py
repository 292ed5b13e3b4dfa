"""
Factory: creation is delegated to one place that picks the concrete class.
"""

from typing import Optional

from loguru import logger

from studykit.utils.registry import register_demo


def create_vehicle(type: str) -> Optional[dict]:
    """Branching constructor returning ad hoc dicts, ``None`` for unknown types."""
    if type == "car":
        return {"type": "car", "wheels": 4, "drive": lambda: _log("Driving a car.")}
    elif type == "truck":
        return {"type": "truck", "wheels": 6, "drive": lambda: _log("Driving a truck.")}
    return None


def _log(message: str) -> str:
    logger.info(message)
    return message


class Vehicle:
    type = "vehicle"

    def __init__(self):
        self.wheels = 4

    def drive(self) -> str:
        return _log("Driving a vehicle.")


class Car(Vehicle):
    type = "car"

    def drive(self) -> str:
        return _log("Driving a car.")


class Truck(Vehicle):
    type = "truck"

    def __init__(self):
        super().__init__()
        self.wheels = 6

    def drive(self) -> str:
        return _log("Driving a truck.")


class CarFactory:
    _types = {"car": Car, "truck": Truck}

    @staticmethod
    def create_car(type: str) -> Vehicle:
        if type not in CarFactory._types:
            raise ValueError("Unknown car type.")
        return CarFactory._types[type]()


@register_demo("factory")
def demo():
    create_vehicle("car")["drive"]()
    create_vehicle("truck")["drive"]()

    CarFactory.create_car("car").drive()
    CarFactory.create_car("truck").drive()


if __name__ == "__main__":
    demo()
