"""
Decorator: wrap an object to add behaviour without touching its class.
"""

from loguru import logger

from studykit.utils.registry import register_demo


class ConfigurableCar:
    # every new option is one more mutating method on the class
    def __init__(self):
        self.price = 10000
        self.description = "Basic Car"

    def get_price(self) -> int:
        return self.price

    def get_description(self) -> str:
        return self.description

    def add_sunroof(self):
        self.price += 1500
        self.description += " with Sunroof"

    def add_leather_seats(self):
        self.price += 2000
        self.description += " with Leather Seats"


class Car:
    def get_price(self) -> int:
        return 10000

    def get_description(self) -> str:
        return "Basic Car"


class CarDecorator:
    def __init__(self, car):
        self.car = car

    def get_price(self) -> int:
        return self.car.get_price()

    def get_description(self) -> str:
        return self.car.get_description()


class SunroofDecorator(CarDecorator):
    def get_price(self) -> int:
        return self.car.get_price() + 1500

    def get_description(self) -> str:
        return self.car.get_description() + " with Sunroof"


class LeatherSeatsDecorator(CarDecorator):
    def get_price(self) -> int:
        return self.car.get_price() + 2000

    def get_description(self) -> str:
        return self.car.get_description() + " with Leather Seats"


@register_demo("decorator")
def demo():
    car = ConfigurableCar()
    car.add_sunroof()
    car.add_leather_seats()
    logger.info(f"{car.get_description()}: {car.get_price()}")

    my_car = LeatherSeatsDecorator(SunroofDecorator(Car()))
    logger.info(f"{my_car.get_description()}: {my_car.get_price()}")


if __name__ == "__main__":
    demo()
