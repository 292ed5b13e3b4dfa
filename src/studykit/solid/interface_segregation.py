"""
Interface Segregation: clients should not depend on methods they do not use.
"""

from abc import ABC, abstractmethod

from loguru import logger

from studykit.utils.registry import register_demo


def _log(message: str) -> str:
    logger.info(message)
    return message


class Worker(ABC):
    @abstractmethod
    def work(self) -> str:
        ...

    @abstractmethod
    def eat(self) -> str:
        ...


class AllInOneRobotWorker(Worker):
    def work(self) -> str:
        return _log("Robot working")

    def eat(self) -> str:
        raise NotImplementedError("Robots don't eat")


class Workable(ABC):
    @abstractmethod
    def work(self) -> str:
        ...


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> str:
        ...


class HumanWorker(Workable, Eatable):
    def work(self) -> str:
        return _log("Human working")

    def eat(self) -> str:
        return _log("Human eating")


class RobotWorker(Workable):
    def work(self) -> str:
        return _log("Robot working")


class DrivingTest:
    def __init__(self, user_type: str):
        self.user_type = user_type


class CarTestMixin:
    def start_car_test(self) -> str:
        return "Car Test Started"


class TruckTestMixin:
    def start_truck_test(self) -> str:
        return "Truck Test Started"


class CarDrivingTest(CarTestMixin, DrivingTest):
    pass


class TruckDrivingTest(TruckTestMixin, DrivingTest):
    pass


@register_demo("interface_segregation")
def demo():
    human = HumanWorker()
    human.work()
    human.eat()
    RobotWorker().work()

    logger.info(CarDrivingTest("car driver").start_car_test())
    logger.info(TruckDrivingTest("truck driver").start_truck_test())


if __name__ == "__main__":
    demo()
