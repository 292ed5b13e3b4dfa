"""Tests for the design pattern snippets."""

import pytest

from studykit.patterns.command import (
    Command,
    DirectRemoteControl,
    RemoteControl,
    Television,
    TurnOffCommand,
    TurnOnCommand,
)
from studykit.patterns.decorator import (
    Car as BasicCar,
    ConfigurableCar,
    LeatherSeatsDecorator,
    SunroofDecorator,
)
from studykit.patterns.factory import Car, CarFactory, Truck, create_vehicle
from studykit.patterns.observer import Observer, SingleListenerSubject, Subject
from studykit.patterns.proxy import DBOperation, ProxyOperation
from studykit.patterns.singleton import Counter, Preferences, SharedCounter


class TestSingleton:
    def test_shared_counter_instances_differ(self) -> None:
        """Only the count is shared, the objects are not."""
        first, second = SharedCounter(), SharedCounter()
        start = first.get_count()

        second.increment()

        assert first.get_instance() is not second.get_instance()
        assert first.get_count() == start + 1
        first.decrement()

    def test_counter_rejects_second_instance(self, fresh_counter) -> None:
        counter = Counter()
        assert counter.increment() == 1
        assert counter.decrement() == 0

        with pytest.raises(RuntimeError, match="You can only create one instance!"):
            Counter()

    def test_decorator_returns_the_same_instance(self) -> None:
        assert Preferences() is Preferences("dark")


class TestFactory:
    def test_naive_factory(self) -> None:
        car = create_vehicle("car")

        assert car["wheels"] == 4
        assert car["drive"]() == "Driving a car."
        assert create_vehicle("truck")["wheels"] == 6
        assert create_vehicle("boat") is None

    def test_car_factory_builds_truck(self) -> None:
        truck = CarFactory.create_car("truck")

        assert isinstance(truck, Truck)
        assert truck.wheels == 6
        assert truck.type == "truck"
        assert truck.drive() == "Driving a truck."

    def test_car_factory_builds_car(self) -> None:
        car = CarFactory.create_car("car")

        assert isinstance(car, Car)
        assert car.wheels == 4
        assert car.drive() == "Driving a car."

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown car type."):
            CarFactory.create_car("boat")


class TestObserver:
    def test_single_listener_is_replaced(self) -> None:
        calls = []
        subject = SingleListenerSubject()
        subject.add_listener(lambda: calls.append("first"))
        subject.add_listener(lambda: calls.append("second"))

        subject.set_state(1)

        assert subject.state == 1
        assert calls == ["second"]

    def test_subject_notifies_every_observer(self) -> None:
        subject = Subject()
        first, second = Observer(), Observer()
        subject.add_observer(first)
        subject.add_observer(second)

        assert subject.notify() == ["State updated", "State updated"]

        subject.remove_observer(first)
        assert subject.notify() == ["State updated"]


class TestDecorator:
    def test_mutating_car(self) -> None:
        car = ConfigurableCar()
        car.add_sunroof()
        car.add_leather_seats()

        assert car.get_price() == 13500
        assert car.get_description() == "Basic Car with Sunroof with Leather Seats"

    def test_decorators_stack(self) -> None:
        car = LeatherSeatsDecorator(SunroofDecorator(BasicCar()))

        assert car.get_price() == 13500
        assert car.get_description() == "Basic Car with Sunroof with Leather Seats"

    def test_base_car_is_unchanged(self) -> None:
        base = BasicCar()
        SunroofDecorator(base)

        assert base.get_price() == 10000


class TestProxy:
    def test_proxy_fetches_once(self) -> None:
        class CountingOperation(DBOperation):
            calls = 0

            def fetch_data(self) -> str:
                CountingOperation.calls += 1
                return super().fetch_data()

        proxy = ProxyOperation(CountingOperation())

        assert proxy.fetch_data() == "Data from server"
        assert proxy.fetch_data() == "Data from server"
        assert CountingOperation.calls == 1


class TestCommand:
    def test_direct_remote(self) -> None:
        remote = DirectRemoteControl(Television())

        assert remote.press_button("on") == "Television is ON"
        assert remote.press_button("off") == "Television is OFF"
        assert remote.press_button("mute") is None

    def test_remote_runs_assigned_command(self) -> None:
        tv = Television()
        remote = RemoteControl()

        remote.set_command(TurnOnCommand(tv))
        assert remote.press_button() == "Television is ON"

        remote.set_command(TurnOffCommand(tv))
        assert remote.press_button() == "Television is OFF"

    def test_remote_without_command_raises(self) -> None:
        with pytest.raises(RuntimeError):
            RemoteControl().press_button()

    def test_command_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Command()
