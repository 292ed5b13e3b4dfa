"""Tests for the SOLID principle snippets."""

import pytest

from studykit.solid.dependency_inversion import EmailApi, EmailController, YahooEmailApi
from studykit.solid.interface_segregation import (
    AllInOneRobotWorker,
    CarDrivingTest,
    HumanWorker,
    RobotWorker,
    TruckDrivingTest,
    Worker,
)
from studykit.solid.liskov import MutableRectangle, MutableSquare, Rectangle, Shape, Square, areas
from studykit.solid.open_closed import (
    ManageSalaries,
    SeniorDiscount,
    StudentDiscount,
    TypeSwitchDiscount,
)
from studykit.solid.single_responsibility import (
    AuthenticationService,
    EmailService,
    User,
    UserDatabase,
    UserDataValidator,
    UserWithEmail,
)


class TestSingleResponsibility:
    def test_user_details(self) -> None:
        assert User("John", "john@example.com").get_user_details() == "User: John, Email: john@example.com"

    def test_email_service_sends_for_user(self) -> None:
        user = User("John", "john@example.com")

        assert EmailService().send_welcome_email(user) == "Sending welcome email to john@example.com"
        assert UserWithEmail("John", "john@example.com").send_welcome_email() == EmailService().send_welcome_email(user)

    def test_split_services(self) -> None:
        database = UserDatabase()
        data = {"name": "John", "email": "john@example.com"}

        assert UserDataValidator().validate(data)
        assert not UserDataValidator().validate({"name": "John", "email": "nope"})
        user_id = database.create_user_profile(data)
        assert database.get_user_profile(user_id) == data
        assert database.get_user_profile(999) is None
        assert AuthenticationService({"John": "pw"}).authenticate("John", "pw")
        assert not AuthenticationService({"John": "pw"}).authenticate("John", "other")


class TestOpenClosed:
    @pytest.mark.parametrize("kind, expected", [("student", 10), ("senior", 20), ("other", 0)])
    def test_type_switch(self, kind: str, expected: int) -> None:
        assert TypeSwitchDiscount().get_discount(kind) == expected

    def test_subclasses(self) -> None:
        assert [d.get_discount() for d in (StudentDiscount(), SeniorDiscount())] == [10, 20]

    def test_salaries_can_be_extended(self) -> None:
        salaries = ManageSalaries()
        salaries.add_salary_rate(4, "developer", 250)

        assert salaries.calculate_salary(1, 100) == 10000
        assert salaries.calculate_salary(4, 100) == 25000

    def test_unknown_employee_raises(self) -> None:
        with pytest.raises(KeyError):
            ManageSalaries().calculate_salary(42, 1)


class TestLiskov:
    def test_mutable_square_breaks_rectangle_contract(self) -> None:
        """Setting the width of a square also changes its height."""
        rectangle, square = MutableRectangle(5, 5), MutableSquare(5)
        rectangle.set_width(4)
        square.set_width(4)

        assert rectangle.get_area() == 20
        assert square.get_area() == 16

    def test_shapes_are_substitutable(self) -> None:
        assert areas([Rectangle(5, 10), Square(6)]) == [50, 36]

    def test_shape_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Shape()


class TestInterfaceSegregation:
    def test_fat_interface_forces_a_failing_method(self) -> None:
        robot = AllInOneRobotWorker()

        assert robot.work() == "Robot working"
        with pytest.raises(NotImplementedError, match="Robots don't eat"):
            robot.eat()

    def test_worker_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Worker()

    def test_segregated_workers(self) -> None:
        human, robot = HumanWorker(), RobotWorker()

        assert human.work() == "Human working"
        assert human.eat() == "Human eating"
        assert robot.work() == "Robot working"
        assert not hasattr(robot, "eat")

    def test_driving_tests_expose_only_their_method(self) -> None:
        car_test, truck_test = CarDrivingTest("car driver"), TruckDrivingTest("truck driver")

        assert car_test.start_car_test() == "Car Test Started"
        assert truck_test.start_truck_test() == "Truck Test Started"
        with pytest.raises(AttributeError):
            car_test.start_truck_test()
        with pytest.raises(AttributeError):
            truck_test.start_car_test()


class TestDependencyInversion:
    def test_controller_uses_injected_api(self) -> None:
        class FailingApi(EmailApi):
            def send_email(self, email_details: dict) -> int:
                return 503

        assert EmailController(YahooEmailApi()).send_email({"to": "john@example.com"})
        assert not EmailController(YahooEmailApi()).send_email({})
        assert not EmailController(FailingApi()).send_email({"to": "john@example.com"})
