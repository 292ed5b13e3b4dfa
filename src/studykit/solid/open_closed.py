"""
Open/Closed: add behaviour by extension, not by editing existing code.
"""

from typing import Dict, List

from loguru import logger

from studykit.utils.registry import register_demo


class TypeSwitchDiscount:
    def get_discount(self, type: str) -> int:
        if type == "student":
            return 10
        elif type == "senior":
            return 20
        return 0


class Discount:
    def get_discount(self) -> int:
        return 0


class StudentDiscount(Discount):
    def get_discount(self) -> int:
        return 10


class SeniorDiscount(Discount):
    def get_discount(self) -> int:
        return 20


class ManageSalaries:
    def __init__(self):
        self.salary_rates: List[Dict] = [
            {"id": 1, "role": "developer", "rate": 100},
            {"id": 2, "role": "architect", "rate": 200},
            {"id": 3, "role": "manager", "rate": 300},
        ]

    def calculate_salary(self, emp_id: int, hours_worked: float) -> float:
        salary = next((rate for rate in self.salary_rates if rate["id"] == emp_id), None)
        if salary is None:
            raise KeyError(f"No salary rate for employee {emp_id}")
        return hours_worked * salary["rate"]

    def add_salary_rate(self, id: int, role: str, rate: float):
        self.salary_rates.append({"id": id, "role": role, "rate": rate})


@register_demo("open_closed")
def demo():
    for discount in [StudentDiscount(), SeniorDiscount()]:
        logger.info(discount.get_discount())

    salaries = ManageSalaries()
    salaries.add_salary_rate(4, "developer", 250)
    logger.info(f"Salary : {salaries.calculate_salary(4, 100)}")


if __name__ == "__main__":
    demo()
