from functools import reduce
from operator import add
from typing import Iterable, List, Optional, Sequence, Union

from loguru import logger

from studykit.models.records import GreetedPerson, Person
from studykit.utils.registry import register_demo

DIGITS = [1, 2, 3, 4, 5, 6]
PEOPLE = [
    Person(name="Alice", age=25),
    Person(name="Bob", age=30),
    Person(name="Charlie", age=35),
]
NUMBERS = list(range(1, 11))
VALUES = [10, 11, 3, 20, 5]


def double_each(digits: Iterable[int]) -> List[int]:
    doubled = []
    for element in digits:
        logger.info(element * 2)
        doubled.append(element * 2)
    return doubled


def add_greetings(people: Iterable[Union[Person, dict]]) -> List[GreetedPerson]:
    greeted = []
    for person in people:
        person = Person(**person) if isinstance(person, dict) else person
        greeted.append(
            GreetedPerson(
                **person.model_dump(),
                greeting=f"Hi, my name is {person.name} and I am {person.age} years old.",
            )
        )
    return greeted


def even_numbers(numbers: Iterable[int]) -> List[int]:
    return [number for number in numbers if number % 2 == 0]


def total(numbers: Sequence[float]) -> float:
    # no initial value: an empty sequence raises TypeError
    return reduce(add, numbers)


def first_greater_than(values: Iterable[float], threshold: float) -> Optional[float]:
    return next((element for element in values if element > threshold), None)


@register_demo("iteration")
def demo():
    double_each(DIGITS)
    logger.info(add_greetings(PEOPLE))
    logger.info(even_numbers(NUMBERS))
    logger.info(total(NUMBERS))
    logger.info(first_greater_than(VALUES, 10))


if __name__ == "__main__":
    demo()
