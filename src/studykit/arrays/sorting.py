"""
Sorting snippets: numbers, strings and small records, ascending and descending.

Every helper sorts a copy, the input sequence is left untouched.
"""

from functools import cmp_to_key
from typing import Any, List, Sequence, Union

from loguru import logger

from studykit.models.records import NamedRecord
from studykit.utils.registry import register_demo

Record = Union[NamedRecord, dict]

NUMBERS = [1, 5, 89, 3, 85, 26, 7, 8]
STRINGS = ["Lakshya", "Ayush", "Paras", "Harshit"]
RECORDS = [
    NamedRecord(id=5, name="Lakshya"),
    NamedRecord(id=6, name="Harshit"),
    NamedRecord(id=1, name="Ayush"),
]


def _field(record: Record, key: str) -> Any:
    if isinstance(record, dict):
        return record[key]
    return getattr(record, key)


def sort_numbers(numbers: Sequence[float], descending: bool = False) -> List[float]:
    return sorted(numbers, reverse=descending)


def sort_strings(strings: Sequence[str], descending: bool = False) -> List[str]:
    result = sorted(strings)
    if descending:
        result.reverse()
    return result


def sort_by_id(records: Sequence[Record], descending: bool = False) -> List[Record]:
    return sorted(records, key=lambda r: _field(r, "id"), reverse=descending)


def compare_names(a: Record, b: Record) -> int:
    """Three-way comparator on the ``name`` field."""
    if _field(a, "name") < _field(b, "name"):
        return -1
    if _field(a, "name") > _field(b, "name"):
        return 1
    return 0


def sort_by_name(records: Sequence[Record], descending: bool = False) -> List[Record]:
    if descending:
        return sorted(records, key=cmp_to_key(lambda a, b: compare_names(b, a)))
    return sorted(records, key=cmp_to_key(compare_names))


@register_demo("sorting")
def demo():
    logger.info(f"Numbers ascending: {sort_numbers(NUMBERS)}")
    logger.info(f"Numbers descending: {sort_numbers(NUMBERS, descending=True)}")
    logger.info(f"Strings ascending: {sort_strings(STRINGS)}")
    logger.info(f"Strings descending: {sort_strings(STRINGS, descending=True)}")
    logger.info(f"Records by id ascending: {sort_by_id(RECORDS)}")
    logger.info(f"Records by id descending: {sort_by_id(RECORDS, descending=True)}")
    logger.info(f"Records by name ascending: {sort_by_name(RECORDS)}")
    logger.info(f"Records by name descending: {sort_by_name(RECORDS, descending=True)}")


if __name__ == "__main__":
    demo()
