from .sorting import sort_numbers, sort_strings, sort_by_id, sort_by_name, compare_names
from .iteration import double_each, add_greetings, even_numbers, total, first_greater_than

__all__ = [
    "sort_numbers",
    "sort_strings",
    "sort_by_id",
    "sort_by_name",
    "compare_names",
    "double_each",
    "add_greetings",
    "even_numbers",
    "total",
    "first_greater_than",
]
