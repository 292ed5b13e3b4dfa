from . import single_responsibility, open_closed, liskov, interface_segregation, dependency_inversion

__all__ = [
    "single_responsibility",
    "open_closed",
    "liskov",
    "interface_segregation",
    "dependency_inversion",
]
