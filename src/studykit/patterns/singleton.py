"""
Singleton: a class with exactly one instance and a global access point.

``SharedCounter`` only shares its count through a module global, every
construction still yields a new object. ``Counter`` refuses a second
construction. The ``singleton`` decorator in ``studykit.utils.utils`` is the
form the package itself uses for ``DemoRegister``.
"""

from loguru import logger

from studykit.utils.registry import register_demo
from studykit.utils.utils import singleton

_shared_count = 0


class SharedCounter:
    def get_instance(self):
        return self

    def get_count(self) -> int:
        return _shared_count

    def increment(self) -> int:
        global _shared_count
        _shared_count += 1
        return _shared_count

    def decrement(self) -> int:
        global _shared_count
        _shared_count -= 1
        return _shared_count


class Counter:
    _instance = None

    def __init__(self):
        if Counter._instance is not None:
            raise RuntimeError("You can only create one instance!")
        Counter._instance = self
        self._count = 0

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def get_instance(self):
        return self

    def get_count(self) -> int:
        return self._count

    def increment(self) -> int:
        self._count += 1
        return self._count

    def decrement(self) -> int:
        self._count -= 1
        return self._count


@singleton
class Preferences(object):
    def __init__(self, theme: str = "light"):
        self.theme = theme


@register_demo("singleton")
def demo():
    counter1, counter2 = SharedCounter(), SharedCounter()
    logger.info(f"SharedCounter instances identical: {counter1.get_instance() is counter2.get_instance()}")

    Counter.reset_instance()
    Counter()
    try:
        Counter()
    except RuntimeError as e:
        logger.info(f"Counter: {e}")

    logger.info(f"Decorated instances identical: {Preferences() is Preferences('dark')}")


if __name__ == "__main__":
    demo()
