"""
Observer: a subject notifies every registered dependent of a change.
"""

from typing import Callable, List, Optional

from loguru import logger

from studykit.utils.registry import register_demo


class SingleListenerSubject:
    """Holds one callback only, a second ``add_listener`` replaces the first."""

    def __init__(self):
        self.state = 0
        self.listener: Optional[Callable[[], object]] = None

    def set_state(self, new_state):
        self.state = new_state
        self.update_listener()

    def add_listener(self, listener: Callable[[], object]):
        self.listener = listener

    def update_listener(self):
        if self.listener:
            self.listener()


class Observer:
    def update(self) -> str:
        logger.info("State updated")
        return "State updated"


class Subject:
    def __init__(self):
        self.observers: List[Observer] = []

    def add_observer(self, observer: Observer):
        self.observers.append(observer)

    def remove_observer(self, observer: Observer):
        self.observers.remove(observer)

    def notify(self) -> list:
        return [observer.update() for observer in self.observers]


@register_demo("observer")
def demo():
    subject = SingleListenerSubject()
    subject.add_listener(lambda: logger.info("State updated, but hard to manage if more listeners are needed"))
    subject.set_state(1)

    subject = Subject()
    subject.add_observer(Observer())
    subject.notify()


if __name__ == "__main__":
    demo()
