from typing import Callable, Dict, List


def singleton(class_):
    """
    Singleton decorator
    :param class_: class
    :return: function returning the one shared class instance
    """
    instances = {}

    def get_instance(*args, **kwargs):
        if class_ not in instances:
            instances[class_] = class_(*args, **kwargs)
        return instances[class_]

    return get_instance


@singleton
class DemoRegister(object):
    def __init__(self):
        self._demos: Dict[str, Callable[[], object]] = dict()

    def register(self, name: str):
        def _register(func):
            self._demos[name] = func
            return func
        return _register

    def get_demo(self, name: str) -> Callable[[], object]:
        if name not in self._demos:
            raise KeyError(f"Unknown demo '{name}'")
        return self._demos[name]

    def names(self) -> List[str]:
        return sorted(self._demos)


demosRegister = DemoRegister()
