"""
Command: a request wrapped in an object, so the invoker does not need to
know the receiver or the action.
"""

from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger

from studykit.utils.registry import register_demo


class Television:
    def turn_on(self) -> str:
        logger.info("Television is ON")
        return "Television is ON"

    def turn_off(self) -> str:
        logger.info("Television is OFF")
        return "Television is OFF"


class DirectRemoteControl:
    """Calls the television directly, one branch per action string."""

    def __init__(self, tv: Television):
        self.tv = tv

    def press_button(self, action: str) -> Optional[str]:
        if action == "on":
            return self.tv.turn_on()
        elif action == "off":
            return self.tv.turn_off()
        return None


class Command(ABC):
    @abstractmethod
    def execute(self):
        ...


class TurnOnCommand(Command):
    def __init__(self, device: Television):
        self.device = device

    def execute(self):
        return self.device.turn_on()


class TurnOffCommand(Command):
    def __init__(self, device: Television):
        self.device = device

    def execute(self):
        return self.device.turn_off()


class RemoteControl:
    def __init__(self):
        self.command: Optional[Command] = None

    def set_command(self, command: Command):
        self.command = command

    def press_button(self):
        if self.command is None:
            raise RuntimeError("No command assigned to the button")
        return self.command.execute()


@register_demo("command")
def demo():
    tv = Television()
    remote = DirectRemoteControl(tv)
    remote.press_button("on")
    remote.press_button("off")

    remote = RemoteControl()
    remote.set_command(TurnOnCommand(tv))
    remote.press_button()
    remote.set_command(TurnOffCommand(tv))
    remote.press_button()


if __name__ == "__main__":
    demo()
