"""
Dependency Inversion: the controller depends on an email API abstraction,
the concrete provider is handed in.
"""

from abc import ABC, abstractmethod

from loguru import logger

from studykit.utils.registry import register_demo


class EmailApi(ABC):
    @abstractmethod
    def send_email(self, email_details: dict) -> int:
        """Send the email and return an HTTP-like status code."""


class YahooEmailApi(EmailApi):
    def send_email(self, email_details: dict) -> int:
        logger.info(f"Yahoo API sending to {email_details.get('to')}")
        return 200 if email_details.get("to") else 400


class EmailController:
    def __init__(self, api: EmailApi):
        self.api = api

    def send_email(self, email_details: dict) -> bool:
        return self.api.send_email(email_details) == 200


@register_demo("dependency_inversion")
def demo():
    controller = EmailController(YahooEmailApi())
    logger.info(controller.send_email({"to": "john@example.com", "body": "Hi"}))


if __name__ == "__main__":
    demo()
