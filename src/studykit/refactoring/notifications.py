"""
Notification service, before and after the refactoring.

``MonolithicNotificationService`` sends, logs and dispatches on the method
string in one class. The refactored version splits the channels into
services, wraps each delivery in a command and lets a factory choose the
command.
"""

from abc import ABC, abstractmethod

from loguru import logger

from studykit.utils.registry import register_demo


class MonolithicNotificationService:
    def send_email(self, email: str, message: str) -> str:
        return _log(f"Sending email to {email}: {message}")

    def send_sms(self, phone_number: str, message: str) -> str:
        return _log(f"Sending SMS to {phone_number}: {message}")

    def log_notification(self, message: str) -> str:
        return _log(f"Logging notification: {message}")

    def notify(self, method: str, recipient: str, message: str) -> str:
        if method == "email":
            sent = self.send_email(recipient, message)
            self.log_notification(f"Email sent to {recipient}")
        elif method == "sms":
            sent = self.send_sms(recipient, message)
            self.log_notification(f"SMS sent to {recipient}")
        else:
            raise ValueError("Unsupported notification method")
        return sent


def _log(message: str) -> str:
    logger.info(message)
    return message


class EmailService:
    def send_email(self, email: str, message: str) -> str:
        return _log(f"Sending email to {email}: {message}")


class SMSService:
    def send_sms(self, phone_number: str, message: str) -> str:
        return _log(f"Sending SMS to {phone_number}: {message}")


class LogNotification:
    def log(self, message: str) -> str:
        return _log(f"Logging Notification: {message}")


class NotificationCommand(ABC):
    @abstractmethod
    def execute(self, recipient: str, message: str) -> str:
        ...


class EmailNotificationCommand(NotificationCommand):
    def __init__(self, email_service: EmailService, notification_logger: LogNotification):
        self.email_service = email_service
        self.notification_logger = notification_logger

    def execute(self, recipient: str, message: str) -> str:
        sent = self.email_service.send_email(recipient, message)
        self.notification_logger.log(f"Email sent to {recipient}")
        return sent


class SMSNotificationCommand(NotificationCommand):
    def __init__(self, sms_service: SMSService, notification_logger: LogNotification):
        self.sms_service = sms_service
        self.notification_logger = notification_logger

    def execute(self, recipient: str, message: str) -> str:
        sent = self.sms_service.send_sms(recipient, message)
        self.notification_logger.log(f"SMS sent to {recipient}")
        return sent


class NotificationFactory:
    def __init__(self, email_service: EmailService, sms_service: SMSService, log_notification: LogNotification):
        self.email_service = email_service
        self.sms_service = sms_service
        self.log_notification = log_notification

    def create_notification(self, method: str) -> NotificationCommand:
        if method == "email":
            return EmailNotificationCommand(self.email_service, self.log_notification)
        elif method == "sms":
            return SMSNotificationCommand(self.sms_service, self.log_notification)
        raise ValueError("Unsupported notification method")


class NotificationService:
    def __init__(self, notification_factory: NotificationFactory):
        self.notification_factory = notification_factory

    def notify(self, method: str, recipient: str, message: str) -> str:
        notification_command = self.notification_factory.create_notification(method)
        return notification_command.execute(recipient, message)


@register_demo("notifications")
def demo():
    MonolithicNotificationService().notify("email", "user@example.com", "Hello via Email!")

    factory = NotificationFactory(EmailService(), SMSService(), LogNotification())
    service = NotificationService(factory)
    service.notify("email", "lakshya@gkmit.co", "Hello via Email!")
    service.notify("sms", "7890122435", "Hello via SMS!")


if __name__ == "__main__":
    demo()
