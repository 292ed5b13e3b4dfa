"""
Single Responsibility: one class, one reason to change.
"""

from typing import Dict, Optional

from loguru import logger

from studykit.utils.registry import register_demo


class UserWithEmail:
    """Holds user data and also sends mail."""

    def __init__(self, name: str, email: str):
        self.name = name
        self.email = email

    def get_user_details(self) -> str:
        return f"User: {self.name}, Email: {self.email}"

    def send_welcome_email(self) -> str:
        message = f"Sending welcome email to {self.email}"
        logger.info(message)
        return message


class User:
    def __init__(self, name: str, email: str):
        self.name = name
        self.email = email

    def get_user_details(self) -> str:
        return f"User: {self.name}, Email: {self.email}"


class EmailService:
    def send_welcome_email(self, user: User) -> str:
        message = f"Sending welcome email to {user.email}"
        logger.info(message)
        return message


class AuthenticationService:
    def __init__(self, credentials: Dict[str, str]):
        self._credentials = credentials

    def authenticate(self, username: str, password: str) -> bool:
        return self._credentials.get(username) == password


class UserDataValidator:
    def validate(self, data: dict) -> bool:
        return bool(data.get("name")) and "@" in data.get("email", "")


class UserDatabase:
    def __init__(self):
        self._profiles: Dict[int, dict] = {}

    def create_user_profile(self, data: dict) -> int:
        user_id = len(self._profiles) + 1
        self._profiles[user_id] = dict(data)
        return user_id

    def get_user_profile(self, user_id: int) -> Optional[dict]:
        return self._profiles.get(user_id)


@register_demo("single_responsibility")
def demo():
    UserWithEmail("John", "john@example.com").send_welcome_email()

    user = User("John", "john@example.com")
    logger.info(user.get_user_details())
    EmailService().send_welcome_email(user)

    data = {"name": user.name, "email": user.email}
    if UserDataValidator().validate(data):
        user_id = UserDatabase().create_user_profile(data)
        logger.info(f"Profile {user_id} created")
    logger.info(AuthenticationService({"John": "secret"}).authenticate("John", "secret"))


if __name__ == "__main__":
    demo()
