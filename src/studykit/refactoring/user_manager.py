from loguru import logger

from studykit.utils.registry import register_demo


def _log(message: str) -> str:
    logger.info(message)
    return message


class MonolithicUserManager:
    def create_user(self, username: str) -> str:
        return _log(f"User {username} created.")

    def delete_user(self, user_id) -> str:
        return _log(f"User {user_id} deleted.")

    def reset_password(self, user_id) -> str:
        return _log(f"Password for user {user_id} reset.")

    def send_email(self, user_id, message: str) -> str:
        return _log(f"Sending email to user {user_id}: {message}")


class UserManager:
    def create_user(self, username: str) -> str:
        return _log(f"User {username} created.")

    def delete_user(self, user_id) -> str:
        return _log(f"User {user_id} deleted.")


class PasswordService:
    def reset_password(self, user_id) -> str:
        return _log(f"Password for user {user_id} reset.")


class EmailService:
    def send_email(self, user_id, message: str) -> str:
        return _log(f"Sending email to user {user_id}: {message}")


@register_demo("user_manager")
def demo():
    manager = MonolithicUserManager()
    manager.create_user("john_doe")
    manager.send_email(1, "Welcome!")

    UserManager().create_user("john_doe")
    EmailService().send_email(1, "Welcome!")
    PasswordService().reset_password(1)


if __name__ == "__main__":
    demo()
