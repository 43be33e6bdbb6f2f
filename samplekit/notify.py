"""Users and admins that can be sent notifications."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Notifier(ABC):
    """Something that can be notified."""

    @abstractmethod
    def notify(self) -> str:
        """Send the notification and return the message that was sent."""


@dataclass
class User(Notifier):
    """A user of the program."""

    name: str
    email: str

    def notify(self) -> str:
        """Print a user notification and return it."""
        message = f"Sending user email to {self.name}<{self.email}>"
        print(message)
        return message

    def change_email(self, email: str) -> None:
        """Replace the user's e-mail address."""
        self.email = email


@dataclass
class Admin(User):
    """A user with privileges; its own notification replaces the user's."""

    level: str = ""

    def notify(self) -> str:
        """Print an admin notification and return it."""
        message = f"Sending admin email to {self.name}<{self.email}>"
        print(message)
        return message


def send_notification(notifier: Notifier) -> str:
    """Notify ``notifier`` and return the message it sent."""
    return notifier.notify()


def main(argv: list[str] | None = None) -> int:
    """Notify a few users and an admin."""
    parser = argparse.ArgumentParser(description="Send notifications to users and admins.")
    parser.parse_args(argv)

    bill = User("Bill", "bill@example.com")
    bill.notify()

    lisa = User("Lisa", "lisa@example.com")
    send_notification(lisa)

    bill.change_email("william@example.com")
    bill.notify()

    admin = Admin("john smith", "john@example.com", "super")
    send_notification(admin)
    User.notify(admin)
    admin.notify()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())