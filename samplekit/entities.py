"""People in the system: admins whose user details are set after creation."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


@dataclass
class _User:
    name: str = ""
    email: str = ""


@dataclass(repr=False)
class Admin:
    """An admin with rights; its name and e-mail come from an inner user."""

    rights: int = 0
    _user: _User = field(default_factory=_User, init=False)

    @property
    def name(self) -> str:
        return self._user.name

    @name.setter
    def name(self, value: str) -> None:
        self._user.name = value

    @property
    def email(self) -> str:
        return self._user.email

    @email.setter
    def email(self, value: str) -> None:
        self._user.email = value

    def __repr__(self) -> str:
        return f"Admin(name={self.name!r}, email={self.email!r}, rights={self.rights!r})"


def main(argv: list[str] | None = None) -> int:
    """Create an admin, fill in its user details and print it."""
    parser = argparse.ArgumentParser(description="Create an admin.")
    parser.parse_args(argv)

    admin = Admin(rights=10)
    admin.name = "Bill"
    admin.email = "bill@example.com"
    print(f"User: {admin!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())