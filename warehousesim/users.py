"""Plain-text account store: one "account password" pair per line."""

from __future__ import annotations

import os
from pathlib import Path


class UserError(Exception):
    """Raised when registering an account fails."""


class UserStore:
    """Accounts kept in a text file, one per line."""

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)

    def _lines(self) -> list[str]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                return handle.readlines()
        except FileNotFoundError:
            return []

    def exists(self, account: str) -> bool:
        """Return True if an account with this name is stored."""
        for line in self._lines():
            name = line.split(" ", 1)[0].split("\n", 1)[0]
            if name == account:
                return True
        return False

    def authenticate(self, account: str, password: str) -> bool:
        """Return True if the account exists with exactly this password."""
        expected = f"{account} {password}\n"
        return any(line == expected for line in self._lines())

    def add(self, account: str, password: str) -> None:
        """Append a new account; raise UserError if it already exists."""
        if self.exists(account):
            raise UserError(f"user {account!r} already exists")
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(f"{account} {password}\n")
        except OSError as exc:
            raise UserError(f"cannot open {self.path}: {exc}") from exc


def register_user(store: UserStore, account: str, password: str, confirm: str) -> None:
    """Validate a registration form and store the new account."""
    if not account or not password or not confirm:
        raise UserError("all fields must be filled in")
    if password != confirm:
        raise UserError("the two passwords do not match")
    store.add(account, password)