"""A social network of users linked by friendships, stored in a text file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from .user import User

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UnknownUserError(LookupError):
    """Raised when a name does not belong to any user of the network."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no user named {name!r}")
        self.name = name


def _leading_int(line: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"expected a number, got {line!r}")
    return int(match.group(1))


def _ints(line: str) -> Iterator[int]:
    for token in line.split():
        match = _LEADING_INT.fullmatch(token)
        if match is None:
            return
        yield int(match.group(1))


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("unexpected end of user file") from None


class Network:
    """Users indexed by their position, with symmetric friend links."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = list(users)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def get_user(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or None when there is none."""
        if 0 <= user_id < len(self._users):
            return self._users[user_id]
        return None

    def add_user(self, user: User) -> None:
        """Append ``user`` to the network."""
        self._users.append(user)

    def _ids(self, name1: str, name2: str) -> tuple[int, int]:
        id1 = self.get_id(name1)
        if id1 is None:
            raise UnknownUserError(name1)
        id2 = self.get_id(name2)
        if id2 is None:
            raise UnknownUserError(name2)
        return id1, id2

    def add_connection(self, name1: str, name2: str) -> None:
        """Make the two named users friends of each other."""
        id1, id2 = self._ids(name1, name2)
        self._users[id1].add_friend(id2)
        self._users[id2].add_friend(id1)

    def delete_connection(self, name1: str, name2: str) -> None:
        """Remove any friendship between the two named users."""
        id1, id2 = self._ids(name1, name2)
        self._users[id1].delete_friend(id2)
        self._users[id2].delete_friend(id1)

    def get_id(self, name: str) -> int | None:
        """Return the id of the first user called ``name``, or None."""
        return next(
            (index for index, user in enumerate(self._users) if user.name == name),
            None,
        )

    def num_users(self) -> int:
        """Return the number of users in the network."""
        return len(self._users)

    def read_users(self, path: str | os.PathLike[str]) -> None:
        """Append the users stored in the file at ``path``."""
        with open(path, encoding="utf-8") as stream:
            lines = (line.rstrip("\r\n") for line in stream)
            total = _leading_int(next(lines, ""))
            for _ in range(total):
                user_id = _leading_int(_next_line(lines))
                name = _next_line(lines)[1:]
                year = _leading_int(_next_line(lines))
                zip_code = _leading_int(_next_line(lines))
                friends = set(_ints(_next_line(lines)))
                self._users.append(User(user_id, name, year, zip_code, friends))

    def write_users(self, path: str | os.PathLike[str]) -> None:
        """Write every user to the file at ``path`` in the readable format."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(f"{len(self._users)}\n")
            for user in self._users:
                stream.write(f"{user.id}\n")
                stream.write(f"\t{user.name}\n")
                stream.write(f"\t{user.year}\n")
                stream.write(f"\t{user.zip_code}\n")
                friends = "".join(f"{friend} " for friend in sorted(user.friends))
                stream.write(f"\t{friends}\n")