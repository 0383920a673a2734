"""Interactive menu for editing a social network file."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import TextIO

from .network import Network, UnknownUserError
from .user import User

MENU = (
    " \n"
    "-----------------------------\n"
    "----Zach's Social Network----\n"
    "-----------------------------\n"
    "1.   Add User\n"
    "2.   Add Friend\n"
    "3.   Remove Friend\n"
    "4.   Update Netork\n"
    "5+.  Exit\n"
    "------------------------------\n"
    "Please type your choice: "
)
NAMES_PROMPT = "please type out ther people's name in this order:\n"
PAIR_HINT = (
    "First name(first person) + Last name(first person) + "
    "First name(second person) + Last name(second person)\n"
)
FAREWELL = "Thank you for using my Social Network\n"


class _EndOfInput(Exception):
    """Input ran out or could not be read as expected."""


class _Tokens:
    """Whitespace-separated words read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._words = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise _EndOfInput from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise _EndOfInput from None

    def full_name(self) -> str:
        first = self.word()
        last = self.word()
        return f"{first} {last}"


def _add_user(network: Network, tokens: _Tokens, out: TextIO) -> None:
    out.write(NAMES_PROMPT)
    out.write("First name + Last name + DOB + Zip Code\n")
    name = tokens.full_name()
    year = tokens.number()
    zip_code = tokens.number()
    network.add_user(User(network.num_users(), name, year, zip_code, set()))
    out.write(f"we have succesfully added {name}\n")


def _add_friend(network: Network, tokens: _Tokens, out: TextIO) -> None:
    out.write(NAMES_PROMPT)
    out.write(PAIR_HINT)
    name1 = tokens.full_name()
    name2 = tokens.full_name()
    try:
        network.add_connection(name1, name2)
    except UnknownUserError:
        out.write("could not make the connection\n")
    else:
        out.write(f"connection was made between {name1} and {name2}\n")


def _remove_friend(network: Network, tokens: _Tokens, out: TextIO) -> None:
    out.write(NAMES_PROMPT)
    out.write(PAIR_HINT)
    name1 = tokens.full_name()
    name2 = tokens.full_name()
    try:
        network.delete_connection(name1, name2)
    except UnknownUserError:
        out.write("The users are not friends could not complete\n")
    else:
        out.write("Users have been removed as friends\n")


def run(
    network: Network,
    path: str | os.PathLike[str],
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Serve the menu on ``stdin``/``stdout`` until the user chooses to leave."""
    tokens = _Tokens(stdin)
    try:
        while True:
            stdout.write(MENU)
            choice = tokens.number()
            if choice == 1:
                _add_user(network, tokens, stdout)
            elif choice == 2:
                _add_friend(network, tokens, stdout)
            elif choice == 3:
                _remove_friend(network, tokens, stdout)
            elif choice == 4:
                network.write_users(path)
                stdout.write("updated file!!\n")
            else:
                break
    except _EndOfInput:
        pass
    stdout.write(FAREWELL)


def main(argv: list[str] | None = None) -> int:
    """Load the network file named on the command line and start the menu."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: coursenet <filename>")
        return 1
    path = args[0]
    network = Network()
    try:
        network.read_users(path)
    except OSError:
        print(f"Could not open file: {path}")
    run(network, path, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())