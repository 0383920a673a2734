"""Print a file with its spaces and tabs made visible."""

from __future__ import annotations

import sys

_VISIBLE = str.maketrans({" ": ".", "\t": ">"})

DEFAULT_FILE = "users.txt"


def show_whitespace(text: str) -> str:
    """Return ``text`` with spaces shown as '.' and tabs as '>'."""
    return text.translate(_VISIBLE)


def main(argv: list[str] | None = None) -> int:
    """Print the named file (users.txt by default) with visible whitespace."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_FILE
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            text = stream.read()
    except OSError as error:
        print(f"Could not open file: {path} ({error.strerror})", file=sys.stderr)
        return 1
    sys.stdout.write(show_whitespace(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())