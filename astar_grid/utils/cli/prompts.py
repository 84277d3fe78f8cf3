"""Console prompts for picking start and goal cells."""

from __future__ import annotations

from typing import Callable, Optional

from ...core.tile import Coord


ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


def parse_index(text: str, size: int) -> Optional[int]:
    """Return the 0-based index for a 1-based ``text`` entry, or ``None``."""
    text = text.strip()
    try:
        value = int(text)
    except ValueError:
        return None
    if not 1 <= value <= size:
        return None
    return value - 1


def ask_index(prompt: str, size: int, read: ReadFn = input, write: WriteFn = print) -> int:
    """Keep asking ``prompt`` until a number in ``1..size`` is entered."""
    while True:
        index = parse_index(read(prompt), size)
        if index is not None:
            return index
        write(f"Please enter a whole number between 1 and {size}.")


def ask_coordinate(
    label: str, size: int, read: ReadFn = input, write: WriteFn = print
) -> Coord:
    """Prompt for the 1-based row and column of ``label``; return 0-based."""

    write(f"Enter the row and column of the {label} tile")
    row = ask_index(f"Row (1 - {size}): ", size, read, write)
    col = ask_index(f"Col (1 - {size}): ", size, read, write)
    return (row, col)


def ask_yes_no(prompt: str, read: ReadFn = input) -> bool:
    return read(prompt).strip().lower() in ("y", "yes")


__all__ = ["parse_index", "ask_index", "ask_coordinate", "ask_yes_no"]
