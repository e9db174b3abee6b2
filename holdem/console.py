"""Console helpers: CSV line parsing, string splitting and terminal control."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Iterable, Iterator

MAX_FIELDS = 128
CONTINUE_PROMPT = "Presione una tecla para continuar..."


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    Fields may be wrapped in double quotes, in which case they may contain the
    separator and ``""`` stands for a literal quote. The line ends at the
    first carriage return or newline. At most ``MAX_FIELDS - 1`` fields are
    returned; a trailing separator does not produce an empty last field.
    """
    cuts = [i for i in (line.find("\r"), line.find("\n")) if i >= 0]
    if cuts:
        line = line[: min(cuts)]

    fields: list[str] = []
    pos = 0
    length = len(line)
    while pos < length and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            chars: list[str] = []
            while pos < length:
                if line[pos] == '"':
                    if pos + 1 < length and line[pos + 1] == '"':
                        chars.append('"')
                        pos += 2
                    else:
                        pos += 1
                        break
                else:
                    chars.append(line[pos])
                    pos += 1
            if pos < length and line[pos] == separator:
                pos += 1
            fields.append("".join(chars))
        else:
            stop = line.find(separator, pos)
            if stop < 0:
                fields.append(line[pos:])
                pos = length
            else:
                fields.append(line[pos:stop])
                pos = stop + 1
    return fields


def read_csv(stream: Iterable[str], separator: str = ",") -> Iterator[list[str]]:
    """Yield the parsed fields of each line of ``stream``."""
    for line in stream:
        yield parse_csv_line(line, separator)


def split_string(text: str, delimiters: str) -> list[str]:
    """Split on any of the delimiter characters, dropping empty pieces and
    trimming spaces around each piece."""
    pieces: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in delimiters:
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return [piece.strip(" ") for piece in pieces]


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        print("\033[2J\033[H", end="", flush=True)


def wait_for_key(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], object] = print,
) -> None:
    """Ask the user to press a key and wait for the line to be entered."""
    output_fn(CONTINUE_PROMPT)
    try:
        input_fn()
    except EOFError:
        pass