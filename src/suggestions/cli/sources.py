"""
Candidate Source

Reads possible values, one per line, from stdin or a file.
Lines end at a line feed only; a lone carriage return stays inside the value.
"""

from pathlib import Path
from typing import IO, List, Optional

import typer

from suggestions.cli.config import STDIN_MARKER
from suggestions.exceptions import CandidateSourceError
from suggestions.logging_config import logger


def split_candidates(text: str) -> List[str]:
    """
    Split text into one candidate per line.

    Trailing carriage returns and line feeds are removed from each line; surrounding
    whitespace is part of the value, blank lines become empty candidates, and
    duplicates are kept.
    """
    lines = text.split("\n")
    # A final terminator (or empty input) leaves nothing after the last "\n"
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def read_candidates(stream: IO[str]) -> List[str]:
    """
    Read one candidate per line from a text stream.

    Args:
        stream: Open text stream, ideally opened with newline="" so carriage returns are not translated

    Returns:
        Candidates in stream order
    """
    return split_candidates(stream.read())


def load_candidates(path: Optional[Path] = None) -> List[str]:
    """
    Load candidates from `path`, or from stdin when `path` is None or "-".

    Input is decoded as UTF-8.

    Raises:
        CandidateSourceError: If the source cannot be opened or decoded
    """
    if path is None or str(path) == STDIN_MARKER:
        source = "<stdin>"
        try:
            # Binary stdin avoids universal newline translation of a lone "\r"
            candidates = split_candidates(typer.get_binary_stream("stdin").read().decode("utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise CandidateSourceError(source, str(e)) from e
    else:
        source = str(path)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                candidates = read_candidates(f)
        except (OSError, UnicodeDecodeError) as e:
            raise CandidateSourceError(source, str(e)) from e

    logger.debug(f"Read {len(candidates)} candidates from {source}")
    return candidates
