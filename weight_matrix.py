"""
Reader for the dense weight-matrix text format.

    <n>
    <w00> <w01> ... <w0(n-1)>
    ...
    <w(n-1)0> ... <w(n-1)(n-1)>

Integers are whitespace-delimited; line breaks carry no meaning. A zero entry
means "no edge".
"""

import logging
from typing import Iterator, List, TextIO

from errors import LoadError

logger = logging.getLogger(__name__)


def _tokens(source: TextIO) -> Iterator[str]:
    for line in source:
        yield from line.split()


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise LoadError(f"unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise LoadError(f"expected an integer for {what}, got {token!r}") from None


def read_weight_matrix(source: TextIO) -> List[List[int]]:
    """
    Parse a square weight matrix from a text stream.

    Raises LoadError if the stream cannot be read, the vertex count is
    missing or negative, or fewer than n*n integers follow it. Anything after
    the last matrix entry is ignored.
    """
    tokens = _tokens(source)
    try:
        n = _next_int(tokens, "vertex count")
        if n < 0:
            raise LoadError(f"vertex count must be non-negative, got {n}")

        rows: List[List[int]] = []
        for i in range(n):
            rows.append([_next_int(tokens, f"matrix[{i}][{j}]") for j in range(n)])
    except OSError as exc:
        raise LoadError(f"cannot read weight matrix: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LoadError(f"weight matrix is not text: {exc}") from exc

    logger.debug(f"read {n}x{n} weight matrix")
    return rows
