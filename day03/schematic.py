# AoC - Gear Ratios Engine for Day 3 (Part 1 & Part 2)
# Created:      2026-10-18
# Modified:     2026-10-18
# Author:       Kagan Dikmen

import logging
from typing import Any, Callable, Iterator, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
EMPTY = '.'
GEAR = '*'


def is_symbol(ch: str) -> bool:
    return ch not in DIGITS and ch != EMPTY


def is_gear(ch: str) -> bool:
    return ch == GEAR


class Schematic:
    """Read-only grid of rows. Anything outside the rows is absent (None)."""

    def __init__(self, rows):
        self.rows = tuple(rows)

    @classmethod
    def from_text(cls, text: str) -> 'Schematic':
        schematic = cls(text.strip().splitlines())
        logger.debug('parsed schematic with %d rows', len(schematic.rows))
        return schematic

    def row_at(self, li: int) -> Optional[str]:
        if 0 <= li < len(self.rows):
            return self.rows[li]
        return None

    def cell_at(self, li: int, ci: int) -> Optional[str]:
        row = self.row_at(li)
        if row is None or not 0 <= ci < len(row):
            return None
        return row[ci]

    def is_digit(self, li: int, ci: int) -> bool:
        return self.cell_at(li, ci) in DIGITS

    def sites(self, is_relevant: Callable[[str], bool]) -> Iterator[Tuple[int, int]]:
        for li, row in enumerate(self.rows):
            for ci, ch in enumerate(row):
                if is_relevant(ch):
                    yield li, ci


class NumberToken(NamedTuple):
    row: int
    start: int
    end: int
    value: int


def _digit_at(row: str, ci: int) -> bool:
    return 0 <= ci < len(row) and row[ci] in DIGITS


def scan_number(row: str, ci: int, li: int = 0) -> Optional[NumberToken]:
    """
    Resolve the whole digit run of `row` that covers column `ci`.
    Returns None when that column holds no digit.
    """
    if not _digit_at(row, ci):
        return None

    start = ci
    while _digit_at(row, start - 1):
        start -= 1

    value = 0
    end = start
    while _digit_at(row, end):
        value = value * 10 + int(row[end])
        end += 1

    return NumberToken(li, start, end - 1, value)


def _neighbor_row(schematic: Schematic, li: int, ci: int) -> Iterator[NumberToken]:
    row = schematic.row_at(li)
    if row is None:
        return

    # a run through the center already covers both diagonals
    if _digit_at(row, ci):
        yield scan_number(row, ci, li)
        return

    for c in (ci - 1, ci + 1):
        if _digit_at(row, c):
            yield scan_number(row, c, li)


def adjacent_numbers(schematic: Schematic, li: int, ci: int) -> Iterator[NumberToken]:
    """Yield every distinct number touching the cell at (li, ci), each once."""
    row = schematic.row_at(li)
    if row is None:
        return

    # the cell itself separates whatever sits west and east of it
    for c in (ci - 1, ci + 1):
        if _digit_at(row, c):
            yield scan_number(row, c, li)

    yield from _neighbor_row(schematic, li - 1, ci)
    yield from _neighbor_row(schematic, li + 1, ci)


class FoldSpec(NamedTuple):
    start: Callable[[], Any]
    fold: Callable[[Any, int], Any]
    finalize: Callable[[Any], int]


def total_for(schematic: Schematic, is_relevant: Callable[[str], bool], spec: FoldSpec) -> int:
    total = 0
    num_sites = 0

    for li, ci in schematic.sites(is_relevant):
        state = spec.start()
        for token in adjacent_numbers(schematic, li, ci):
            state = spec.fold(state, token.value)
        total += spec.finalize(state)
        num_sites += 1

    logger.debug('%d relevant cells, total %d', num_sites, total)
    return total


# for part 1
PART_NUMBERS = FoldSpec(
    start=lambda: 0,
    fold=lambda acc, num: acc + num,
    finalize=lambda acc: acc,
)


# for part 2
def _fold_gear(state: Tuple[int, int], num: int) -> Tuple[int, int]:
    count, product = state
    if num > 0:
        return count + 1, product * num
    return state


def _finalize_gear(state: Tuple[int, int]) -> int:
    count, product = state
    return product if count == 2 else 0


GEAR_RATIOS = FoldSpec(
    start=lambda: (0, 1),
    fold=_fold_gear,
    finalize=_finalize_gear,
)


def part_1(schematic: Schematic) -> int:
    return total_for(schematic, is_symbol, PART_NUMBERS)


def part_2(schematic: Schematic) -> int:
    return total_for(schematic, is_gear, GEAR_RATIOS)
