from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from setboard.core.errors import UnknownSlot

logger = logging.getLogger(__name__)

Slot = str
CardId = int

# Canonical slot order; every compaction and deal walks slots in this order.
SLOTS: tuple[Slot, ...] = tuple("ABCDEFGHIJKLMNOPQR")
GROUP_SIZE = 3
SLOT_GROUPS: tuple[tuple[Slot, ...], ...] = tuple(
    SLOTS[i : i + GROUP_SIZE] for i in range(0, len(SLOTS), GROUP_SIZE)
)
CORE: tuple[Slot, ...] = tuple(s for group in SLOT_GROUPS[:4] for s in group)
EXTRA1: tuple[Slot, ...] = SLOT_GROUPS[4]
EXTRA2: tuple[Slot, ...] = SLOT_GROUPS[5]

_INDEX: dict[Slot, int] = {s: i for i, s in enumerate(SLOTS)}


def slot_index(slot: Slot) -> int:
    try:
        return _INDEX[slot]
    except KeyError:
        raise UnknownSlot(slot) from None


@dataclass(frozen=True, slots=True)
class Board:
    """Eighteen slots, each holding a card id or ``None``.

    Stored as a tuple in ``SLOTS`` order. Use ``assign`` to get a modified copy.
    """

    cells: tuple[CardId | None, ...] = (None,) * len(SLOTS)

    def __post_init__(self) -> None:
        if len(self.cells) != len(SLOTS):
            raise ValueError(f"Board needs exactly {len(SLOTS)} cells, got {len(self.cells)}")

    def get(self, slot: Slot) -> CardId | None:
        return self.cells[slot_index(slot)]

    def assign(self, slot: Slot, card_id: CardId | None) -> Board:
        idx = slot_index(slot)
        cells = list(self.cells)
        cells[idx] = card_id
        return Board(cells=tuple(cells))

    def pairs(self) -> Iterator[tuple[Slot, CardId | None]]:
        return zip(SLOTS, self.cells)

    def occupied(self) -> list[tuple[Slot, CardId]]:
        return [(s, c) for s, c in self.pairs() if c is not None]

    def empty_slots(self, slots: Iterable[Slot] = SLOTS) -> list[Slot]:
        return [s for s in slots if self.get(s) is None]

    def card_ids(self) -> list[CardId]:
        return [c for _, c in self.occupied()]

    def slot_of(self, card_id: CardId) -> Slot | None:
        for s, c in self.pairs():
            if c == card_id:
                return s
        return None

    def as_dict(self) -> dict[Slot, CardId | None]:
        return dict(self.pairs())

    def pretty(self) -> str:
        """Human-readable rows of three, empty slots shown as ``.``."""

        lines: list[str] = []
        for group in SLOT_GROUPS:
            cells = [f"{s}:{'.' if self.get(s) is None else self.get(s)}" for s in group]
            lines.append(" ".join(cells))
        return "\n".join(lines)


def empty_board() -> Board:
    return Board()


def has_openings(board: Board, slots: Iterable[Slot]) -> bool:
    return any(board.get(s) is None for s in slots)


def has_cards(board: Board, slots: Iterable[Slot]) -> bool:
    return any(board.get(s) is not None for s in slots)


def needs_downsize(board: Board) -> bool:
    """True when an expanded group holds cards while a lower group has a gap."""

    if has_cards(board, EXTRA2):
        return has_openings(board, CORE + EXTRA1)
    if has_cards(board, EXTRA1):
        return has_openings(board, CORE)
    return False


def downsize_board(board: Board) -> Board:
    """Pack every card into the lowest slots, keeping their relative slot order."""

    ids = board.card_ids()
    cells = tuple(ids) + (None,) * (len(SLOTS) - len(ids))
    logger.debug("downsize: %d cards packed into %s..%s", len(ids), SLOTS[0], SLOTS[max(len(ids) - 1, 0)])
    return Board(cells=cells)
