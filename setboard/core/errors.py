from __future__ import annotations


class GameError(ValueError):
    """Base class for recoverable, caller-level rule violations."""


class EmptyDealQueue(GameError):
    def __init__(self, slot: str) -> None:
        super().__init__(f"Cannot deal into slot {slot}: no cards left to deal")
        self.slot = slot


class CardNotOnBoard(GameError):
    def __init__(self, card_id: int) -> None:
        super().__init__(f"Card {card_id} is not on the board")
        self.card_id = card_id


class UnknownPlayer(GameError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Player not found: {name}")
        self.name = name


class DuplicatePlayer(GameError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Player already exists: {name}")
        self.name = name


class InvalidCandidateSize(GameError):
    def __init__(self, name: str, size: int) -> None:
        super().__init__(f"Player {name} has {size} claimed cards; a candidate needs exactly 3")
        self.name = name
        self.size = size


class ClaimLimitExceeded(GameError):
    def __init__(self, name: str, card_id: int, limit: int) -> None:
        super().__init__(f"Player {name} cannot claim card {card_id}: already holding {limit} claims")
        self.name = name
        self.card_id = card_id
        self.limit = limit


class SlotOccupied(GameError):
    def __init__(self, slot: str, card_id: int) -> None:
        super().__init__(f"Slot {slot} already holds card {card_id}")
        self.slot = slot
        self.card_id = card_id


class UnknownSlot(GameError):
    def __init__(self, slot: str) -> None:
        super().__init__(f"Unknown slot: {slot!r}")
        self.slot = slot
