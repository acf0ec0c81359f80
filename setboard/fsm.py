from __future__ import annotations

from statemachine import State, StateMachine

from setboard.core.events import SetEvent


class CandidateFSM(StateMachine):
    """Outcome machine for one candidate resolution.

    pending -> set found | set failed. Both outcomes are final; a fresh
    machine is built for every resolution.
    """

    pending = State("pending", value="pending", initial=True)
    set_found = State(SetEvent.found.value, value=SetEvent.found.value, final=True)
    set_failed = State(SetEvent.failed.value, value=SetEvent.failed.value, final=True)

    match = pending.to(set_found)
    mismatch = pending.to(set_failed)

    @property
    def outcome(self) -> SetEvent:
        value = str(self.current_state.value)
        if value == "pending":
            raise RuntimeError("Candidate not resolved yet")
        return SetEvent(value)
