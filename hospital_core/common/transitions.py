# hospital_core/common/transitions.py
from __future__ import annotations

from typing import Iterable, Mapping

from rest_framework.exceptions import ValidationError


class TransitionTable:
    """
    Explicit lifecycle for a status field.

    - `transitions` maps each state to the set of states it may move to.
    - States with no outgoing transitions are terminal.
    - Re-asserting the current state is allowed unless the state is terminal
      (lets callers update side fields like notes without moving the status).
    """

    def __init__(self, *, field: str, transitions: Mapping[str, Iterable[str]]):
        self.field = field
        self.transitions = {str(k): frozenset(str(t) for t in v) for k, v in transitions.items()}

    @property
    def states(self) -> frozenset[str]:
        out = set(self.transitions)
        for targets in self.transitions.values():
            out |= targets
        return frozenset(out)

    def is_terminal(self, state: str) -> bool:
        return not self.transitions.get(str(state))

    def allowed(self, current: str, target: str) -> bool:
        current, target = str(current), str(target)
        if current == target:
            return not self.is_terminal(current)
        return target in self.transitions.get(current, frozenset())

    def check(self, current: str, target: str) -> None:
        current, target = str(current), str(target)
        if target not in self.states:
            raise ValidationError({self.field: f"Unknown {self.field} '{target}'."})

        if not self.allowed(current, target):
            if self.is_terminal(current):
                msg = f"Cannot change {self.field} of a record that is already '{current}'."
            else:
                msg = f"Illegal {self.field} transition '{current}' -> '{target}'."
            raise ValidationError({self.field: msg})
