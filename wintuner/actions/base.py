"""
Core data model for WinTuner actions.

Action         — one independent unit of work: id, label, recommended hint,
                 and a zero-argument operation that raises on failure.
ActionRegistry — ordered catalog of actions, built once at startup and
                 only read afterwards.

The registry decides *what* can run. How it runs belongs to
wintuner.engine.executor.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Literal

from wintuner.errors import DuplicateIdError, UnknownIdError


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Action:
    id: str                         # "show_file_extensions", "Git.Git"
    label: str                      # "Show File Extensions"
    operation: Callable[[], None]   # side effect; raises to signal failure
    recommended: bool = False
    description: str = ""
    category: Literal["tweak", "app"] = "tweak"


# ── Registry ──────────────────────────────────────────────────────────────────

class ActionRegistry:
    """
    Insertion-ordered catalog of actions keyed by id.

    Ids are unique: a second registration with the same id is rejected
    and the first one stays in place.
    """

    def __init__(self, actions: Iterable[Action] = ()) -> None:
        self._actions: dict[str, Action] = {}
        for action in actions:
            self.register(action)

    def register(self, action: Action) -> Action:
        if action.id in self._actions:
            raise DuplicateIdError(action.id)
        self._actions[action.id] = action
        return action

    def all(self) -> list[Action]:
        """Every action, in the order it was registered."""
        return list(self._actions.values())

    def select_recommended(self) -> list[Action]:
        """Actions flagged as recommended, in catalog order."""
        return [a for a in self._actions.values() if a.recommended]

    def by_ids(self, ids: Iterable[str]) -> list[Action]:
        """
        Resolve ids to actions, all or nothing.

        Returns the matching actions in catalog order (duplicates collapse).
        Raises UnknownIdError listing every id that is not registered;
        nothing is returned in that case.
        """
        wanted: list[str] = []
        for action_id in ids:
            if action_id not in wanted:
                wanted.append(action_id)

        unknown = [i for i in wanted if i not in self._actions]
        if unknown:
            raise UnknownIdError(unknown)

        return [a for a in self._actions.values() if a.id in wanted]

    def get(self, action_id: str) -> Action:
        try:
            return self._actions[action_id]
        except KeyError:
            raise UnknownIdError([action_id]) from None

    def ids(self) -> list[str]:
        return list(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions.values())

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions
