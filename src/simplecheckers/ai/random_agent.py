"""Automated opponent that plays a uniformly random legal action."""

import random
from typing import Iterable, Optional

from ..types import Action


def _sort_key(action: Action):
    return (action.start, action.end)


class RandomAgent:
    """
    Picks one of the engine's legal actions at random.

    Actions are sorted before sampling so the choice depends only on the
    seed and the position, never on set iteration order.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def choose(self, actions: Iterable[Action]) -> Action:
        """Choose an action. Raises ValueError if there is none."""
        candidates = sorted(actions, key=_sort_key)
        if not candidates:
            raise ValueError("No legal actions to choose from")
        return self._rng.choice(candidates)

    def __repr__(self) -> str:
        return f"RandomAgent(seed={self.seed})"
