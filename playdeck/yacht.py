"""Yacht: a two-player dice game over twelve scoring categories."""

from __future__ import annotations

import enum
import random
from collections import Counter
from typing import Iterable, Optional

DICE_COUNT = 5
ROLLS_PER_TURN = 3
PLAYERS = 2
TOTAL_TURNS = 24

FOUR_DICE_SCORE = 25
SMALL_STRAIGHT_SCORE = 15
BIG_STRAIGHT_SCORE = 30
YACHT_SCORE = 50

_SMALL_RUNS = (frozenset({1, 2, 3, 4}), frozenset({2, 3, 4, 5}), frozenset({3, 4, 5, 6}))
_BIG_RUNS = (frozenset({1, 2, 3, 4, 5}), frozenset({2, 3, 4, 5, 6}))


class Category(enum.IntEnum):
    """Scoring categories in score-sheet order."""

    ACES = 0
    DEUCES = 1
    TREYS = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    CHOICE = 6
    FOUR_DICE = 7
    FULL_HOUSE = 8
    SMALL_STRAIGHT = 9
    BIG_STRAIGHT = 10
    YACHT = 11

    @property
    def is_upper(self) -> bool:
        """True for the categories that count towards the 1-6 subtotal."""
        return self <= Category.SIXES


def score_dice(dice: Iterable[int]) -> dict[Category, int]:
    """Score five dice in every category."""
    dice = tuple(dice)
    if len(dice) != DICE_COUNT:
        raise ValueError(f"expected {DICE_COUNT} dice, got {len(dice)}")
    if any(not 1 <= d <= 6 for d in dice):
        raise ValueError(f"dice faces must be between 1 and 6: {dice}")

    counts = Counter(dice)
    scores = {category: 0 for category in Category}
    for face in range(1, 7):
        scores[Category(face - 1)] = face * counts[face]
    scores[Category.CHOICE] = sum(dice)

    if 4 in counts.values():
        scores[Category.FOUR_DICE] = FOUR_DICE_SCORE

    threes = [face for face, n in counts.items() if n == 3]
    twos = [face for face, n in counts.items() if n == 2]
    if threes and twos:
        scores[Category.FULL_HOUSE] = threes[0] * 3 + twos[0] * 2

    faces = set(dice)
    big = any(run <= faces for run in _BIG_RUNS)
    small = any(run <= faces for run in _SMALL_RUNS)
    if small and not big:
        scores[Category.SMALL_STRAIGHT] = SMALL_STRAIGHT_SCORE
    if big:
        scores[Category.BIG_STRAIGHT] = BIG_STRAIGHT_SCORE

    if DICE_COUNT in counts.values():
        scores[Category.YACHT] = YACHT_SCORE
    return scores


class YachtGame:
    """State of a two-player Yacht game: dice, locks and score sheets."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Start a new game with empty score sheets."""
        self.dice = [1] * DICE_COUNT
        self.locked = [False] * DICE_COUNT
        self.rolls_left = ROLLS_PER_TURN
        self.turn = 0
        self.scores: tuple[list[Optional[int]], ...] = tuple(
            [None] * len(Category) for _ in range(PLAYERS)
        )
        self.warning = False

    @property
    def rolled(self) -> bool:
        """True once the dice have been rolled this turn."""
        return self.rolls_left < ROLLS_PER_TURN

    @property
    def candidates(self) -> dict[Category, int]:
        """What the current dice would score in each category."""
        if not self.rolled:
            return {category: 0 for category in Category}
        return score_dice(self.dice)

    def roll(self) -> tuple[int, ...]:
        """Roll every unlocked die, using up one of the turn's rolls."""
        if self.finished():
            raise ValueError("the game is over")
        if self.rolls_left == 0:
            raise ValueError("no rolls left this turn")
        self.dice = [
            value if held else self.rng.randint(1, 6)
            for value, held in zip(self.dice, self.locked)
        ]
        self.rolls_left -= 1
        return tuple(self.dice)

    def toggle_lock(self, index: int) -> bool:
        """Hold or release one die; returns whether it is now held."""
        if not 0 <= index < DICE_COUNT:
            raise IndexError(f"die index out of range: {index}")
        if not self.rolled:
            raise ValueError("roll the dice before holding any")
        self.locked[index] = not self.locked[index]
        return self.locked[index]

    def assign(self, category: Category) -> int:
        """Write the current dice into a category and pass the turn."""
        category = Category(category)
        if not self.rolled:
            raise ValueError("roll the dice before scoring")
        sheet = self.scores[self.current_player() - 1]
        if sheet[category] is not None:
            self.warning = True
            raise ValueError(f"{category.name} is already filled")
        value = score_dice(self.dice)[category]
        sheet[category] = value
        self.turn += 1
        self.rolls_left = ROLLS_PER_TURN
        self.locked = [False] * DICE_COUNT
        self.warning = False
        return value

    def current_player(self) -> int:
        """The player to move, 1 or 2."""
        return 1 if self.turn % 2 == 0 else 2

    def finished(self) -> bool:
        """True once both players have filled all twelve categories."""
        return self.turn >= TOTAL_TURNS

    def subtotal(self, player: int) -> int:
        """Sum of a player's 1-6 categories."""
        return sum(
            value or 0
            for category, value in zip(Category, self._sheet(player))
            if category.is_upper
        )

    def total(self, player: int) -> int:
        """Sum of all a player's categories."""
        return sum(value or 0 for value in self._sheet(player))

    def winner(self) -> Optional[int]:
        """The winning player, or None on a draw."""
        if not self.finished():
            raise ValueError("the game is not over yet")
        first, second = self.total(1), self.total(2)
        if first > second:
            return 1
        if second > first:
            return 2
        return None

    def _sheet(self, player: int) -> list[Optional[int]]:
        if player not in (1, 2):
            raise ValueError(f"no such player: {player}")
        return self.scores[player - 1]