"""A simple blackjack round against a dealer, with cards valued 1 to 10."""

from __future__ import annotations

import enum
import random
from typing import Iterable, Optional

MAX_CARDS = 5
BLACKJACK = 21
DEALER_DRAWS_UP_TO = 18


class Outcome(enum.Enum):
    """How a round ended."""

    PLAYER_BUST = 1
    DEALER_BUST = 2
    DEALER_WINS = 3
    PLAYER_WINS = 4
    BLACKJACK = 5
    DRAW = 6
    DEALER_BLACKJACK = 7


def decide_outcome(dealer: int, player: int) -> Outcome:
    """Judge a stood hand from the dealer's and player's totals."""
    outcome: Optional[Outcome] = None
    if player < dealer <= BLACKJACK:
        outcome = Outcome.DEALER_WINS
    if dealer < player <= BLACKJACK:
        outcome = Outcome.PLAYER_WINS
    if dealer > BLACKJACK:
        outcome = Outcome.DEALER_BUST
    if player > BLACKJACK:
        outcome = Outcome.PLAYER_BUST
    if dealer > BLACKJACK and player > BLACKJACK:
        outcome = Outcome.DRAW
    if dealer == player:
        outcome = Outcome.DRAW
    if dealer == BLACKJACK and player != BLACKJACK:
        outcome = Outcome.DEALER_BLACKJACK
    assert outcome is not None
    return outcome


class BlackjackGame:
    """One round of blackjack; hits are allowed even after it is decided."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Clear both hands and the result."""
        self.dealer: list[int] = []
        self.player: list[int] = []
        self.outcome: Optional[Outcome] = None
        self.hits = 0

    @property
    def dealt(self) -> bool:
        return bool(self.player)

    @property
    def dealer_total(self) -> int:
        return sum(self.dealer)

    @property
    def player_total(self) -> int:
        return sum(self.player)

    def _draw(self) -> int:
        return self.rng.randint(1, 10)

    def deal(self) -> None:
        """Give the dealer and then the player two cards each."""
        if self.dealt:
            raise ValueError("cards have already been dealt")
        self.dealer = [self._draw(), self._draw()]
        self.player = [self._draw(), self._draw()]
        self._check_blackjack()

    def hit(self) -> Optional[int]:
        """Draw a card for the player; None once the hand holds five cards."""
        if not self.dealt:
            raise ValueError("deal before hitting")
        card = None
        if len(self.player) < MAX_CARDS:
            card = self._draw()
            self.player.append(card)
        self.hits += 1
        self._check_blackjack()
        return card

    def stand(self) -> Outcome:
        """Let the dealer draw up to five cards while at 18 or less, then judge."""
        if not self.dealt:
            raise ValueError("deal before standing")
        if self.outcome is not None:
            raise ValueError("the round is already decided")
        while self.dealer_total <= DEALER_DRAWS_UP_TO and len(self.dealer) < MAX_CARDS:
            self.dealer.append(self._draw())
        self.outcome = decide_outcome(self.dealer_total, self.player_total)
        return self.outcome

    def _check_blackjack(self) -> None:
        if self.player_total == BLACKJACK:
            self.outcome = Outcome.BLACKJACK

    @staticmethod
    def _cards(values: Iterable[int]) -> list[int]:
        return list(values)