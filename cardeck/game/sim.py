from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable

from .cards import Card
from .deck import Deck

logger = logging.getLogger(__name__)

CardPredicate = Callable[[Card], bool]


@dataclass
class DrawOddsResult:
    trials: int
    draws: int
    hits: int
    hit_rate: float


def has_tag(tag: str) -> CardPredicate:
    return lambda c: tag in c.tags


def has_name(name: str) -> CardPredicate:
    return lambda c: c.name == name


def draw_odds(
    deck: Deck,
    predicate: CardPredicate,
    draws: int,
    trials: int,
    seed: int = 42,
) -> DrawOddsResult:
    """
    Estimate P(at least one of `draws` random cards matches `predicate`).
    The source deck is never touched; every trial draws from a fresh copy.
    """
    if draws < 0:
        raise ValueError(f"draws must be >= 0, got {draws}")
    if draws > deck.deck_count:
        raise ValueError(f"Cannot draw {draws} cards from a deck of {deck.deck_count}")

    rng = random.Random(seed)
    hits = 0

    for _ in range(max(trials, 0)):
        trial = deck.deep_copy()
        trial.rng = random.Random(rng.getrandbits(64))
        trial.shuffle()
        if any(predicate(c) for c in trial.draw_cards(draws)):
            hits += 1

    hit_rate = hits / trials if trials > 0 else 0.0
    logger.debug("draw_odds: %d/%d hits over %d draws", hits, trials, draws)

    return DrawOddsResult(trials=trials, draws=draws, hits=hits, hit_rate=hit_rate)
