from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .cards import Card, empty_card

logger = logging.getLogger(__name__)

MIN_DECK_SIZE = 40


class EmptyDeckError(ValueError):
    """Raised when drawing more cards than the deck holds."""


class Deck:
    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.rng = rng or random.Random()
        self.cards: List[Card] = list(cards) if cards is not None else []

        missing = MIN_DECK_SIZE - len(self.cards)
        if missing > 0:
            logger.debug("Padding deck with %d empty cards", missing)
            self.cards.extend(empty_card() for _ in range(missing))

    @property
    def deck_list(self) -> List[Card]:
        return self.cards

    @property
    def deck_count(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck({len(self.cards)} cards)"

    def count(self, name: str) -> int:
        return sum(1 for c in self.cards if c.name == name)

    def deep_copy(self) -> "Deck":
        """
        Independent copy: new list, cloned cards, and an RNG that starts from
        this deck's generator state but is its own object.
        """
        try:
            state = self.rng.getstate()
        except NotImplementedError:
            # SystemRandom keeps no state to carry over
            rng: random.Random = random.SystemRandom()
        else:
            rng = random.Random()
            rng.setstate(state)

        new_deck = Deck.__new__(Deck)
        new_deck.rng = rng
        new_deck.cards = [c.clone() for c in self.cards]
        return new_deck

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    def draw_card(self) -> Card:
        if not self.cards:
            raise EmptyDeckError("No cards left to draw")
        idx = self.rng.randrange(len(self.cards))
        return self.cards.pop(idx)

    def draw_cards(self, n: int) -> List[Card]:
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")
        if n > len(self.cards):
            raise EmptyDeckError(
                f"Not enough cards left to draw {n} (deck has {len(self.cards)})"
            )
        return [self.draw_card() for _ in range(n)]


@dataclass(frozen=True, slots=True)
class CardDetails:
    qty: int = 1
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_value(
        cls,
        value: Union["CardDetails", Mapping[str, Any], int, None],
        name: str = "card",
    ) -> "CardDetails":
        """
        Accepts the shapes a deck list entry may take:
          - CardDetails           -> as is
          - {"qty": 3, "tags": [...]} (both keys optional)
          - 3                     -> shorthand for {"qty": 3}
          - None                  -> defaults (one card, no tags)
        Anything else raises ValueError naming `name`.
        """
        if isinstance(value, CardDetails):
            return value
        if value is None:
            return cls()
        if isinstance(value, bool):
            raise ValueError(f"Invalid entry for {name}: {value!r}")
        if isinstance(value, int):
            return cls(qty=value)
        if not isinstance(value, Mapping):
            raise ValueError(f"Invalid entry for {name}: expected a mapping or a quantity")

        unknown = set(value) - {"qty", "tags"}
        if unknown:
            raise ValueError(f"Unknown keys for {name}: {', '.join(sorted(map(str, unknown)))}")

        qty = value.get("qty")
        if qty is None:
            qty = 1
        if isinstance(qty, bool) or not isinstance(qty, int):
            raise ValueError(f"Invalid qty for {name}: {qty!r}")

        tags = value.get("tags") or ()
        if not isinstance(tags, (list, tuple)) or not all(isinstance(t, str) for t in tags):
            raise ValueError(f"Invalid tags for {name}: expected a list of strings")

        return cls(qty=qty, tags=tuple(tags))


DeckListInput = Mapping[str, Union[CardDetails, Mapping[str, Any], int, None]]


def build_deck(deck_list: DeckListInput, rng: Optional[random.Random] = None) -> Deck:
    cards: List[Card] = []
    for name, raw in deck_list.items():
        details = CardDetails.from_value(raw, name=name)
        # qty <= 0 is a valid "none of this card"
        for _ in range(max(details.qty, 0)):
            cards.append(Card(name=name, tags=frozenset(details.tags)))

    logger.debug("Built %d cards from %d deck list entries", len(cards), len(deck_list))
    return Deck(cards, rng=rng)
