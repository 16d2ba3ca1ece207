from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from .deck import CardDetails, Deck, build_deck

logger = logging.getLogger(__name__)


def _parse_entry(name: Any, value: Any) -> CardDetails:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Deck list card names must be non-empty strings, got {name!r}")
    return CardDetails.from_value(value, name=name)


@dataclass(frozen=True, slots=True)
class DeckList:
    name: str
    entries: Dict[str, CardDetails]

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "DeckList":
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError("Deck list must be a mapping at the top level")

        name = str(data.get("name") or "Unnamed Deck")
        cards = data.get("cards") or {}
        if not isinstance(cards, Mapping):
            raise ValueError("Deck list 'cards' must be a mapping of card name to details")

        entries = {card_name: _parse_entry(card_name, v) for card_name, v in cards.items()}
        return cls(name=name, entries=entries)

    @classmethod
    def from_yaml(cls, path: str) -> "DeckList":
        with open(path, "r") as f:
            data = yaml.safe_load(f)

        deck_list = cls.from_mapping(data)
        logger.debug(
            "Loaded deck list %r from %s: %d entries, %d cards",
            deck_list.name,
            path,
            len(deck_list.entries),
            deck_list.total_cards,
        )
        return deck_list

    @property
    def total_cards(self) -> int:
        return sum(max(d.qty, 0) for d in self.entries.values())

    def build(self, rng: Optional[random.Random] = None) -> Deck:
        return build_deck(self.entries, rng=rng)
