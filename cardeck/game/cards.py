from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

EMPTY_CARD_NAME = "Empty Card"


@dataclass(frozen=True, slots=True)
class Card:
    name: str
    tags: FrozenSet[str] = frozenset()
    extra: Dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Card name must be a non-empty string, got {self.name!r}")
        if isinstance(self.tags, (str, Mapping)):
            raise ValueError(
                f"Tags for {self.name} must be a collection of strings, got {type(self.tags).__name__}; "
                "use Card.from_details for a details mapping"
            )
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "tags", frozenset(str(t) for t in self.tags))
        object.__setattr__(self, "extra", dict(self.extra))

    @classmethod
    def from_details(cls, name: str, details: Optional[Mapping[str, Any]] = None) -> "Card":
        """
        Build a card from a details bag like {"tags": ["Tag1"], "cost": 2}.
        Everything other than "tags" is kept as extra metadata.
        """
        data = dict(details or {})
        tags = data.pop("tags", None) or ()
        return cls(name=name, tags=frozenset(tags), extra=data)

    @property
    def details(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"tags": sorted(self.tags)}
        out.update(copy.deepcopy(self.extra))
        return out

    @property
    def is_empty(self) -> bool:
        return self.name == EMPTY_CARD_NAME and not self.tags and not self.extra

    def clone(self) -> "Card":
        return Card(name=self.name, tags=self.tags, extra=copy.deepcopy(self.extra))

    def __str__(self) -> str:
        return self.name


def empty_card() -> Card:
    return Card(EMPTY_CARD_NAME)


def cards_str(cards: Iterable[Card]) -> str:
    return ", ".join(str(c) for c in cards)
