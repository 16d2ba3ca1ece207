import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

import yaml

from cardeck.game.cards import EMPTY_CARD_NAME, cards_str
from cardeck.game.deck import EmptyDeckError
from cardeck.game.decklist import DeckList


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="cardeck - build, shuffle and draw game decks")

    ap.add_argument(
        "--decklist",
        default=str(Path("decklists") / "starter.yaml"),
        help="Path to deck list YAML",
    )
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    ap.add_argument("--draw", type=int, default=7, help="Cards to draw after shuffling")

    # draw-odds mode
    ap.add_argument("--odds-tag", help="Estimate odds of drawing a card with this tag")
    ap.add_argument("--odds-name", help="Estimate odds of drawing a card with this name")
    ap.add_argument("--trials", type=int, default=10_000, help="Monte Carlo trials for odds")

    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        deck_list = DeckList.from_yaml(args.decklist)
    except FileNotFoundError:
        raise SystemExit(f"Deck list not found: {args.decklist}")
    except (ValueError, TypeError, yaml.YAMLError) as e:
        raise SystemExit(f"Bad deck list {args.decklist}: {e}")

    deck = deck_list.build(rng=random.Random(args.seed))

    print(f"Deck:     {deck_list.name}")
    print(f"Cards:    {deck.deck_count}")
    print(f"Fillers:  {deck.count(EMPTY_CARD_NAME)}")

    # odds mode
    if args.odds_tag or args.odds_name:
        from cardeck.game.sim import draw_odds, has_name, has_tag

        if args.odds_tag:
            predicate = has_tag(args.odds_tag)
            target = f"tag {args.odds_tag!r}"
        else:
            predicate = has_name(args.odds_name)
            target = f"name {args.odds_name!r}"

        try:
            res = draw_odds(
                deck,
                predicate,
                draws=args.draw,
                trials=args.trials,
                seed=args.seed if args.seed is not None else 42,
            )
        except ValueError as e:
            raise SystemExit(str(e))

        print(f"Target:   {target}")
        print(f"Draws:    {res.draws}")
        print(f"Trials:   {res.trials:,}")
        print(f"Hit rate: {100.0 * res.hit_rate:.3f}%")
        return

    deck.shuffle()
    try:
        hand = deck.draw_cards(args.draw)
    except (EmptyDeckError, ValueError) as e:
        raise SystemExit(str(e))

    print(f"Drawn:    {cards_str(hand)}")
    print(f"Left:     {deck.deck_count}")


if __name__ == "__main__":
    main()
