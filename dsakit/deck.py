"""Counting how many pile-dealing rounds return a deck to its original order."""

from __future__ import annotations

import argparse
from typing import Sequence

PILE_PATTERN = (3, 4, 5)


def deal_round(deck: Sequence[int], piles: int) -> list[int]:
    """Deal ``deck`` face down into ``piles`` piles and gather them back.

    Cards go to the piles in turn, each landing on top of its pile; the
    piles are then joined first to last, each read from the top down.
    """
    if piles < 1:
        raise ValueError(f"piles must be positive, got {piles}")
    stacks: list[list[int]] = [[] for _ in range(piles)]
    for position, card in enumerate(deck):
        stacks[position % piles].append(card)
    return [card for stack in stacks for card in reversed(stack)]


def is_original_order(deck: Sequence[int]) -> bool:
    """Return whether ``deck`` reads 0, 1, 2, ... from the top."""
    return all(card == position for position, card in enumerate(deck))


def rounds_to_restore(card_count: int, pattern: Sequence[int] = PILE_PATTERN) -> int:
    """Return how many rounds restore a deck of ``card_count`` cards.

    Round pile counts follow ``pattern`` cyclically. At least one round is
    always dealt.
    """
    if card_count < 0:
        raise ValueError(f"card_count must be non-negative, got {card_count}")
    if not pattern:
        raise ValueError("pattern must not be empty")
    if any(piles < 1 for piles in pattern):
        raise ValueError("every pile count must be positive")
    deck = list(range(card_count))
    rounds = 0
    while True:
        deck = deal_round(deck, pattern[rounds % len(pattern)])
        rounds += 1
        if is_original_order(deck):
            return rounds


def main(argv: list[str] | None = None) -> int:
    """Print how many rounds restore a deck of the given size."""
    parser = argparse.ArgumentParser(
        prog="deck", description="Count dealing rounds that restore a deck."
    )
    parser.add_argument("cards", type=int, help="number of cards in the deck")
    parser.add_argument(
        "--verbose", action="store_true", help="print the deck after every round"
    )
    args = parser.parse_args(argv)
    if args.cards < 0:
        parser.error("number of cards must be non-negative")
    if args.verbose:
        deck = list(range(args.cards))
        print("original deck order:")
        print(" ".join(map(str, deck)))
        rounds = 0
        while True:
            deck = deal_round(deck, PILE_PATTERN[rounds % len(PILE_PATTERN)])
            rounds += 1
            print("Current deck order:")
            print(" ".join(map(str, deck)))
            if is_original_order(deck):
                break
    else:
        rounds = rounds_to_restore(args.cards)
    print(f"Total round needed: {rounds}")
    return 0