"""Simple bot arena for Five Hundred."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence

from five_hundred.cards import Card
from five_hundred.game import Game, Phase, apply, create_game

from .base import BotStrategy
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "base": BotStrategy,
    "random": RandomBot,
}


def seeded_shuffle(seed: Optional[int]):
    rng = random.Random(seed)

    def shuffle(cards: List[Card]) -> List[Card]:
        return rng.sample(cards, k=len(cards))

    return shuffle


def _next_action(game: Game, bots: Sequence[BotStrategy]):
    player = game.state.priority
    assert player is not None
    bot = bots[game.state.seat(player)]
    if game.phase is Phase.BIDDING:
        return bot.offer_bid(game, player)
    if game.phase is Phase.KITTY:
        return player.discard(bot.discard(game, player))
    if game.phase is Phase.TRICK:
        return player.play(bot.play_card(game, player))
    raise RuntimeError(f"No bot action for phase {game.phase}.")


def play_game(game: Game, bots: Sequence[BotStrategy], *, max_rounds: int = 200) -> Game:
    """Drive ``game`` with ``bots`` until it completes or ``max_rounds`` are dealt."""
    if len(bots) != len(game.players):
        raise ValueError("Need exactly one bot per seat.")
    current_round = 0
    while not game.is_complete() and game.state.round_number <= max_rounds:
        if game.state.round_number != current_round:
            current_round = game.state.round_number
            logger.debug("Round %d dealt, dealer %s", current_round, game.state.dealer)
            for player, bot in zip(game.players, bots):
                bot.on_round_start(game, player)
        game = apply(game, _next_action(game, bots))
    return game


def run_match(
    bots: Sequence[BotStrategy],
    *,
    seed: Optional[int] = None,
    max_rounds: int = 200,
) -> dict:
    game = create_game(len(bots), shuffle=seeded_shuffle(seed))
    game = play_game(game, bots, max_rounds=max_rounds)
    history = [
        {
            "round": result.round_number,
            "bidding_team": result.bidding_team,
            "contract_success": result.contract_success,
            "scores": result.new_scores,
        }
        for result in game.state.results
    ]
    return {
        "scores": list(game.state.scores),
        "complete": game.is_complete(),
        "rounds": game.state.round_number,
        "history": history,
    }


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot match.")
    parser.add_argument("--players", type=int, default=4, choices=(3, 4, 5, 6))
    parser.add_argument("--bot", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-rounds", type=int, default=200)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    bot_cls = BOT_REGISTRY[args.bot]
    if bot_cls is RandomBot:
        bots = [RandomBot(seed=args.seed + seat) for seat in range(args.players)]
    else:
        bots = [bot_cls() for _ in range(args.players)]
    results = run_match(bots, seed=args.seed, max_rounds=args.max_rounds)

    print(f"Scores after {results['rounds']} rounds: {results['scores']}")
    successes = sum(1 for entry in results["history"] if entry["contract_success"])
    print(f"Contract success rate: {successes}/{len(results['history'])}")
    if not results["complete"]:
        print("Match stopped before any team reached the score limit.")


if __name__ == "__main__":
    main()
