#!/usr/bin/env python3
"""
Difficulty Tournament System
Round-robin matches between the Dama AI difficulty levels.
"""

import argparse
import os
import random
import time
from collections import defaultdict
from dataclasses import dataclass
from itertools import permutations
from typing import Dict, List, Optional

import numpy as np
from dotenv import load_dotenv
from loguru import logger

from .config import GameConfig, GameMode
from .game import DamaGame
from .piece import Side
from .strategy import Difficulty, get_ai_move


@dataclass(frozen=True)
class MatchRecord:
    """Result of one AI-vs-AI game."""

    first: Difficulty
    second: Difficulty
    winner: Optional[Side]
    plies: int

    @property
    def winning_difficulty(self) -> Optional[Difficulty]:
        if self.winner is None:
            return None
        return self.first if self.winner is Side.FIRST else self.second


def seed_environ(seed_value: Optional[int] = None):
    random.seed(seed_value)
    np.random.seed(seed_value)


def run_match(
    first: Difficulty,
    second: Difficulty,
    max_plies: int = 200,
    rng: Optional[random.Random] = None,
) -> MatchRecord:
    """
    Play ``first`` (moving first) against ``second``.

    The game is a draw (``winner=None``) if nobody has won after
    ``max_plies`` plies.
    """
    rng = rng if rng is not None else random.Random()
    game = DamaGame(GameConfig(mode=GameMode.TWO))
    levels = {Side.FIRST: first, Side.SECOND: second}

    plies = 0
    while not game.is_over and plies < max_plies:
        side = game.current_side
        move = get_ai_move(game.board, side, levels[side], rng, moves=game.legal_moves())
        if move is None:
            break
        game.play_move(move)
        plies += 1

    return MatchRecord(first, second, game.winner, plies)


class DifficultyTournament:
    """Round-robin between difficulty levels, both colour assignments."""

    def __init__(
        self,
        difficulties: Optional[List[Difficulty]] = None,
        games_per_matchup: Optional[int] = None,
        max_plies: Optional[int] = None,
        seed: Optional[int] = None,
        verbose: Optional[bool] = None,
    ):
        # Load configuration from .env
        load_dotenv()
        if difficulties is None:
            selected = os.getenv("SELECTED_DIFFICULTIES", "").strip()
            if selected:
                difficulties = [Difficulty.parse(s) for s in selected.split(",")]
            else:
                difficulties = list(Difficulty)
        self.difficulties = list(dict.fromkeys(difficulties))
        self.games_per_matchup = (
            games_per_matchup
            if games_per_matchup is not None
            else int(os.getenv("GAMES_PER_MATCHUP", 4))
        )
        self.max_plies = (
            max_plies if max_plies is not None else int(os.getenv("MAX_PLIES_PER_GAME", 200))
        )
        self.seed = seed if seed is not None else int(os.getenv("TOURNAMENT_SEED", 42))
        self.verbose = (
            verbose
            if verbose is not None
            else os.getenv("VERBOSE_OUTPUT", "true").lower() == "true"
        )
        self.matchups = list(permutations(self.difficulties, 2))
        self.records: List[MatchRecord] = []

    def run(self) -> Dict[str, Dict[str, float]]:
        """Play every matchup and return per-difficulty statistics."""
        seed_environ(self.seed)
        rng = random.Random(self.seed)

        logger.info("🏆 DAMA DIFFICULTY TOURNAMENT 🏆")
        logger.info("=" * 60)
        logger.info(f"   • Difficulties: {', '.join(d.value for d in self.difficulties)}")
        logger.info(f"   • Games per matchup: {self.games_per_matchup}")
        logger.info(f"   • Maximum {self.max_plies} plies per game")

        start_time = time.time()
        for idx, (first, second) in enumerate(self.matchups, 1):
            logger.info(
                f"Matchup {idx}/{len(self.matchups)}: "
                f"{first.value.upper()} (first) vs {second.value.upper()} (second)"
            )
            for game_num in range(self.games_per_matchup):
                record = run_match(first, second, self.max_plies, rng)
                self.records.append(record)
                if self.verbose:
                    outcome = record.winning_difficulty
                    label = outcome.value.upper() if outcome else "DRAW"
                    logger.info(f"  Game {game_num + 1}: {label} in {record.plies} plies")

        summary = self.summary()
        elapsed = time.time() - start_time
        self._display_summary(summary, elapsed)
        return summary

    def summary(self) -> Dict[str, Dict[str, float]]:
        stats: Dict[str, Dict[str, float]] = defaultdict(
            lambda: {"games": 0, "wins": 0, "draws": 0, "losses": 0}
        )
        for record in self.records:
            for level in (record.first, record.second):
                entry = stats[level.value]
                entry["games"] += 1
                if record.winning_difficulty is None:
                    entry["draws"] += 1
                elif record.winning_difficulty is level:
                    entry["wins"] += 1
                else:
                    entry["losses"] += 1
        for level, entry in stats.items():
            plies = [
                r.plies for r in self.records if level in (r.first.value, r.second.value)
            ]
            entry["win_rate"] = entry["wins"] / entry["games"] if entry["games"] else 0.0
            entry["avg_plies"] = float(np.mean(plies)) if plies else 0.0
        return dict(stats)

    def _display_summary(self, summary: Dict[str, Dict[str, float]], elapsed: float):
        logger.info("\n📊 Final Standings:")
        logger.info("-" * 60)
        ranking = sorted(summary.items(), key=lambda kv: kv[1]["win_rate"], reverse=True)
        for rank, (level, entry) in enumerate(ranking, 1):
            logger.info(
                f"{rank}. {level.upper():<7} wins={int(entry['wins'])} "
                f"draws={int(entry['draws'])} losses={int(entry['losses'])} "
                f"win_rate={entry['win_rate']:.1%} avg_plies={entry['avg_plies']:.1f}"
            )
        logger.info(f"⏱️  {len(self.records)} games in {elapsed:.1f}s")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Round-robin between Dama AI difficulties")
    parser.add_argument(
        "--difficulties",
        type=str,
        default=None,
        help="Comma separated difficulties to include (default: all)",
    )
    parser.add_argument("--games", type=int, default=None, help="Games per matchup")
    parser.add_argument("--max-plies", type=int, default=None, help="Ply cap per game")
    parser.add_argument("--seed", type=int, default=None, help="Tournament seed")
    parser.add_argument("--quiet", action="store_true", help="Only log the summary")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    difficulties = (
        [Difficulty.parse(s) for s in args.difficulties.split(",")]
        if args.difficulties
        else None
    )
    tournament = DifficultyTournament(
        difficulties=difficulties,
        games_per_matchup=args.games,
        max_plies=args.max_plies,
        seed=args.seed,
        verbose=False if args.quiet else None,
    )
    tournament.run()


if __name__ == "__main__":
    main()
