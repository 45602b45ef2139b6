#!/usr/bin/env python3
"""
Decide a move for a saved Battlesnake move request.

Reads a move request JSON (as the engine would POST to /move) from a file
or stdin, prints the board, the per-direction space scores, the stage that
produced the final candidates and the chosen move.

Usage:
    python backend/cli/decide_move.py request.json [--seed 7] [--variant random] [--json]
    cat request.json | python backend/cli/decide_move.py -
"""

import os
import sys
import json
import random
import argparse
from typing import Optional

# Add parent directory to path to import the backend packages
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from domain.errors import MalformedSnapshotError  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from engine.decision import decide_with_trace  # noqa: E402
from players.variant_registry import AVAILABLE_VARIANTS, DEFAULT_VARIANT, get_player_class  # noqa: E402


def load_request(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, 'r') as f:
        return json.load(f)


def describe_flood_fill(game_state: GameState, rng: random.Random) -> str:
    trace = decide_with_trace(game_state, rng)

    lines = [game_state.print_board(), ""]
    lines.append(f"Health: {game_state.health}  Length: {game_state.you.length}")
    lines.append("Space scores:")
    for direction, score in trace.scores.items():
        marker = "*" if score >= game_state.you.length else " "
        lines.append(f"  {marker} {direction.value:<5} {score}")
    for candidates in trace.stages:
        options = ", ".join(d.value for d in candidates.ordered()) or "none"
        lines.append(f"Stage {candidates.stage.value}: {options}")
    lines.append(f"Move: {trace.move.value}")
    return "\n".join(lines)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Decide a move for a saved move request.")
    parser.add_argument("request", type=str, help="Path to a move request JSON file, or '-' for stdin")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random tie-break")
    parser.add_argument("--variant", type=str, default=DEFAULT_VARIANT, choices=AVAILABLE_VARIANTS,
                        help="Player variant to ask")
    parser.add_argument("--json", action="store_true", help="Only print the /move response body")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)

    try:
        game_state = GameState.from_request(load_request(args.request))
    except OSError as e:
        print(f"Could not read move request: {e}", file=sys.stderr)
        return 2
    except (MalformedSnapshotError, json.JSONDecodeError) as e:
        print(f"Malformed move request: {e}", file=sys.stderr)
        return 2

    if args.variant == DEFAULT_VARIANT and not args.json:
        print(describe_flood_fill(game_state, rng))
        return 0

    player = get_player_class(args.variant)(rng=rng)
    direction = player.get_move(game_state)

    if args.json:
        print(json.dumps({"move": direction.value}))
    else:
        print(game_state.print_board())
        print(f"\nMove ({args.variant}): {direction.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
