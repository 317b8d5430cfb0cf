#!/usr/bin/env python3
"""
Choose a move for a saved Battlesnake game-state document.

Usage:
    python main.py <state.json>

Examples:
    # Default search depth and variant
    python main.py ./states/turn_42.json

    # Deeper lookahead, print the board first
    python main.py ./states/turn_42.json --depth 6 --show-board

    # Compare against the random baseline
    python main.py ./states/turn_42.json --variant random
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from board_codec import BoardDecodeError, decode_move_request
from domain.board import SnakeNotFoundError
from domain.constants import DEFAULT_SEARCH_DEPTH
from players.variant_registry import AVAILABLE_VARIANTS, DEFAULT_VARIANT, get_player_class

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_state(file_path: str) -> dict:
    """Load a game-state document from a local JSON file"""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"State file not found: {file_path}")

    with open(file_path, 'r') as f:
        return json.load(f)


def positive_int(value: str) -> int:
    depth = int(value)
    if depth < 1:
        raise argparse.ArgumentTypeError(f"depth must be at least 1, got {depth}")
    return depth


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Choose a move for a saved Battlesnake game state',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('state_file', help='Path to a game-state JSON document')
    parser.add_argument(
        '--depth',
        type=positive_int,
        # A string default still goes through positive_int
        default=os.getenv("SEARCH_DEPTH") or str(DEFAULT_SEARCH_DEPTH),
        help=f"Search depth in plies (default: SEARCH_DEPTH or {DEFAULT_SEARCH_DEPTH})"
    )
    parser.add_argument(
        '--variant',
        choices=AVAILABLE_VARIANTS,
        default=os.getenv("PLAYER_VARIANT", DEFAULT_VARIANT),
        help='Player variant to use'
    )
    parser.add_argument(
        '--show-board',
        action='store_true',
        help='Print the decoded board before the move'
    )
    args = parser.parse_args(argv)

    # choices is not checked against a PLAYER_VARIANT default
    try:
        player_cls = get_player_class(args.variant)
    except ValueError as e:
        parser.error(str(e))

    try:
        move_request = decode_move_request(load_state(args.state_file))
    except (OSError, json.JSONDecodeError, BoardDecodeError, SnakeNotFoundError) as e:
        logger.error(f"Could not load {args.state_file}: {e}")
        return 1

    if args.show_board:
        print(move_request.board.print_board())

    player = player_cls(move_request.you_id, {"depth": args.depth})
    chosen = player.get_move(move_request.board)

    logger.info(f"{move_request.game_id} MOVE {chosen} (turn {move_request.turn})")
    print(chosen)
    return 0


if __name__ == '__main__':
    sys.exit(main())
