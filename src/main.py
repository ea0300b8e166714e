"""
Main entry point for playing a round in the terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --words words.txt --output results/round.json --verbose

Enter a path as space-separated row,col pairs (e.g. "0,0 0,1 1,2") to select
those tiles and submit them. Other commands: "pause", "quit".
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

import yaml

from .core import GridCell, build_lexicon, find_words, load_word_list
from .environment import GameConfig, Round, RoundResult


def load_config(config_path: str) -> GameConfig:
    """Load round configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def parse_path(text: str) -> List[GridCell]:
    """
    Parse "r,c r,c ..." into grid cells.

    Raises:
        ValueError: If a pair is malformed
    """
    cells = []
    for pair in text.split():
        parts = pair.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected row,col but got '{pair}'")
        try:
            cells.append(GridCell(int(parts[0]), int(parts[1])))
        except ValueError:
            raise ValueError(f"Row and column must be integers: '{pair}'") from None
    return cells


def run_round(
    game_round: Round,
    commands: Iterable[str],
    verbose: bool = False,
    clock: Callable[[], float] = time.monotonic
) -> RoundResult:
    """
    Play a round from a stream of text commands.

    The round clock advances by wall time between commands.

    Args:
        game_round: The round to play
        commands: Lines of player input
        verbose: Print the board after every move
        clock: Monotonic time source in seconds

    Returns:
        RoundResult when the input ends, the player quits or time runs out
    """
    end_reason = "Input ended"
    last = clock()

    print(game_round.board.render())

    for line in commands:
        now = clock()
        for event in game_round.tick(now - last):
            if event == "WARNING":
                print(f"⚠ {game_round.timer.remaining:.0f} seconds left")
        last = now

        if game_round.is_over:
            print("Time up!")
            end_reason = "Time up"
            break

        command = line.strip().lower()
        if not command:
            continue
        if command in ("quit", "q"):
            end_reason = "Quit by player"
            break
        if command == "pause":
            running = game_round.toggle_pause()
            print("Resumed" if running else "Paused")
            continue

        try:
            cells = parse_path(command)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            continue

        try:
            result = game_round.submit_path(cells)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            continue

        if result.accepted:
            print(f"✓ {result.word.upper()} +{result.score} (total {game_round.score})")
        else:
            print(f"✗ {result.message}")

        if verbose:
            print(game_round.board.render())
            print(f"Words: {game_round.word_count}  Time left: {game_round.timer.remaining:.0f}s")

    return game_round.get_result(end_reason=end_reason)


def _prompt_lines() -> Iterator[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Play a round of the letter-grid word game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  rows: 5
  cols: 5
  seed: 42
  round_seconds: 180
  warning_seconds: 10
  min_word_length: 3
  word_list: words.txt
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--words", "-w",
        help="Path to a newline-separated word list (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the board (overrides config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the round result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the board after every move"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.words:
            overrides["word_list"] = args.words
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    source = load_word_list(config.word_list)
    if source.used_fallback:
        print(f"Warning: using fallback word list ({source.fallback_reason})", file=sys.stderr)
    lexicon = build_lexicon(source)

    if args.verbose:
        print(f"Dictionary: {len(lexicon)} words from {source.source}")
        print(f"Round: {config.round_seconds:.0f}s on a {config.rows}x{config.cols} board")
        print("-" * 40)

    game_round = Round.create(config=config, lexicon=lexicon)

    try:
        result = run_round(game_round, _prompt_lines(), verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nRound interrupted by user")
        result = game_round.get_result(end_reason="Interrupted by user")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2))
        if args.verbose:
            print(f"Results saved to: {output_path}")

    missed = sorted(
        set(find_words(game_round.board.letters, lexicon, config.min_word_length)) - game_round.submitted
    )

    print()
    print("=== Round Summary ===")
    print(f"Words: {result.word_count}")
    print(f"Score: {result.score}")
    print(f"End reason: {result.end_reason}")
    if missed:
        print(f"Missed: {', '.join(missed)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
