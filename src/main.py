"""
Command line entry point for generating and checking daily boards.

Usage:
    python -m src.main generate --date 2024-06-01
    python -m src.main fill
    python -m src.main show --date 2024-06-01
    python -m src.main validate --date 2024-06-01 cat mop
    python -m src.main --config config.yaml solve --date 2024-06-01 --top 10
"""

import argparse
import sys
from datetime import date as Date

from .game import GameEngine, GameError, filter_cascading_errors, verify_submission
from .generator import AppConfig, GameGenerator, JsonBoardStore, StoredGame, load_config
from .utils.board_renderer import render_board, render_path
from .utils.logging_utils import set_log_level


def _load_game(store: JsonBoardStore, date: str) -> StoredGame:
    game = store.get_game_by_date(date)
    if game is None:
        print(f"Error: no game stored for {date}", file=sys.stderr)
        sys.exit(1)
    return game


def cmd_generate(args, config: AppConfig, engine: GameEngine, store: JsonBoardStore) -> int:
    date = args.date or Date.today().isoformat()

    if store.game_exists_for_date(date):
        game = store.get_game_by_date(date)
        print(f"Game #{game.sequence_number} already exists for {date}")
        return 0

    generator = GameGenerator(engine=engine, config=config.generator)
    game = generator.generate_game_for_date(date, store)

    print(f"Game #{game.sequence_number} for {date} (threshold {game.threshold_score})")
    print(render_board(game.board))
    print(f"{len(game.answers)} answers")
    return 0


def cmd_fill(args, config: AppConfig, engine: GameEngine, store: JsonBoardStore) -> int:
    generator = GameGenerator(engine=engine, config=config.generator)
    created = generator.generate_missing_games(
        store,
        Date.today(),
        days_ahead=config.days_ahead,
        days_back=config.days_back,
    )

    if not created:
        print("No missing games")
    for date in created:
        print(f"Generated {date}")
    return 0


def cmd_show(args, config: AppConfig, engine: GameEngine, store: JsonBoardStore) -> int:
    game = _load_game(store, args.date)

    print(f"Game #{game.sequence_number} for {game.date} (threshold {game.threshold_score})")
    print(render_board(game.board))
    return 0


def cmd_validate(args, config: AppConfig, engine: GameEngine, store: JsonBoardStore) -> int:
    game = _load_game(store, args.date)
    result = verify_submission(engine, game.board, args.words)

    if not result.valid:
        print("Invalid submission:")
        for error in filter_cascading_errors(result.errors):
            print(f"  [{error.code}] {error.message}")
        return 1

    for answer in result.answers:
        path = answer.best_path()
        print(f"{answer.word:<16} {result.scores.get(answer.word, 0):>3}  {render_path(path)}")
    print(f"Total: {result.total_score}")

    _, committed = engine.accept_words_in_order(game.board, result.words)
    if committed:
        letters = ", ".join(f"({tile_id.replace('_', ',')})={letter.upper()}" for tile_id, letter in sorted(committed.items()))
        print(f"Wildcards: {letters}")
    return 0


def cmd_solve(args, config: AppConfig, engine: GameEngine, store: JsonBoardStore) -> int:
    game = _load_game(store, args.date)
    answers = engine.find_all_valid_words(
        game.board,
        min_length=config.generator.min_word_length,
        max_length=config.generator.max_word_length,
    )
    answers.sort(key=lambda a: (-a.score(), a.word))

    print(render_board(game.board))
    for answer in answers[:args.top]:
        print(f"{answer.word:<16} {answer.score():>3}  {render_path(answer.best_path())}")
    print(f"{len(answers)} words on this board")
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "fill": cmd_fill,
    "show": cmd_show,
    "validate": cmd_validate,
    "solve": cmd_solve,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and check daily wildcard word-search boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  wordlist_path: wordlist
  store_dir: games
  log_level: INFO
  generator:
    threshold_score: 40
    generation_attempts: 5
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate and store the board for a date")
    generate.add_argument("--date", help="Date as YYYY-MM-DD (default: today)")

    subparsers.add_parser("fill", help="Generate any missing boards around today")

    show = subparsers.add_parser("show", help="Print a stored board")
    show.add_argument("--date", required=True, help="Date as YYYY-MM-DD")

    validate = subparsers.add_parser("validate", help="Check and score a set of words")
    validate.add_argument("--date", required=True, help="Date as YYYY-MM-DD")
    validate.add_argument("words", nargs="+", help="Words to submit")

    solve = subparsers.add_parser("solve", help="List the best words on a stored board")
    solve.add_argument("--date", required=True, help="Date as YYYY-MM-DD")
    solve.add_argument("--top", type=int, default=10, help="Number of words to list (default: 10)")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    set_log_level(config.log_level)

    try:
        engine = GameEngine.from_file(config.wordlist_path)
    except OSError as e:
        print(f"Error loading word list: {e}", file=sys.stderr)
        return 1

    store = JsonBoardStore(config.store_dir)

    try:
        return COMMANDS[args.command](args, config, engine, store)
    except GameError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
