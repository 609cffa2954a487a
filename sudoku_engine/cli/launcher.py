"""Command line front end."""
import argparse
import os
import sys
from typing import Callable, List, Optional

from sudoku_engine.common.config import SudokuConfig, load_config
from sudoku_engine.common.constants import CONFIG_PATH_ENV_VAR, GameStatus
from sudoku_engine.common.generator import SudokuGenerator
from sudoku_engine.common.grid import grid_from_values, grid_to_values
from sudoku_engine.common.judge import find_conflicts
from sudoku_engine.game.render import parse_values, render_grid, render_hint, render_values
from sudoku_engine.game.session import DIRECTIONS, GameSession
from sudoku_engine.hints import find_hint
from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)

PLAY_HELP = """Commands:
  select R C         select the cell at row R, column C (1-based)
  up|down|left|right move the selection
  set V              write V into the selected cell
  note V             toggle the pencil mark V in the selected cell
  erase              clear the selected cell
  hint               suggest a move
  apply              apply the last hint
  solve              fill in the solution
  pause | resume     pause or resume the timer
  time               show the timer (toggle seconds with `time s`)
  new                start a new game
  help               show this message
  quit               leave the game"""


def get_config(args: argparse.Namespace) -> SudokuConfig:
    """Load the config file (if any) and apply command line overrides."""
    config_path = args.config or os.environ.get(CONFIG_PATH_ENV_VAR)
    config = load_config(config_path) if config_path else SudokuConfig()
    if args.size is not None:
        config.game.grid_size = args.size
    if args.difficulty is not None:
        config.game.difficulty = args.difficulty
    if args.seed is not None:
        config.game.seed = args.seed
    return config.check_and_update()


def new(args: argparse.Namespace) -> int:
    config = get_config(args)
    game_settings = config.game
    generator = SudokuGenerator(game_settings.grid_size, game_settings.seed)
    game = generator.generate(game_settings.difficulty)
    print(render_grid(game.grid, game_settings.grid_size))
    print()
    print(f"puzzle:   {render_values(grid_to_values(game.grid))}")
    if args.show_solution:
        print(f"solution: {render_values(game.solution)}")
    return 0


def hint(args: argparse.Namespace) -> int:
    values = parse_values(args.grid)
    solution = parse_values(args.solution)
    size = len(values)
    if len(solution) != size or any(0 in row for row in solution):
        raise ValueError("The solution must be a filled grid of the same size as the puzzle")
    grid = grid_from_values(values)
    print(render_hint(find_hint(grid, solution, size)))
    return 0


def _show(session: GameSession, output: Callable[[str], None]) -> None:
    selected = None
    if session.selected_cell is not None:
        selected = (session.selected_row, session.selected_col)
    output(
        render_grid(
            session.grid,
            session.size,
            selected=selected,
            conflicts=find_conflicts(session.grid, session.size),
        )
    )
    output(f"[{session.settings.difficulty.value}] {session.timer_text}")


def run_command(session: GameSession, line: str, output: Callable[[str], None]) -> bool:
    """Run one `play` command. Returns False when the player quits."""
    parts = line.strip().lower().split()
    if not parts:
        return True
    cmd, rest = parts[0], parts[1:]

    if cmd in ("quit", "exit", "q"):
        return False
    if cmd == "help":
        output(PLAY_HELP)
        return True
    if cmd == "time":
        if rest == ["s"]:
            session.toggle_seconds_display()
        output(session.timer_text)
        return True

    if cmd == "select" and len(rest) == 2:
        session.select_cell(int(rest[0]) - 1, int(rest[1]) - 1)
    elif cmd in DIRECTIONS:
        session.move_selection(cmd)
    elif cmd == "set" and len(rest) == 1:
        session.enter_number(int(rest[0]))
    elif cmd == "note" and len(rest) == 1:
        session.toggle_note(int(rest[0]))
    elif cmd == "erase":
        session.erase_cell()
    elif cmd == "hint":
        output(render_hint(session.request_hint()))
        return True
    elif cmd == "apply":
        session.apply_hint()
    elif cmd == "solve":
        session.solve()
    elif cmd == "pause":
        session.pause()
        output("Paused.")
        return True
    elif cmd == "resume":
        session.resume()
    elif cmd == "new":
        session.new_game()
    else:
        output(f"Unknown command: {line.strip()!r}, type `help` for the list of commands.")
        return True

    _show(session, output)
    if session.status == GameStatus.SOLVED:
        output(session.completion_message())
    elif session.status == GameStatus.INCORRECT:
        output("The grid is full but something is wrong. Keep trying!")
    return True


def play(
    args: argparse.Namespace,
    read: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    config = get_config(args)
    session = GameSession(config.game)
    _show(session, output)
    output("Type `help` for the list of commands.")
    while True:
        try:
            line = read("> ")
        except EOFError:
            break
        try:
            if not run_command(session, line, output):
                break
        except ValueError as e:
            output(f"Error: {e}")
    return 0


def _add_game_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file.")
    parser.add_argument(
        "--size", type=int, default=None, choices=[4, 9], help="Grid size, 4 or 9."
    )
    parser.add_argument(
        "--difficulty",
        type=str.lower,
        default=None,
        choices=["easy", "medium", "hard"],
        help="Puzzle difficulty.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible puzzles.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Print a new puzzle.")
    _add_game_options(new_parser)
    new_parser.add_argument(
        "--show-solution", action="store_true", help="Also print the solution."
    )
    new_parser.set_defaults(func=new)

    hint_parser = subparsers.add_parser("hint", help="Suggest a move for a puzzle.")
    hint_parser.add_argument(
        "--grid", type=str, required=True, help="Puzzle rows separated by `/`, `.` for empty."
    )
    hint_parser.add_argument(
        "--solution", type=str, required=True, help="Solution rows separated by `/`."
    )
    hint_parser.set_defaults(func=hint)

    play_parser = subparsers.add_parser("play", help="Play in the terminal.")
    _add_game_options(play_parser)
    play_parser.set_defaults(func=play)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
