#!/usr/bin/env python3
"""
Minesweeper 3D - Main entry point.

Usage:
    python main.py solve [--size N] [--mines M] [--seed S] [--click x,y,z]
    python main.py search [--seed S] [--attempts N]
    python main.py survey [--boards N]
"""
import argparse
import logging
from typing import List, Optional

from minefield import BoardConfig, Coord3, generate_from_config
from deduction import NoGuessBoardNotFound, Solver, find_no_guess_board, survey


def parse_coord(text: str) -> Coord3:
    """Parse an 'x,y,z' argument."""
    try:
        x, y, z = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected x,y,z but got {text!r}")
    return Coord3(x, y, z)


def resolve_click(args: argparse.Namespace) -> Coord3:
    """Use the given click, or the center of the cube."""
    if args.click is not None:
        return args.click
    center = args.size // 2
    return Coord3(center, center, center)


def solve(args: argparse.Namespace) -> None:
    """Generate one board and print the solver trace."""
    config = BoardConfig(size=args.size, num_mines=args.mines)
    click = resolve_click(args)
    board = generate_from_config(config, click, args.seed)

    print(f"Board: {args.size}^3 with {args.mines} mines, seed {args.seed}")
    print(f"First click: {click}\n")

    steps, solved = Solver().solve_full(board, click)
    for number, step in enumerate(steps, start=1):
        print(f"{number:>4}. {step}")

    print(f"\nStatus: {board.status.name}")
    print(f"Flags: {board.flag_count}/{board.mine_count}")
    print(f"Safe left: {board.safe_left}")
    print("Solved without guessing" if solved else "Needs a guess")


def search(args: argparse.Namespace) -> None:
    """Find the first no-guess seed."""
    config = BoardConfig(size=args.size, num_mines=args.mines)
    click = resolve_click(args)

    try:
        result = find_no_guess_board(config, click, args.seed, args.attempts)
    except NoGuessBoardNotFound as exc:
        print(exc)
        return

    print(f"No-guess seed: {result.seed} (after {result.attempts} attempts)")
    mines = " ".join(str(c) for c in result.board.mine_coords())
    print(f"Mines: {mines}")


def run_survey(args: argparse.Namespace) -> None:
    """Report how often boards are solvable without guessing."""
    config = BoardConfig(size=args.size, num_mines=args.mines)
    click = resolve_click(args)
    seeds = range(args.seed, args.seed + args.boards)

    print(f"Surveying {args.boards} boards ({args.size}^3, {args.mines} mines)...")
    stats = survey(config, click, seeds)

    print(f"  Solve rate: {stats.solve_rate:.1%}")
    print(f"  Solved: {stats.solved}/{stats.boards}")
    print(f"  Avg steps: {stats.avg_steps:.1f}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command."""
    parser.add_argument("--size", type=int, default=6, help="Cube edge length")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=0, help="Layout seed")
    parser.add_argument(
        "--click", type=parse_coord, default=None,
        help="First click as x,y,z (default: center)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log solver passes"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper 3D - Generate and solve cube boards"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    solve_parser = subparsers.add_parser("solve", help="Solve one board")
    add_board_arguments(solve_parser)

    search_parser = subparsers.add_parser(
        "search", help="Find a board solvable without guessing"
    )
    add_board_arguments(search_parser)
    search_parser.add_argument(
        "--attempts", type=int, default=100, help="Seeds to try"
    )

    survey_parser = subparsers.add_parser(
        "survey", help="Measure the no-guess solve rate"
    )
    add_board_arguments(survey_parser)
    survey_parser.add_argument(
        "--boards", type=int, default=100, help="Number of boards"
    )

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG)

    commands = {"solve": solve, "search": search, "survey": run_survey}
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except ValueError as exc:
        parser.exit(2, f"error: {exc}\n")


if __name__ == "__main__":
    main()
