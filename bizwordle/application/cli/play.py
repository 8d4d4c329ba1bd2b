# bizwordle/application/cli/play.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Optional
import argparse
import logging
import sys

import pandas as pd

from bizwordle.application.game_service import GameService
from bizwordle.application.ports import GameConfig
from bizwordle.domain.models.company import CompanyRecord
from bizwordle.domain.models.guess_evaluation import GuessEvaluation
from bizwordle.domain.services.guess_evaluator import hint_arrow
from bizwordle.infrastructure.clipboard.system_clipboard import NullClipboard, SystemClipboard
from bizwordle.infrastructure.config.paths import RepoPaths, find_repo_root
from bizwordle.infrastructure.repositories.csv_company_repository import CsvCompanyRepository
from bizwordle.infrastructure.repositories.json_marker_repository import JsonMarkerRepository

HEADERS = ["Name", "Industry", "Founded", "Headquarters", "Fortune 500 Rank", "CEO"]

HELP = """Commands:
  <text>   search companies by name (a single match is guessed right away)
  <n>      guess result number n from the last search
  :give    give up (after at least one guess)
  :new     start a new game
  :share   copy the result summary (game over only)
  :help    show this help
  :quit    leave"""


def instructions(max_guesses: int) -> str:
    return (
        f"Guess the mystery business in {max_guesses} tries or less!\n"
        "A ✓ marks a match with the mystery business.\n"
        "For numeric values, arrows indicate if the mystery business's value is higher (↑) or lower (↓)."
    )


def render_table(evaluations: List[GuessEvaluation]) -> str:
    rows = []
    for ev in evaluations:
        row = [ev.name]
        for fr in ev.fields:
            mark = " ✓" if fr.match else (" " + hint_arrow(fr.hint) if fr.hint else "")
            row.append(f"{fr.value}{mark}")
        rows.append(row)
    return pd.DataFrame(rows, columns=HEADERS).to_string(index=False)


def run_game(
    service: GameService,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Interactive loop over an already started service; returns when the
    player quits or input ends.
    """
    read = read or input
    write = write or print

    if service.show_instructions:
        write(instructions(service.config.max_guesses))
        service.dismiss_instructions()
    write("Guess these business attributes: " + " | ".join(HEADERS[1:]))
    write("Type :help for commands.")

    listing: List[CompanyRecord] = []

    while True:
        st = service.state
        prompt = "> " if st.is_over else f"Guess {len(st.guesses) + 1}/{st.max_guesses} > "
        try:
            line = read(prompt).strip()
        except EOFError:
            write("")
            return
        if not line:
            continue

        cmd = line.lower()
        if cmd in (":quit", ":q", ":exit"):
            return
        if cmd == ":help":
            write(HELP)
            continue
        if cmd == ":new":
            service.new_game()
            listing = []
            write("New game started.")
            continue
        if cmd == ":share":
            if not service.state.is_over:
                write("Finish the game first.")
                continue
            outcome = service.share()
            write(outcome.message)
            if not outcome.copied:
                write(outcome.text)
            continue
        if cmd == ":give":
            if service.state.is_over:
                write("Game over. Type :new to play again or :share to copy your result.")
            elif service.give_up():
                _game_over(service, write)
            else:
                write("You can give up after your first guess.")
            continue

        if st.is_over:
            write("Game over. Type :new to play again or :share to copy your result.")
            continue

        if line.isdecimal() and listing:
            idx = int(line) - 1
            if not 0 <= idx < len(listing):
                write(f"Pick a number between 1 and {len(listing)}.")
                continue
            _submit(service, listing[idx], write)
            listing = []
            continue

        candidates = service.search(line)
        exact = [c for c in candidates if c.name.lower() == cmd]
        if exact:
            candidates = exact
        if not candidates:
            write(f"No unguessed company matches {line!r}.")
            listing = []
        elif len(candidates) == 1:
            _submit(service, candidates[0], write)
            listing = []
        else:
            listing = candidates
            for i, c in enumerate(candidates, 1):
                write(f"  {i}. {c.name}")


def _submit(service: GameService, record: CompanyRecord, write: Callable[[str], None]) -> None:
    accepted, _ = service.guess(record)
    if not accepted:
        write(f"{record.name} was already guessed.")
        return
    write(render_table(service.evaluations()))
    if service.state.is_over:
        _game_over(service, write)


def _game_over(service: GameService, write: Callable[[str], None]) -> None:
    write("")
    write(f"The mystery business was: {service.state.target.name}")
    write(service.summary())
    write("Type :share to copy your result or :new to play again.")


def build_service(args: argparse.Namespace, logger: logging.Logger) -> GameService:
    root = Path(args.root).resolve() if args.root else find_repo_root(Path.cwd())
    paths = RepoPaths.from_root(root)
    dataset = Path(args.dataset) if args.dataset else paths.dataset
    marker = Path(args.state_file) if args.state_file else paths.marker

    return GameService(
        companies_repo=CsvCompanyRepository(dataset),
        marker_repo=JsonMarkerRepository(marker),
        clipboard=NullClipboard() if args.no_clipboard else SystemClipboard(),
        config=GameConfig(max_guesses=args.max_guesses),
        logger=logger,
    )


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Biz Wordle: guess the mystery Fortune 500 company.")
    ap.add_argument("--root", type=str, default=None, help="Project root (directory that contains data/companies).")
    ap.add_argument("--dataset", type=str, default=None, help="Override company CSV path.")
    ap.add_argument("--state-file", type=str, default=None, help="Override first-play marker file.")
    ap.add_argument("--max-guesses", type=int, default=GameConfig().max_guesses)
    ap.add_argument("--no-clipboard", action="store_true", help="Print share text instead of copying it.")
    ap.add_argument("--verbose", "-v", action="count", default=0,
                    help="-v INFO, -vv DEBUG (DEBUG reveals the target)")
    args = ap.parse_args(argv)

    # Logging setup
    level = logging.WARNING
    if args.verbose == 1: level = logging.INFO
    elif args.verbose >= 2: level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    logger = logging.getLogger("bizwordle")

    if args.max_guesses < 1:
        ap.error("--max-guesses must be >= 1")

    try:
        service = build_service(args, logger)
        service.start()
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Could not load companies: {e}")
        print("   Tip: run with --root <path-to-your-repo-root> or --dataset <csv>")
        sys.exit(2)

    try:
        run_game(service)
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
