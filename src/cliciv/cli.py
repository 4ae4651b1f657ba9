"""Command line driver: one invocation, one turn, one save file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .actions import AssignJob, Build, Collect, DischargeJob, Idle, RecruitCitizen
from .errors import CheckError, IterationError, SaveFileError
from .interfaces.cli_dashboard import StateDashboardCLI
from .runtime.config import SEED_BITS
from .state import State
from .vault.save_file import SaveConfig, SaveFile
from .world.buildings import Building
from .world.jobs import Job
from .world.resources import PrimaryResource

logger = logging.getLogger(__name__)

EXIT_ITERATION_FAILED = 1
EXIT_CORRUPTED_SAVE = 2
EXIT_SAVE_ERROR = 3


def _seed(value: str) -> int:
    seed = int(value)
    bound = 1 << (SEED_BITS - 1)
    if not -bound <= seed < bound:
        raise argparse.ArgumentTypeError(f"seed must fit in a signed {SEED_BITS}-bit integer")
    return seed


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _add_action_parsers(parser: argparse.ArgumentParser) -> None:
    actions = parser.add_subparsers(dest="action_name", metavar="ACTION", required=True)
    actions.add_parser("idle", help="Iterates over the game for one turn without action.").set_defaults(action=Idle())
    actions.add_parser("recruit", help="Recruits citizen.").set_defaults(action=RecruitCitizen())

    collect = actions.add_parser("collect", help="Collect primary resources.")
    targets = collect.add_subparsers(dest="target", metavar="RESOURCE", required=True)
    for resource in PrimaryResource:
        name = resource.value.lower()
        targets.add_parser(name, help=f"Collect {name}.").set_defaults(action=Collect(resource))

    build = actions.add_parser("build", help="Transform resources into buildings.")
    targets = build.add_subparsers(dest="target", metavar="BUILDING", required=True)
    for building in Building:
        name = building.value.lower()
        targets.add_parser(name, help=f"Build {building.value}.").set_defaults(action=Build(building))

    jobs = actions.add_parser("jobs", help="Manages jobs.")
    verbs = jobs.add_subparsers(dest="verb", metavar="VERB", required=True)
    assign = verbs.add_parser("assign", help="Assigns job to idle citizen.")
    discharge = verbs.add_parser("discharge", help="Discharges citizen from job.")
    assign_targets = assign.add_subparsers(dest="target", metavar="JOB", required=True)
    discharge_targets = discharge.add_subparsers(dest="target", metavar="JOB", required=True)
    for job in Job:
        name = job.value.lower()
        assign_targets.add_parser(name, help=f"Assign {name} job to idle citizen.").set_defaults(action=AssignJob(job))
        discharge_targets.add_parser(name, help=f"Discharges citizen from {name} job.").set_defaults(
            action=DischargeJob(job)
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cliciv", description="Play a turn-based civilization one command at a time")
    parser.add_argument("--save", type=Path, help="Save file path (defaults to $CLICIV_SAVE or ~/.cliciv)")
    parser.add_argument("--width", type=int, default=80, help="Summary width")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    create = commands.add_parser("create", help="Creates a new game.")
    create.add_argument("--seed", type=_seed, help="Use a fixed seed instead of a random one")
    create.add_argument("--force", action="store_true", help="Overwrite an existing save")

    commands.add_parser("check", help="Check game save integrity.")
    commands.add_parser("show", help="Print the current save summary.")

    advance = commands.add_parser("next", help="Advance in the game.")
    advance.add_argument("-r", "--repeat", type=_positive_int, default=1, help="Repeats the action n times.")
    advance.add_argument("-t", "--trust", action="store_true", help="Do not check save integrity.")
    _add_action_parsers(advance)
    return parser


def _render(state: State, width: int) -> str:
    return StateDashboardCLI(width=width).render(state)


def _create(save: SaveFile, args: argparse.Namespace) -> int:
    if save.exists() and not args.force:
        raise SaveFileError(f"a save already exists at {save.path}; pass --force to overwrite it")
    state = State.genesis(args.seed) if args.seed is not None else State.random_genesis()
    save.write(state)
    print(_render(state, args.width))
    return 0


def _check(save: SaveFile) -> int:
    state = save.read()
    try:
        state.check()
    except CheckError as exc:
        print(f"Save file is corrupted: {exc}.")
        return EXIT_CORRUPTED_SAVE
    print("Save file is ok.")
    return 0


def _next(save: SaveFile, args: argparse.Namespace) -> int:
    state = save.read()
    if not args.trust:
        try:
            state.check()
        except CheckError as exc:
            print(f"Save file is corrupted: {exc}.")
            return EXIT_CORRUPTED_SAVE

    try:
        new_state = state.repeat(args.repeat, args.action)
    except IterationError as exc:
        logger.info("rejected %s x%d: %s", args.action, args.repeat, exc)
        print(f"Failed to apply action: {exc}")
        return EXIT_ITERATION_FAILED

    save.write(new_state)
    print(_render(new_state, args.width))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    save = SaveFile(SaveConfig.resolve(args.save))
    try:
        if args.command == "create":
            return _create(save, args)
        if args.command == "check":
            return _check(save)
        if args.command == "show":
            print(_render(save.read(), args.width))
            return 0
        return _next(save, args)
    except SaveFileError as exc:
        print(f"Error: {exc}")
        return EXIT_SAVE_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
