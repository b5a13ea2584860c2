"""Recover the secret hidden behind each test case file.

Every file is solved on its own: a broken file is reported and the others are
still processed. A summary of all the cases is printed at the end.
"""

import logging
import sys
from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from shamirsolve.case import SolverCfg, TestCase, solve
from shamirsolve.diagnostics import LoggingObserver
from shamirsolve.errors import ReconstructionError
from shamirsolve.samples import load_samples

logger = logging.getLogger("shamirsolve")


@dataclass
class Outcome:
    name: str
    secret: Optional[int] = None
    error: Optional[ReconstructionError] = None

    @property
    def ok(self: "Outcome") -> bool:
        return self.error is None


def run_case(name: str, load: Callable[[], TestCase], cfg: SolverCfg) -> Outcome:
    try:
        secret = solve(load(), LoggingObserver(name), cfg)
    except ReconstructionError as err:
        logger.error("%s: %s", name, err)
        return Outcome(name, error=err)
    return Outcome(name, secret=secret)


def report(outcomes: Sequence[Outcome]) -> None:
    print(
        tabulate(
            [
                (o.name, "ok" if o.ok else type(o.error).__name__, o.secret, o.error)
                for o in outcomes
            ],
            ("Case", "Status", "Secret", "Error"),
            disable_numparse=True,
            missingval="-",
        )
    )


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="shamirsolve", description=__doc__)
    parser.add_argument(
        "paths", nargs="*", type=Path, help="JSON test case files, one case per file."
    )
    parser.add_argument(
        "--samples", action="store_true", help="Also solve the built-in sample cases."
    )
    parser.add_argument(
        "--cross-validate",
        action="store_true",
        help="Check that every k-subset of the shares gives the same secret.",
    )
    parser.add_argument(
        "--config", type=Path, help="JSON file with the solver configuration."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show every decoded point."
    )
    return parser


def _load_cfg(path: Optional[Path]) -> SolverCfg:
    if path is None:
        return SolverCfg()
    with path.open() as fd:
        return SolverCfg.from_json(fd.read())


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.paths and not args.samples:
        parser.print_usage(sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    try:
        cfg = _load_cfg(args.config)
    except (OSError, ValueError) as err:
        parser.error(f"invalid configuration {args.config}: {err}")
    if args.cross_validate:
        cfg.cross_validate = True

    jobs: List[Tuple[str, Callable[[], TestCase]]] = []
    if args.samples:
        samples = load_samples()
        jobs.extend((name, lambda case=case: case) for name, case in samples.items())
    jobs.extend(
        (str(path), lambda path=path: TestCase.from_file(path)) for path in args.paths
    )

    outcomes = [run_case(name, load, cfg) for name, load in jobs]
    report(outcomes)
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
