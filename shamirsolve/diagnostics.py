"""Progress reporting for the solver.

The solver only knows about an `Observer`, any callable taking an `Event`.
Nothing it reports is needed to compute the secret.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

Observer = Callable[["Event"], None]

CASE = "case"
POINT = "point"
SELECTED = "selected"
SECRET = "secret"


@dataclass(frozen=True)
class Event:
    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


def silent(event: Event) -> None:
    pass


@dataclass
class Recorder:
    events: List[Event] = field(default_factory=list)

    def __call__(self: "Recorder", event: Event) -> None:
        self.events.append(event)

    def kinds(self: "Recorder") -> List[str]:
        return [event.kind for event in self.events]


class LoggingObserver:
    def __init__(
        self: "LoggingObserver",
        name: str = "",
        logger: logging.Logger = logging.getLogger("shamirsolve.solver"),
    ) -> None:
        self.name = name
        self.logger = logger

    def _prefix(self: "LoggingObserver") -> str:
        return f"[{self.name}] " if self.name else ""

    def __call__(self: "LoggingObserver", event: Event) -> None:
        data = event.data
        if event.kind == CASE:
            self.logger.debug(
                "%sProcessing test case with n=%s, k=%s (polynomial degree %s)",
                self._prefix(),
                data["n"],
                data["k"],
                data["degree"],
            )
        elif event.kind == POINT:
            self.logger.debug(
                "%sPoint %s: (%s, %s) [%s in base %s]",
                self._prefix(),
                data["x"],
                data["x"],
                data["y"],
                data["digits"],
                data["base"],
            )
        elif event.kind == SELECTED:
            self.logger.debug(
                "%sUsing first %s points for interpolation: %s",
                self._prefix(),
                len(data["points"]),
                ", ".join(f"({p.x}, {p.y})" for p in data["points"]),
            )
        elif event.kind == SECRET:
            self.logger.info(
                "%sSecret (constant term): %s", self._prefix(), data["secret"]
            )
        else:
            self.logger.debug("%s%s %s", self._prefix(), event.kind, data)
