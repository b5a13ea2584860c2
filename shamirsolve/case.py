"""Test cases: a threshold `k`, an upper index `n` and a sparse set of shares
whose values are written in arbitrary bases.

A test case is stored as JSON:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }
"""

import json
import logging
from dataclasses import dataclass, field
from itertools import combinations, islice
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from shamirsolve import diagnostics, encoding
from shamirsolve.diagnostics import Event, Observer
from shamirsolve.errors import (
    InconsistentSharesError,
    InvalidBaseError,
    InvalidDigitError,
    MalformedTestCaseError,
    NonIntegerResultError,
)
from shamirsolve.sharing import Point, interpolate, interpolate_at_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    index: int
    base: int
    digits: str

    def decode(self: "Share") -> int:
        try:
            return encoding.decode(self.digits, self.base)
        except (InvalidDigitError, InvalidBaseError) as err:
            err.index = self.index
            raise


def _positive_int(raw: Any, name: str, source: Optional[str]) -> int:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise MalformedTestCaseError(
            f"`{name}` must be an integer, got {raw!r}", source
        )
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise MalformedTestCaseError(
            f"`{name}` must be an integer, got {raw!r}", source
        ) from None
    if value < 1:
        raise MalformedTestCaseError(
            f"`{name}` must be positive, got {value}", source
        )
    return value


@dataclass
class TestCase:
    n: int
    k: int
    shares: Dict[int, Share] = field(default_factory=dict)

    # Not a pytest test class despite the name.
    __test__ = False

    @staticmethod
    def from_dict(data: Any, source: Optional[str] = None) -> "TestCase":
        if not isinstance(data, dict):
            raise MalformedTestCaseError("A test case must be a JSON object", source)
        keys = data.get("keys")
        if not isinstance(keys, dict):
            raise MalformedTestCaseError("Missing `keys` section", source)
        for name in ("n", "k"):
            if name not in keys:
                raise MalformedTestCaseError(f"Missing `keys.{name}`", source)
        n = _positive_int(keys["n"], "keys.n", source)
        k = _positive_int(keys["k"], "keys.k", source)
        if n < k:
            raise MalformedTestCaseError(
                f"`keys.n` ({n}) must be at least `keys.k` ({k})", source
            )
        shares = {}
        for name, entry in data.items():
            if name == "keys":
                continue
            index = _positive_int(name, "share index", source)
            if index in shares:
                raise MalformedTestCaseError(f"Share {index} is defined twice", source)
            if not isinstance(entry, dict) or not entry.keys() >= {"base", "value"}:
                raise MalformedTestCaseError(
                    f"Share {index} needs a `base` and a `value`", source
                )
            if not isinstance(entry["value"], str):
                raise MalformedTestCaseError(
                    f"Share {index} value must be a string", source
                )
            try:
                base = encoding.parse_base(entry["base"])
            except InvalidBaseError as err:
                err.index = index
                raise
            shares[index] = Share(index=index, base=base, digits=entry["value"])
        return TestCase(n=n, k=k, shares=shares)

    @staticmethod
    def from_json(raw: str, source: Optional[str] = None) -> "TestCase":
        try:
            data = json.loads(raw)
        except ValueError as err:
            raise MalformedTestCaseError(f"Invalid JSON ({err})", source) from err
        return TestCase.from_dict(data, source)

    @classmethod
    def from_file(cls: Type["TestCase"], path: Path) -> "TestCase":
        try:
            with path.open(encoding="utf-8") as fd:
                raw = fd.read()
        except OSError as err:
            raise MalformedTestCaseError(
                f"Could not read file ({err.strerror})", str(path)
            ) from err
        except UnicodeDecodeError as err:
            raise MalformedTestCaseError(
                f"File is not valid UTF-8 ({err.reason})", str(path)
            ) from err
        return cls.from_json(raw, str(path))

    def to_dict(self: "TestCase") -> Dict[str, Any]:
        data: Dict[str, Any] = {"keys": {"n": self.n, "k": self.k}}
        for index, share in sorted(self.shares.items()):
            data[str(index)] = {"base": str(share.base), "value": share.digits}
        return data

    def to_json(self: "TestCase") -> str:
        return json.dumps(self.to_dict(), indent=4)


@dataclass
class SolverCfg:
    cross_validate: bool = False
    # Upper bound on the number of extra k-subsets checked, None for all.
    max_subsets: Optional[int] = None

    @staticmethod
    def from_json(raw: str) -> "SolverCfg":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("The solver configuration must be a JSON object")
        cross_validate = data.get("cross_validate", False)
        if not isinstance(cross_validate, bool):
            raise ValueError(
                f"cross_validate must be true or false, got {cross_validate!r}"
            )
        max_subsets = data.get("max_subsets")
        if max_subsets is not None and (
            isinstance(max_subsets, bool)
            or not isinstance(max_subsets, int)
            or max_subsets < 0
        ):
            raise ValueError(
                f"max_subsets must be a non negative integer, got {max_subsets!r}"
            )
        return SolverCfg(cross_validate=cross_validate, max_subsets=max_subsets)

    def to_json(self: "SolverCfg") -> str:
        return json.dumps(
            {"cross_validate": self.cross_validate, "max_subsets": self.max_subsets},
            sort_keys=True,
        )


def extract(case: TestCase, observer: Observer = diagnostics.silent) -> List[Point]:
    """Decode the shares in index order, skipping the indices nobody holds."""
    points = []
    for index in sorted(case.shares):
        share = case.shares[index]
        point = Point(x=index, y=share.decode())
        points.append(point)
        event = {"x": point.x, "y": point.y, "digits": share.digits, "base": share.base}
        observer(Event(diagnostics.POINT, event))
    return points


def cross_validate(
    points: List[Point], k: int, expected: int, max_subsets: Optional[int] = None
) -> None:
    """Check that other k-subsets of the points agree on the secret."""
    others = islice(combinations(points, k), 1, None)
    if max_subsets is not None:
        others = islice(others, max_subsets)
    for subset in others:
        try:
            value: Optional[int] = interpolate(0, subset)
        except NonIntegerResultError:
            value = None
        if value != expected:
            raise InconsistentSharesError(expected, [p.x for p in subset], value)


def solve(
    case: TestCase,
    observer: Optional[Observer] = None,
    cfg: Optional[SolverCfg] = None,
) -> int:
    observer = observer or diagnostics.silent
    cfg = cfg or SolverCfg()
    observer(
        Event(diagnostics.CASE, {"n": case.n, "k": case.k, "degree": case.k - 1})
    )
    points = extract(case, observer)
    observer(Event(diagnostics.SELECTED, {"points": points[: case.k]}))
    secret = interpolate_at_zero(points, case.k)
    if cfg.cross_validate:
        logger.debug("Cross validating %s points with k=%s", len(points), case.k)
        cross_validate(points, case.k, secret, cfg.max_subsets)
    observer(Event(diagnostics.SECRET, {"secret": secret}))
    return secret
