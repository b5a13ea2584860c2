"""Everything that can go wrong while reconstructing a secret from shares."""

from typing import Optional, Sequence


class ReconstructionError(ValueError):
    """Base class, one case failing never prevents the others from running."""


class InvalidDigitError(ReconstructionError):
    def __init__(
        self: "InvalidDigitError", digit: str, base: int, index: Optional[int] = None
    ) -> None:
        self.digit = digit
        self.base = base
        self.index = index
        super().__init__(digit, base, index)

    def __str__(self: "InvalidDigitError") -> str:
        where = "" if self.index is None else f" in share {self.index}"
        if not self.digit:
            return f"Empty value for base {self.base}{where}"
        return f"Invalid digit {self.digit!r} for base {self.base}{where}"


class InvalidBaseError(ReconstructionError):
    def __init__(
        self: "InvalidBaseError", base: object, index: Optional[int] = None
    ) -> None:
        self.base = base
        self.index = index
        super().__init__(base, index)

    def __str__(self: "InvalidBaseError") -> str:
        where = "" if self.index is None else f" in share {self.index}"
        return f"Unsupported base {self.base!r}{where}, it must be between 2 and 36"


class InsufficientPointsError(ReconstructionError):
    def __init__(
        self: "InsufficientPointsError", available: int, required: int
    ) -> None:
        self.available = available
        self.required = required
        super().__init__(available, required)

    def __str__(self: "InsufficientPointsError") -> str:
        return f"Not enough shares ({self.available} < {self.required})."


class DegenerateInputError(ReconstructionError):
    def __init__(self: "DegenerateInputError", x: int) -> None:
        self.x = x
        super().__init__(x)

    def __str__(self: "DegenerateInputError") -> str:
        return f"Points must be distinct, x={self.x} appears more than once."


class NonIntegerResultError(ReconstructionError):
    def __init__(
        self: "NonIntegerResultError", numerator: int, denominator: int
    ) -> None:
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(numerator, denominator)

    def __str__(self: "NonIntegerResultError") -> str:
        return (
            f"The shares do not describe an integer secret "
            f"({self.numerator}/{self.denominator})."
        )


class MalformedTestCaseError(ReconstructionError):
    def __init__(
        self: "MalformedTestCaseError", reason: str, source: Optional[str] = None
    ) -> None:
        self.reason = reason
        self.source = source
        super().__init__(reason, source)

    def __str__(self: "MalformedTestCaseError") -> str:
        if self.source is None:
            return self.reason
        return f"{self.source}: {self.reason}"


class InconsistentSharesError(ReconstructionError):
    """Another k-subset of the shares disagrees with the first one.

    `value` is None when that subset does not even produce an integer.
    """

    def __init__(
        self: "InconsistentSharesError",
        expected: int,
        subset: Sequence[int],
        value: Optional[int],
    ) -> None:
        self.expected = expected
        self.subset = tuple(subset)
        self.value = value
        super().__init__(expected, self.subset, value)

    def __str__(self: "InconsistentSharesError") -> str:
        got = "no integer" if self.value is None else str(self.value)
        return (
            f"Shares {list(self.subset)} give {got} "
            f"instead of {self.expected}."
        )
