"""Recover a Shamir secret from shares written in arbitrary bases."""

from shamirsolve.case import Share, SolverCfg, TestCase, extract, solve
from shamirsolve.encoding import decode, encode
from shamirsolve.errors import (
    DegenerateInputError,
    InconsistentSharesError,
    InsufficientPointsError,
    InvalidBaseError,
    InvalidDigitError,
    MalformedTestCaseError,
    NonIntegerResultError,
    ReconstructionError,
)
from shamirsolve.sharing import Point, interpolate_at_zero

__all__ = [
    "DegenerateInputError",
    "InconsistentSharesError",
    "InsufficientPointsError",
    "InvalidBaseError",
    "InvalidDigitError",
    "MalformedTestCaseError",
    "NonIntegerResultError",
    "Point",
    "ReconstructionError",
    "Share",
    "SolverCfg",
    "TestCase",
    "decode",
    "encode",
    "extract",
    "interpolate_at_zero",
    "solve",
]
