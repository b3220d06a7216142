"""Exceptions for board states that legal play can never reach."""

from __future__ import annotations


class RulesInvariantError(RuntimeError):
    """A board or move broke a rule invariant.

    Raised when a caller bypassed the legality filter or handed over a
    corrupted board. These are never part of a normal game.
    """


class KingNotFoundError(RulesInvariantError):
    """A king-dependent query found no king of the requested colour."""


class KingCaptureError(RulesInvariantError):
    """A move tried to capture a king."""
