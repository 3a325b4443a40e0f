"""Custom exception hierarchy for the option_analytics library.

All library-specific exceptions inherit from :class:`OptionAnalyticsError`,
enabling callers to catch *any* library error with a single ``except`` clause::

    try:
        prices = OptionValuation(contract).price_sweep("sig", 0.1, 0.9, 0.2)
    except OptionAnalyticsError as exc:
        log.error("Library error: %s", exc)

The four input-validation errors carry structured payloads (the offending
token, or the step and range) and an :class:`ErrorKind` tag. Their messages
are all rendered by :func:`format_error_message`.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ErrorKind",
    "format_error_message",
    "OptionAnalyticsError",
    "ValidationError",
    "InvalidFactorName",
    "InvalidOptionType",
    "InvalidStepDirection",
    "InvalidFactorValue",
    "ConfigurationError",
    "UnsupportedFeatureError",
    "NumericalError",
]


class ErrorKind(Enum):
    INVALID_FACTOR_NAME = "invalid_factor_name"
    INVALID_OPTION_TYPE = "invalid_option_type"
    INVALID_STEP_DIRECTION = "invalid_step_direction"
    INVALID_FACTOR_VALUE = "invalid_factor_value"


def format_error_message(kind: ErrorKind, **payload: object) -> str:
    """Render the user-facing message for a validation error kind."""
    if kind is ErrorKind.INVALID_FACTOR_NAME:
        return (
            f"{payload['token']} is not a valid factor! "
            'Valid factors are "S", "T", "K", "sig", "r" and "b".'
        )
    if kind is ErrorKind.INVALID_OPTION_TYPE:
        return f"{payload['token']} is not a valid option type! Valid types are 'C' and 'P'."
    if kind is ErrorKind.INVALID_STEP_DIRECTION:
        return (
            f"Cannot apply {payload['step']} as step size to range "
            f"({payload['start']}, {payload['end']})!"
        )
    if kind is ErrorKind.INVALID_FACTOR_VALUE:
        return "Parameters cannot be negative and K must be positive!"
    raise ValueError(f"Unknown error kind: {kind!r}")


class OptionAnalyticsError(Exception):
    """Base exception for all library errors."""


# ── Input validation ────────────────────────────────────────────────


class ValidationError(OptionAnalyticsError, ValueError):
    """Invalid input values (out-of-range, non-finite, unknown tokens, etc.)."""


class InvalidFactorName(ValidationError):
    """Factor token does not name one of T, K, SIG, R, B, S."""

    kind = ErrorKind.INVALID_FACTOR_NAME

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(format_error_message(self.kind, token=token))


class InvalidOptionType(ValidationError):
    """Option-type token is neither C nor P."""

    kind = ErrorKind.INVALID_OPTION_TYPE

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(format_error_message(self.kind, token=token))


class InvalidStepDirection(ValidationError):
    """Sweep step is zero or points away from the end of the range."""

    kind = ErrorKind.INVALID_STEP_DIRECTION

    def __init__(self, step: float, start: float, end: float) -> None:
        self.step = step
        self.start = start
        self.end = end
        super().__init__(format_error_message(self.kind, step=step, start=start, end=end))


class InvalidFactorValue(ValidationError):
    """A factor value violates its bound (negative, non-finite, or K <= 0)."""

    kind = ErrorKind.INVALID_FACTOR_VALUE

    def __init__(self) -> None:
        super().__init__(format_error_message(self.kind))


class ConfigurationError(OptionAnalyticsError):
    """Wrong types passed to a public API (e.g. a raw int instead of an enum)."""


# ── Feature support ─────────────────────────────────────────────────


class UnsupportedFeatureError(OptionAnalyticsError):
    """Requested quantity is not defined for the option family."""


# ── Numerical issues ────────────────────────────────────────────────


class NumericalError(OptionAnalyticsError):
    """Inputs pass validation but the closed form has no finite value."""
