"""Option contract data model: the six-factor record and the contract that owns it."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace as dc_replace
import logging

from .enums import ExerciseType, Factor, OptionType
from .exceptions import ConfigurationError
from .validation import (
    canonicalize_exercise_type,
    canonicalize_factor,
    canonicalize_option_type,
    validate_factor_values,
)

__all__ = [
    "DEFAULT_NAME",
    "FactorRow",
    "FACTOR_ROW_INDEX",
    "OptionFactors",
    "OptionContract",
]

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Default"

# (T, K, sig, r, b, S)
FactorRow = tuple[float, float, float, float, float, float]

_FIELD_BY_FACTOR: dict[Factor, str] = {
    Factor.T: "expiry",
    Factor.K: "strike",
    Factor.SIG: "volatility",
    Factor.R: "rate",
    Factor.B: "carry",
    Factor.S: "spot",
}

# Column position of each factor in a (T, K, sig, r, b, S) row.
FACTOR_ROW_INDEX: dict[Factor, int] = {factor: i for i, factor in enumerate(Factor)}

_FAMILY_TITLE: dict[ExerciseType, str] = {
    ExerciseType.EUROPEAN: "European Option",
    ExerciseType.PERPETUAL_AMERICAN: "Perpetual American Option",
}


@dataclass(frozen=True, slots=True)
class OptionFactors:
    """The six numeric pricing factors of a vanilla option.

    Attributes
    ==========
    expiry:
        Time to expiry ``T`` in years (>= 0).
    strike:
        Strike price ``K`` (> 0).
    volatility:
        Volatility ``sig`` (>= 0).
    rate:
        Risk-free rate ``r`` (>= 0).
    carry:
        Cost of carry ``b`` (>= 0). ``b = r`` for a non-dividend stock,
        ``b = r - q`` under a continuous dividend yield, ``b = 0`` for futures.
    spot:
        Underlying price ``S`` (>= 0).

    Every instance is validated on construction, so a record held by a
    contract always satisfies the bounds above.
    """

    expiry: float = 0.0
    strike: float = 1.0
    volatility: float = 0.0
    rate: float = 0.0
    carry: float = 0.0
    spot: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            raw = getattr(self, f.name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"OptionFactors.{f.name} must be numeric") from exc
            object.__setattr__(self, f.name, value)
        validate_factor_values(*self.as_tuple())

    @classmethod
    def from_row(cls, row: FactorRow) -> "OptionFactors":
        """Build a record from a ``(T, K, sig, r, b, S)`` row."""
        if len(row) != 6:
            raise ConfigurationError(f"factor row must have 6 values, got {len(row)}")
        T, K, sig, r, b, S = row
        return cls(expiry=T, strike=K, volatility=sig, rate=r, carry=b, spot=S)

    def as_tuple(self) -> FactorRow:
        return (self.expiry, self.strike, self.volatility, self.rate, self.carry, self.spot)

    def value(self, factor: Factor | str) -> float:
        return getattr(self, _FIELD_BY_FACTOR[canonicalize_factor(factor)])

    def replace_factor(self, factor: Factor | str, value: float) -> "OptionFactors":
        """Return a validated copy with one factor replaced."""
        return dc_replace(self, **{_FIELD_BY_FACTOR[canonicalize_factor(factor)]: value})

    def factor_map(self) -> dict[Factor, float]:
        return {factor: getattr(self, name) for factor, name in _FIELD_BY_FACTOR.items()}


class OptionContract:
    """A vanilla option: six factors, an option type, an exercise family and a label.

    The contract is a value: copy it with :meth:`copy` rather than sharing it.
    It changes only through :meth:`set_factors` and :meth:`toggle`; both
    validate their inputs before writing, so a failed call leaves the
    contract untouched.

    Parameters
    ==========
    factors:
        Six-factor record. Defaults to ``OptionFactors()``
        (``T=0, K=1, sig=0, r=0, b=0, S=0``).
    option_type:
        ``OptionType`` or a ``"C"``/``"P"`` token in any casing. Default: Call.
    exercise_type:
        ``ExerciseType.EUROPEAN`` (default) or ``ExerciseType.PERPETUAL_AMERICAN``.
    name:
        Display label of the underlying asset.
    """

    __slots__ = ("_factors", "_option_type", "_exercise_type", "name")

    def __init__(
        self,
        factors: OptionFactors | None = None,
        option_type: OptionType | str = OptionType.CALL,
        *,
        exercise_type: ExerciseType | str = ExerciseType.EUROPEAN,
        name: str = DEFAULT_NAME,
    ) -> None:
        if factors is None:
            factors = OptionFactors()
        elif not isinstance(factors, OptionFactors):
            raise ConfigurationError(
                f"factors must be OptionFactors, got {type(factors).__name__}"
            )
        self._factors = factors
        self._option_type = canonicalize_option_type(option_type)
        self._exercise_type = canonicalize_exercise_type(exercise_type)
        self.name = name

    @classmethod
    def from_values(
        cls,
        *,
        T: float = 0.0,
        K: float = 1.0,
        sig: float = 0.0,
        r: float = 0.0,
        b: float = 0.0,
        S: float = 0.0,
        option_type: OptionType | str = OptionType.CALL,
        exercise_type: ExerciseType | str = ExerciseType.EUROPEAN,
        name: str = DEFAULT_NAME,
    ) -> "OptionContract":
        factors = OptionFactors(expiry=T, strike=K, volatility=sig, rate=r, carry=b, spot=S)
        return cls(factors, option_type, exercise_type=exercise_type, name=name)

    @property
    def factors(self) -> OptionFactors:
        return self._factors

    @property
    def option_type(self) -> OptionType:
        return self._option_type

    @property
    def exercise_type(self) -> ExerciseType:
        return self._exercise_type

    def copy(self) -> "OptionContract":
        return OptionContract(
            self._factors,
            self._option_type,
            exercise_type=self._exercise_type,
            name=self.name,
        )

    __copy__ = copy

    def factor_map(self) -> dict[Factor, float]:
        return self._factors.factor_map()

    def set_factors(
        self,
        factors: OptionFactors,
        option_type: OptionType | str | None = None,
    ) -> None:
        """Replace all six factors, and the option type when one is given.

        Without ``option_type`` the current type is kept.
        """
        if not isinstance(factors, OptionFactors):
            raise ConfigurationError(
                f"factors must be OptionFactors, got {type(factors).__name__}"
            )
        new_type = self._option_type if option_type is None else canonicalize_option_type(option_type)
        self._factors = factors
        self._option_type = new_type
        logger.debug("Contract %s factors set to %s (%s)", self.name, factors.as_tuple(), new_type.value)

    def toggle(self) -> None:
        """Flip the option type between Call and Put."""
        self._option_type = self._option_type.toggled()

    def describe(self) -> str:
        """Human-readable multi-line description of the contract."""
        f = self._factors
        lines = [
            _FAMILY_TITLE[self._exercise_type],
            f"Asset Name: {self.name}",
            f"Option Type: {self._option_type.value}",
            f"K:   {f.strike:g}",
            f"sig: {f.volatility:g}",
            f"r:   {f.rate:g}",
            f"b:   {f.carry:g}",
            f"S:   {f.spot:g}",
        ]
        if self._exercise_type is ExerciseType.EUROPEAN:
            lines.append(f"T:   {f.expiry:g}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"OptionContract(factors={self._factors!r}, option_type={self._option_type}, "
            f"exercise_type={self._exercise_type}, name={self.name!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionContract):
            return NotImplemented
        return (
            self._factors == other._factors
            and self._option_type is other._option_type
            and self._exercise_type is other._exercise_type
            and self.name == other.name
        )

    __hash__ = None
