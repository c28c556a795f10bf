"""Length conversion factor table."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Unit(str, Enum):
    METER = "m"
    KILOMETER = "km"
    FOOT = "ft"
    MILE = "mi"

    @property
    def label(self) -> str:
        return UNIT_LABELS[self]

    @classmethod
    def parse(cls, code: str) -> Optional["Unit"]:
        """Return the unit for ``code`` (case-insensitive), or None."""
        try:
            return cls(normalize_code(code))
        except ValueError:
            return None


UNIT_LABELS: dict[Unit, str] = {
    Unit.METER: "Meters (m)",
    Unit.KILOMETER: "Kilometers (km)",
    Unit.FOOT: "Feet (ft)",
    Unit.MILE: "Miles (mi)",
}

FACTORS: dict[tuple[Unit, Unit], float] = {
    (Unit.METER, Unit.KILOMETER): 0.001,
    (Unit.KILOMETER, Unit.METER): 1000,
    (Unit.FOOT, Unit.METER): 0.3048,
    (Unit.METER, Unit.FOOT): 3.28084,
    (Unit.MILE, Unit.KILOMETER): 1.60934,
    (Unit.KILOMETER, Unit.MILE): 0.621371,
    (Unit.FOOT, Unit.MILE): 0.000189394,
    (Unit.MILE, Unit.FOOT): 5280,
    (Unit.FOOT, Unit.KILOMETER): 0.0003048,
    (Unit.KILOMETER, Unit.FOOT): 3280.84,
    (Unit.METER, Unit.MILE): 0.000621371,
    (Unit.MILE, Unit.METER): 1609.34,
}

RESULT_DECIMALS = 6


class LookupKind(str, Enum):
    FOUND = "found"
    IDENTITY = "identity"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FactorLookup:
    kind: LookupKind
    factor: Optional[float] = None

    @property
    def supported(self) -> bool:
        return self.kind is not LookupKind.UNSUPPORTED


def normalize_code(code: str) -> str:
    return code.strip().lower()


def lookup_factor(from_code: str, to_code: str) -> FactorLookup:
    """Resolve the multiplicative factor between two unit codes.

    Identical codes always resolve to a factor of 1, even when the code is not
    a known unit. Pairs missing from the table come back as ``UNSUPPORTED``
    rather than raising, so callers decide how to report them.
    """
    if normalize_code(from_code) == normalize_code(to_code):
        return FactorLookup(LookupKind.IDENTITY, 1.0)

    source = Unit.parse(from_code)
    target = Unit.parse(to_code)
    if source is None or target is None:
        return FactorLookup(LookupKind.UNSUPPORTED)

    factor = FACTORS.get((source, target))
    if factor is None:
        return FactorLookup(LookupKind.UNSUPPORTED)
    return FactorLookup(LookupKind.FOUND, float(factor))


def apply_factor(value: float, factor: float) -> float:
    # round() is half-to-even on the binary value.
    return round(value * factor, RESULT_DECIMALS)
