"""
size_compatibility.py - size compatibility checks for breeding
Weight -> size band classification, pairing safety rating
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .models import Sex


class SizeBand(Enum):
    """Ordered size categories"""
    TOY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    GIANT = 4

    @property
    def label(self) -> str:
        return self.name.lower()


class Severity(Enum):
    """How risky a pairing is"""
    NONE = "none"
    CAUTION = "caution"
    WARNING = "warning"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class SizeRange:
    band: SizeBand
    min_weight: float  # lbs, inclusive
    max_weight: float  # lbs, exclusive
    description: str


SIZE_BANDS: Mapping[SizeBand, SizeRange] = MappingProxyType({
    SizeBand.TOY: SizeRange(SizeBand.TOY, 0, 20, 'Toy breeds (under 20 lbs)'),
    SizeBand.SMALL: SizeRange(SizeBand.SMALL, 20, 40, 'Small breeds (20-40 lbs)'),
    SizeBand.MEDIUM: SizeRange(SizeBand.MEDIUM, 40, 70, 'Medium breeds (40-70 lbs)'),
    SizeBand.LARGE: SizeRange(SizeBand.LARGE, 70, 100, 'Large breeds (70-100 lbs)'),
    SizeBand.GIANT: SizeRange(SizeBand.GIANT, 100, 200, 'Giant breeds (100+ lbs)'),
})


@dataclass(frozen=True)
class SizeProfile:
    """Minimal weight+sex record for compatibility checks"""
    weight: float
    sex: Sex


@dataclass(frozen=True)
class SizeCompatibility:
    """Size compatibility verdict"""
    compatible: bool
    severity: Severity
    message: str
    risk_factor: float  # 0-1, risk to the dam and puppies

    def to_dict(self) -> Dict[str, Any]:
        return {
            'compatible': self.compatible,
            'severity': self.severity.value,
            'message': self.message,
            'risk_factor': self.risk_factor,
        }


def classify_weight(weight: float) -> SizeBand:
    """Size band of a weight in lbs"""
    if weight < 20:
        return SizeBand.TOY
    if weight < 40:
        return SizeBand.SMALL
    if weight < 70:
        return SizeBand.MEDIUM
    if weight < 100:
        return SizeBand.LARGE
    return SizeBand.GIANT


def band_distance(weight1: float, weight2: float) -> int:
    return abs(classify_weight(weight1).value - classify_weight(weight2).value)


def _sire_and_dam(a, b) -> Tuple[Any, Any]:
    """(sire, dam); b is taken as the dam unless a is the only female"""
    if a.sex == Sex.FEMALE and b.sex != Sex.FEMALE:
        return b, a
    return a, b


def check_size_compatibility(a, b) -> SizeCompatibility:
    """
    Rate how safe it is to breed two dogs of given weight and sex.

    Rules:
    - same band: ideal
    - 1 band apart: safe
    - 2 bands apart: warning if the dam is the smaller dog, caution otherwise
    - 3+ bands apart: blocked

    Args:
        a, b: anything with .weight (lbs) and .sex (Sex)
    """
    sire, dam = _sire_and_dam(a, b)
    sire_band = classify_weight(sire.weight)
    dam_band = classify_weight(dam.weight)
    distance = abs(sire_band.value - dam_band.value)

    if distance == 0:
        return SizeCompatibility(
            compatible=True,
            severity=Severity.NONE,
            message="Both parents are a similar size - ideal pairing.",
            risk_factor=0.0
        )

    if distance == 1:
        return SizeCompatibility(
            compatible=True,
            severity=Severity.NONE,
            message="Size difference is minimal - safe pairing.",
            risk_factor=0.1
        )

    if distance == 2:
        # carrying oversized puppies is riskier than siring them
        if dam.weight < sire.weight:
            return SizeCompatibility(
                compatible=True,
                severity=Severity.WARNING,
                message=(f"WARNING: size mismatch. The smaller dam ({dam_band.label}) "
                         f"may have difficulty carrying puppies from a larger sire "
                         f"({sire_band.label}). Increased risk of complications; "
                         f"veterinary supervision strongly recommended."),
                risk_factor=0.4
            )
        return SizeCompatibility(
            compatible=True,
            severity=Severity.CAUTION,
            message=(f"CAUTION: moderate size difference ({sire_band.label} x "
                     f"{dam_band.label}). Puppies may vary significantly in size; "
                     f"monitor the pregnancy closely."),
            risk_factor=0.25
        )

    return SizeCompatibility(
        compatible=False,
        severity=Severity.BLOCKED,
        message=(f"BLOCKED: extreme size mismatch ({sire_band.label} x "
                 f"{dam_band.label}). Natural breeding is not possible and would "
                 f"endanger the smaller parent."),
        risk_factor=1.0
    )


def requires_artificial_insemination(a, b) -> bool:
    """2+ bands apart cannot be bred naturally without assistance"""
    return band_distance(a.weight, b.weight) >= 2


def expected_puppy_weight(sire_weight: float, dam_weight: float) -> Tuple[int, int, str]:
    """
    Expected adult weight range of the puppies.

    Returns:
        (min_weight, max_weight, description)
    """
    average = (sire_weight + dam_weight) / 2
    variance = abs(sire_weight - dam_weight) * 0.3

    min_weight = max(5, round(average - variance))
    max_weight = max(min_weight, round(average + variance))

    info = SIZE_BANDS[classify_weight(average)]
    description = (f"Puppies expected to be {info.description.lower()}, "
                   f"ranging from {min_weight}-{max_weight} lbs at maturity.")
    return min_weight, max_weight, description


def size_health_penalty(a, b) -> float:
    """Health penalty percentage from size risk (100 = blocked)"""
    return check_size_compatibility(a, b).risk_factor * 100
