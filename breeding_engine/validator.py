"""
validator.py - breeding eligibility checks
Age, bond, health, pregnancy, cooldown and size gates for a pairing
"""

import math
from datetime import datetime
from typing import List, Dict, Optional
from dataclasses import dataclass, field
from enum import Enum

from .models import Dog, Kennel, Sex
from .generator import BreedingConfig
from .pedigree import analyze_inbreeding
from .pregnancy import weeks_between, weeks_remaining
from .size_compatibility import Severity, check_size_compatibility


class ValidationLevel(Enum):
    """Validation level"""
    ERROR = "ERROR"      # pairing not allowed
    WARNING = "WARNING"  # allowed, with risk
    INFO = "INFO"


@dataclass
class ValidationResult:
    """Single check outcome"""
    is_valid: bool
    level: ValidationLevel
    message: str
    details: Dict = field(default_factory=dict)

    def __str__(self):
        return f"[{self.level.value}] {self.message}"


@dataclass
class ValidationReport:
    """Eligibility report for one pairing"""
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Breedable when no error failed"""
        return not any(
            r.level == ValidationLevel.ERROR and not r.is_valid
            for r in self.results
        )

    @property
    def error_count(self) -> int:
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        return len(self.get_warnings())

    @property
    def reasons(self) -> List[str]:
        """Why the pairing cannot breed"""
        return [r.message for r in self.get_errors()]

    def add_result(self, result: ValidationResult):
        self.results.append(result)

    def get_errors(self) -> List[ValidationResult]:
        return [r for r in self.results
                if r.level == ValidationLevel.ERROR and not r.is_valid]

    def get_warnings(self) -> List[ValidationResult]:
        return [r for r in self.results
                if r.level == ValidationLevel.WARNING and not r.is_valid]

    def to_dict(self) -> Dict:
        return {
            'can_breed': self.is_valid,
            'error_count': self.error_count,
            'warning_count': self.warning_count,
            'reasons': self.reasons,
            'results': [
                {
                    'valid': r.is_valid,
                    'level': r.level.value,
                    'message': r.message,
                    'details': r.details
                }
                for r in self.results
            ]
        }

    def __str__(self):
        lines = [
            "=== Breeding eligibility ===",
            f"Result: {'eligible' if self.is_valid else 'not eligible'}",
            f"Errors: {self.error_count}, warnings: {self.warning_count}",
            ""
        ]

        for r in self.results:
            status = "+" if r.is_valid else "x"
            lines.append(f"  {status} [{r.level.value}] {r.message}")

        return "\n".join(lines)


def _error(message: str, **details) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        level=ValidationLevel.ERROR,
        message=message,
        details=details
    )


def _warning(message: str, **details) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        level=ValidationLevel.WARNING,
        message=message,
        details=details
    )


class BreedingValidator:
    """
    Breeding eligibility checker

    Checks:
    1. distinct dogs of opposite sex
    2. age, bond and health minimums
    3. dam not pregnant, both past their cooldown
    4. size compatibility
    5. kinship (warning only)
    """

    def __init__(self, config: Optional[BreedingConfig] = None):
        self.config = config or BreedingConfig()

    def validate_pairing(
        self,
        dog1: Dog,
        dog2: Dog,
        kennel: Optional[Kennel] = None,
        now: Optional[datetime] = None
    ) -> ValidationReport:
        """
        Run every eligibility check

        Args:
            dog1, dog2: candidate pair, in any order
            kennel: every known dog; kinship is only checked when given
            now: reference time for cooldowns (default: current time)

        Returns:
            ValidationReport
        """
        report = ValidationReport()
        now = now or datetime.now()

        for r in self._validate_pair(dog1, dog2):
            report.add_result(r)

        for dog in (dog1, dog2):
            for r in self._validate_condition(dog):
                report.add_result(r)

        if dog1.sex != dog2.sex:
            sire, dam = (dog1, dog2) if dog1.sex == Sex.MALE else (dog2, dog1)
            for r in self._validate_reproductive_state(sire, dam, now):
                report.add_result(r)

        for r in self._validate_size(dog1, dog2):
            report.add_result(r)

        if kennel is not None and dog1.id != dog2.id:
            for r in self._validate_kinship(dog1, dog2, kennel):
                report.add_result(r)

        if not report.results:
            report.add_result(ValidationResult(
                is_valid=True,
                level=ValidationLevel.INFO,
                message=f"{dog1.name} and {dog2.name} can be bred"
            ))

        return report

    def _validate_pair(self, dog1: Dog, dog2: Dog) -> List[ValidationResult]:
        results = []

        if dog1.id == dog2.id:
            results.append(_error("Cannot breed a dog with itself", dog_id=dog1.id))

        if dog1.sex == dog2.sex:
            results.append(_error(
                "Must be male and female to breed",
                sex=dog1.sex.value
            ))

        return results

    def _validate_condition(self, dog: Dog) -> List[ValidationResult]:
        """age / bond / health minimums"""
        cfg = self.config
        results = []

        if dog.age_weeks < cfg.min_breeding_age:
            results.append(_error(
                f"{dog.name} is too young (needs {cfg.min_breeding_age} weeks, "
                f"has {dog.age_weeks})",
                dog_id=dog.id, age_weeks=dog.age_weeks
            ))

        if dog.bond_level < cfg.min_bond_level:
            results.append(_error(
                f"{dog.name} needs bond level {cfg.min_bond_level} "
                f"(has {dog.bond_level})",
                dog_id=dog.id, bond_level=dog.bond_level
            ))

        if dog.health < cfg.min_health:
            results.append(_error(
                f"{dog.name} needs {cfg.min_health}% health (has {dog.health}%)",
                dog_id=dog.id, health=dog.health
            ))

        return results

    def _validate_reproductive_state(
        self,
        sire: Dog,
        dam: Dog,
        now: datetime
    ) -> List[ValidationResult]:
        cfg = self.config
        results = []

        if dam.is_pregnant:
            if dam.pregnancy_due is not None:
                due_in = weeks_remaining(dam.pregnancy_due, now)
                results.append(_error(
                    f"{dam.name} is already pregnant (due in {due_in} weeks)",
                    dog_id=dam.id, weeks_remaining=due_in
                ))
            else:
                results.append(_error(f"{dam.name} is already pregnant", dog_id=dam.id))

        for dog, cooldown in ((dam, cfg.female_cooldown_weeks),
                              (sire, cfg.male_cooldown_weeks)):
            if dog.last_bred is None:
                continue
            weeks_since = weeks_between(dog.last_bred, now)
            if weeks_since < cooldown:
                remaining = math.ceil(cooldown - weeks_since)
                results.append(_error(
                    f"{dog.name} needs to wait {remaining} more weeks",
                    dog_id=dog.id, weeks_remaining=remaining
                ))

        return results

    def _validate_size(self, dog1: Dog, dog2: Dog) -> List[ValidationResult]:
        verdict = check_size_compatibility(dog1, dog2)
        details = {
            'severity': verdict.severity.value,
            'risk_factor': verdict.risk_factor,
        }

        if verdict.severity == Severity.BLOCKED:
            return [_error(verdict.message, **details)]
        if verdict.severity in (Severity.CAUTION, Severity.WARNING):
            return [_warning(verdict.message, **details)]
        return []

    def _validate_kinship(self, dog1: Dog, dog2: Dog, kennel: Kennel) -> List[ValidationResult]:
        analysis = analyze_inbreeding(dog1, dog2, kennel, self.config.pedigree_depth)
        if not analysis.is_related:
            return []

        label = analysis.relationship or 'related'
        return [_warning(
            f"{dog1.name} and {dog2.name} are {label}: puppies lose "
            f"{analysis.penalty}% of their stats",
            **analysis.to_dict()
        )]


def validate_pairing(
    dog1: Dog,
    dog2: Dog,
    kennel: Optional[Kennel] = None,
    now: Optional[datetime] = None
) -> ValidationReport:
    """Shortcut for BreedingValidator().validate_pairing()"""
    return BreedingValidator().validate_pairing(dog1, dog2, kennel, now)
