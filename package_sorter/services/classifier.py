"""
Package Sorter — Classification Service
=========================================

What:  Maps a valid Package to its classification flags, its stack decision
       and the remarks explaining both.
Why:   This is the whole business rule of the system; CLI and HTTP layers are
       thin wrappers that call ClassifierService.evaluate().
How:   Plain functions over frozen values. No I/O, no shared state, so the
       service is safe to call from any number of threads or coroutines.

Rules:
    BULKY   volume >= 1,000,000 cm³  OR  any side >= 150 cm
    HEAVY   mass >= 20,000 g

    flags            decision
    ─────────────    ─────────
    (none)           STANDARD
    BULKY or HEAVY   SPECIAL
    BULKY + HEAVY    REJECTED
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import List, Tuple

from package_sorter.models.package import Package, make_package

logger = logging.getLogger(__name__)

BULKY_VOLUME_LIMIT_CM3 = 1_000_000
DIMENSION_LIMIT_CM = 150
HEAVY_MASS_LIMIT_G = 20_000


class Classification(Flag):
    """Set of handling flags. NONE is the empty set."""

    NONE = 0
    BULKY = auto()
    HEAVY = auto()

    @property
    def labels(self) -> List[str]:
        """Flag names in a stable order (BULKY before HEAVY)."""
        return [flag.name for flag in _FLAGS if flag in self]


_FLAGS: Tuple[Classification, ...] = (Classification.BULKY, Classification.HEAVY)


class StackDecision(str, Enum):
    """Where the robot puts the package."""

    STANDARD = "STANDARD"  # neither bulky nor heavy, normal automated handling
    SPECIAL = "SPECIAL"    # bulky or heavy, needs manual handling
    REJECTED = "REJECTED"  # bulky and heavy


@dataclass(frozen=True)
class ClassificationResult:
    """Everything a caller needs to render one classification."""

    package: Package
    classification: Classification
    decision: StackDecision
    reason: str
    remarks: List[str] = field(default_factory=list)


# ── Rules ─────────────────────────────────────────────────────────────────


def exceeds_dimension_limit(package: Package) -> bool:
    return any(side >= DIMENSION_LIMIT_CM for side in package.dimension.sides)


def exceeds_volume_limit(package: Package) -> bool:
    return package.volume >= BULKY_VOLUME_LIMIT_CM3


def classify_package(package: Package) -> Classification:
    """Compute the BULKY/HEAVY flags. The two checks are independent."""
    classification = Classification.NONE
    if exceeds_dimension_limit(package) or exceeds_volume_limit(package):
        classification |= Classification.BULKY
    if package.mass >= HEAVY_MASS_LIMIT_G:
        classification |= Classification.HEAVY
    return classification


def decide_stack(classification: Classification) -> StackDecision:
    """Empty → STANDARD, one flag → SPECIAL, both → REJECTED."""
    flag_count = len(classification.labels)
    if flag_count == 0:
        return StackDecision.STANDARD
    if flag_count == 1:
        return StackDecision.SPECIAL
    return StackDecision.REJECTED


def classification_remarks(package: Package, classification: Classification) -> List[str]:
    """
    Human-readable reasons for each flag that applies.

    BULKY can list both the dimension and the volume remark when both limits
    are reached. Remarks are advisory only; decide_stack() never reads them.
    """
    remarks = []
    if Classification.BULKY in classification:
        if exceeds_dimension_limit(package):
            remarks.append(f"Dimension >= {DIMENSION_LIMIT_CM}cm")
        if exceeds_volume_limit(package):
            remarks.append(f"Volume >= {BULKY_VOLUME_LIMIT_CM3}cm³")
    if Classification.HEAVY in classification:
        remarks.append(f"Mass >= {HEAVY_MASS_LIMIT_G}g")
    if not remarks:
        remarks.append("Not bulky nor heavy")
    return remarks


def decision_reason(classification: Classification) -> str:
    """One-line summary of which flags drove the decision."""
    labels = classification.labels
    if len(labels) == 2:
        return "BULKY and HEAVY"
    if labels:
        return f"{labels[0]} only"
    return "STANDARD"


# ── Service ───────────────────────────────────────────────────────────────


class ClassifierService:
    """
    Stateless facade over the classification rules.

    Holds no fields; the module-level `classifier_service` instance is what
    routes and the CLI import, the same way they would any other service.
    """

    def make_package(self, width: int, height: int, length: int, mass: float) -> Package:
        return make_package(width, height, length, mass)

    def classify(self, package: Package) -> Classification:
        return classify_package(package)

    def sort(self, package: Package) -> StackDecision:
        return decide_stack(classify_package(package))

    def remarks(self, package: Package, classification: Classification) -> List[str]:
        return classification_remarks(package, classification)

    def evaluate(self, width: int, height: int, length: int, mass: float) -> ClassificationResult:
        """
        Validate, classify and explain in one call.

        Raises:
            InvalidDimensionError / InvalidMassError for invalid input.
            Nothing else: every valid package classifies.
        """
        package = self.make_package(width, height, length, mass)
        classification = self.classify(package)
        decision = decide_stack(classification)
        result = ClassificationResult(
            package=package,
            classification=classification,
            decision=decision,
            reason=decision_reason(classification),
            remarks=self.remarks(package, classification),
        )
        logger.debug(
            "Classified %dx%dx%d cm / %.1f g as %s %s",
            width, height, length, package.mass,
            decision.value, classification.labels,
        )
        return result


def sort_package(width: int, height: int, length: int, mass: float) -> str:
    """Shortcut: decision name for raw inputs ("STANDARD", "SPECIAL" or "REJECTED")."""
    return classifier_service.evaluate(width, height, length, mass).decision.value


# Singleton instance
classifier_service = ClassifierService()
