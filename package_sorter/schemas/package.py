"""
Package Sorter — Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the HTTP API contract.
Why:   Automatic serialization and OpenAPI doc generation; the domain values
       in models/package.py stay free of HTTP concerns.
How:   Route handlers build these from a ClassificationResult.

Design Decision:
    Schemas are separate from the domain dataclasses because the response
    flattens the package (width/height/length/mass/volume at the top level)
    and adds presentation-only fields (timestamp, reason).
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from package_sorter.services.classifier import ClassificationResult, StackDecision


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ClassificationRequest(BaseModel):
    """
    Body for POST /api/v1/packages/classify.

    Why no range constraints here:
        Positivity and finiteness are business rules enforced by the package
        builder, so body, query and path requests all fail the same way
        (400 validation_error) with the same message.
    """
    width: int = Field(description="Package width in centimetres")
    height: int = Field(description="Package height in centimetres")
    length: int = Field(description="Package length in centimetres")
    mass: float = Field(description="Package mass in grams")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ClassificationResponse(BaseModel):
    """
    Result of classifying one package.

    Example:
        {
            "width": 150, "height": 30, "length": 20, "mass": 5000.0,
            "volume": 90000,
            "decision": "SPECIAL",
            "classification": ["BULKY"],
            "reason": "BULKY only",
            "remarks": ["Dimension >= 150cm"],
            "timestamp": "2024-01-15T12:00:00Z"
        }
    """
    width: int = Field(description="Package width in centimetres")
    height: int = Field(description="Package height in centimetres")
    length: int = Field(description="Package length in centimetres")
    mass: float = Field(description="Package mass in grams")
    volume: int = Field(description="width × height × length in cm³")
    decision: StackDecision = Field(description="Stack assignment: STANDARD, SPECIAL or REJECTED")
    classification: List[str] = Field(description="Flags that apply: BULKY, HEAVY (may be empty)")
    reason: str = Field(description="Short summary of the flags behind the decision")
    remarks: List[str] = Field(description="Which thresholds were reached")
    timestamp: datetime = Field(default_factory=_utcnow, description="When the package was classified (UTC)")

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationResponse":
        package = result.package
        return cls(
            width=package.dimension.width,
            height=package.dimension.height,
            length=package.dimension.length,
            mass=package.mass,
            volume=package.volume,
            decision=result.decision,
            classification=result.classification.labels,
            reason=result.reason,
            remarks=list(result.remarks),
        )


class ErrorResponse(BaseModel):
    """
    Standardized error format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness probe. The service has no dependencies, so it is UP whenever it answers."""
    status: str = Field(default="UP", description="Always UP when the process can answer")
    service: str = Field(description="Service name")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
    timestamp: datetime = Field(default_factory=_utcnow, description="Server time (UTC)")


class ApiInfoResponse(BaseModel):
    """Self-description returned by GET /api/v1/packages/info."""
    name: str
    version: str
    description: str
    endpoints: Dict[str, str]
    examples: Dict[str, str]
    rules: Dict[str, str]
