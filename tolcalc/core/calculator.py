"""General tolerance calculation: raw input in, result record out."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from tolcalc.core.config import get_settings
from tolcalc.core.errors import ErrorCode
from tolcalc.core.knowledge import (
    ToleranceGrade,
    compute_limits,
    parse_grade,
    resolve_tolerance,
    validate_dimension,
)

logger = logging.getLogger(__name__)


class ResultStatus(str, Enum):
    OK = "ok"
    INVALID_DIMENSION = "invalid_dimension"
    UNSPECIFIED_TOLERANCE = "unspecified_tolerance"
    INVALID_GRADE = "invalid_grade"


class ToleranceResult(BaseModel):
    status: ResultStatus = Field(
        ..., description="ok / invalid_dimension / unspecified_tolerance / invalid_grade"
    )
    grade: Optional[ToleranceGrade] = Field(
        default=None, description="Tolerance grade (f, m, c, v)"
    )
    dimension: Optional[float] = Field(
        default=None, description="Validated nominal dimension in mm"
    )
    tolerance: Optional[float] = Field(default=None, description="Symmetric tolerance (±) in mm")
    upper_limit: Optional[float] = Field(default=None, description="Nominal + tolerance in mm")
    lower_limit: Optional[float] = Field(default=None, description="Nominal - tolerance in mm")
    source: str = Field(
        default="JIS B 0405-1991 / ISO 2768-1",
        description="Reference standard",
    )

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def error_code(self) -> Optional[ErrorCode]:
        if self.status is ResultStatus.INVALID_DIMENSION:
            return ErrorCode.INVALID_DIMENSION
        if self.status is ResultStatus.UNSPECIFIED_TOLERANCE:
            return ErrorCode.UNSPECIFIED_TOLERANCE
        if self.status is ResultStatus.INVALID_GRADE:
            return ErrorCode.INVALID_GRADE
        return None


def default_grade() -> ToleranceGrade:
    configured = parse_grade(get_settings().DEFAULT_GRADE)
    if configured is None:
        logger.warning(
            "Unknown default grade %r, falling back to medium",
            get_settings().DEFAULT_GRADE,
        )
        return ToleranceGrade.MEDIUM
    return configured


def calculate(
    raw_dimension: Union[str, float, int, None],
    grade: Union[ToleranceGrade, str, None] = None,
) -> ToleranceResult:
    """
    Resolve the general tolerance and limits for a raw dimension input.

    Args:
        raw_dimension: Dimension text (or number) as entered by the user
        grade: Tolerance grade, letter code or grade name (e.g. "very-coarse");
            the configured default when omitted

    Returns:
        ToleranceResult whose status tells an invalid dimension apart from a
        dimension the standard has no tolerance for. An unrecognized grade
        yields status invalid_grade.

    Example:
        >>> calculate("10", ToleranceGrade.MEDIUM).upper_limit
        10.2
    """
    if grade is None:
        grade = default_grade()
    else:
        parsed = parse_grade(grade)
        if parsed is None:
            logger.debug(
                "Unknown tolerance grade",
                extra={
                    "raw_dimension": raw_dimension,
                    "grade": str(grade),
                    "error_code": ErrorCode.INVALID_GRADE.value,
                },
            )
            return ToleranceResult(status=ResultStatus.INVALID_GRADE)
        grade = parsed

    dimension = validate_dimension(raw_dimension)
    if dimension is None:
        logger.debug(
            "Invalid dimension input",
            extra={
                "raw_dimension": raw_dimension,
                "grade": grade.value,
                "error_code": ErrorCode.INVALID_DIMENSION.value,
            },
        )
        return ToleranceResult(status=ResultStatus.INVALID_DIMENSION, grade=grade)

    tolerance = resolve_tolerance(dimension, grade)
    limits = compute_limits(dimension, tolerance)
    if tolerance is None or limits is None:
        logger.debug(
            "Tolerance not specified",
            extra={
                "dimension": dimension,
                "grade": grade.value,
                "error_code": ErrorCode.UNSPECIFIED_TOLERANCE.value,
            },
        )
        return ToleranceResult(
            status=ResultStatus.UNSPECIFIED_TOLERANCE,
            grade=grade,
            dimension=dimension,
        )

    logger.debug(
        "Tolerance resolved",
        extra={
            "dimension": dimension,
            "grade": grade.value,
            "status": ResultStatus.OK.value,
            "tolerance": tolerance,
        },
    )
    return ToleranceResult(
        status=ResultStatus.OK,
        grade=grade,
        dimension=dimension,
        tolerance=tolerance,
        upper_limit=limits.upper,
        lower_limit=limits.lower,
    )


__all__ = ["ResultStatus", "ToleranceResult", "calculate", "default_grade"]
