"""View model handed to the presentation layer."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

from tolcalc.core.calculator import ResultStatus, ToleranceResult
from tolcalc.core.config import get_settings
from tolcalc.presentation import labels
from tolcalc.presentation.formatting import EMPTY, format_number, format_tolerance


class ToleranceView(BaseModel):
    status: ResultStatus
    grade_label: str = Field(..., description="Label of the selected grade")
    tolerance: str = Field(..., description="Formatted tolerance, e.g. ±0.2")
    upper_limit: str = Field(..., description="Formatted upper limit")
    lower_limit: str = Field(..., description="Formatted lower limit")
    inline_error: Optional[str] = Field(
        default=None, description="Validation message shown next to the input"
    )
    message: Optional[str] = Field(
        default=None, description="Message shown instead of the numbers"
    )


def present(
    result: ToleranceResult,
    raw_dimension: Union[str, float, int, None] = "",
    decimals: Optional[int] = None,
) -> ToleranceView:
    if decimals is None:
        decimals = get_settings().DISPLAY_DECIMALS

    inline_error = None
    message = None
    if result.status is ResultStatus.INVALID_DIMENSION:
        # An empty field is not an error yet, it just has no result
        if raw_dimension is not None and str(raw_dimension).strip():
            inline_error = labels.DIMENSION_RANGE_ERROR
        message = labels.INVALID_DIMENSION_MESSAGE
    elif result.status is ResultStatus.UNSPECIFIED_TOLERANCE:
        message = labels.UNSPECIFIED_TOLERANCE_MESSAGE
    elif result.status is ResultStatus.INVALID_GRADE:
        message = labels.INVALID_GRADE_MESSAGE

    return ToleranceView(
        status=result.status,
        grade_label=labels.GRADE_LABELS[result.grade] if result.grade else EMPTY,
        tolerance=format_tolerance(result.tolerance, decimals),
        upper_limit=format_number(result.upper_limit, decimals),
        lower_limit=format_number(result.lower_limit, decimals),
        inline_error=inline_error,
        message=message,
    )
