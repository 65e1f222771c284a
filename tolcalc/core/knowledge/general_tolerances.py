"""
General Tolerances Knowledge Base.

Provides general tolerances for linear dimensions per JIS B 0405 / ISO 2768-1.
Chamfer heights and angular dimensions follow separate tables and are not
covered here.

Reference:
- JIS B 0405:1991 - General tolerances, linear and angular dimensions
- ISO 2768-1:1989 - General tolerances for linear and angular dimensions
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class ToleranceGrade(str, Enum):
    """General tolerance grade per JIS B 0405 / ISO 2768-1."""

    FINE = "f"  # 精級
    MEDIUM = "m"  # 中級
    COARSE = "c"  # 粗級
    VERY_COARSE = "v"  # 極粗級


MIN_DIMENSION = 0.5
MAX_DIMENSION = 4000.0

# Plain ASCII decimal with optional exponent: no "1_0", no full-width digits
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


@dataclass(frozen=True)
class ToleranceRange:
    """Nominal size bucket with a ± tolerance per grade (None = not specified)."""

    min: float
    max: float
    tolerances: Mapping[ToleranceGrade, Optional[float]]
    includes_min: bool = False

    def contains(self, dimension: float) -> bool:
        if self.includes_min:
            return self.min <= dimension <= self.max
        return self.min < dimension <= self.max

    def tolerance_for(self, grade: ToleranceGrade) -> Optional[float]:
        return self.tolerances.get(grade)


@dataclass(frozen=True)
class ToleranceLimits:
    """Upper and lower limit of a toleranced nominal dimension."""

    upper: float
    lower: float


def _row(
    min_size: float,
    max_size: float,
    f: Optional[float],
    m: Optional[float],
    c: Optional[float],
    v: Optional[float],
    includes_min: bool = False,
) -> ToleranceRange:
    tolerances = MappingProxyType({
        ToleranceGrade.FINE: f,
        ToleranceGrade.MEDIUM: m,
        ToleranceGrade.COARSE: c,
        ToleranceGrade.VERY_COARSE: v,
    })
    return ToleranceRange(min_size, max_size, tolerances, includes_min)


# Linear tolerance table per JIS B 0405 table 1 (mm).
# The first bucket is closed on both ends, all others are (min, max].
LINEAR_TOLERANCE_TABLE: Tuple[ToleranceRange, ...] = (
    _row(0.5, 3, 0.05, 0.1, 0.2, None, includes_min=True),
    _row(3, 6, 0.05, 0.1, 0.3, 0.5),
    _row(6, 30, 0.1, 0.2, 0.5, 1.0),
    _row(30, 120, 0.15, 0.3, 0.8, 1.5),
    _row(120, 400, 0.2, 0.5, 1.2, 2.5),
    _row(400, 1000, 0.3, 0.8, 2.0, 4.0),
    _row(1000, 2000, 0.5, 1.2, 3.0, 6.0),
    _row(2000, 4000, None, 2.0, 4.0, 8.0),
)


def validate_dimension(raw: Union[str, float, int, None]) -> Optional[float]:
    """
    Parse and range-check a nominal dimension.

    Args:
        raw: Raw user input, usually text from an input field

    Returns:
        The dimension in mm, or None when the input is not a number or lies
        outside [0.5, 4000]

    Example:
        >>> validate_dimension(" 10 ")
        10.0
        >>> validate_dimension("0.4") is None
        True
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not _NUMBER_RE.match(raw):
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None

    if math.isnan(value):
        return None
    if value < MIN_DIMENSION or value > MAX_DIMENSION:
        return None
    return value


def find_range(dimension: float) -> Optional[ToleranceRange]:
    """Return the table bucket containing ``dimension``, or None."""
    for tolerance_range in LINEAR_TOLERANCE_TABLE:
        if tolerance_range.contains(dimension):
            return tolerance_range
    return None


def resolve_tolerance(
    dimension: float,
    grade: ToleranceGrade = ToleranceGrade.MEDIUM,
) -> Optional[float]:
    """
    Get general linear tolerance for a dimension.

    Args:
        dimension: Nominal dimension in mm
        grade: Tolerance grade (f, m, c, v) or grade name

    Returns:
        Tolerance value in mm (±), or None if the standard specifies none

    Example:
        >>> resolve_tolerance(50, ToleranceGrade.MEDIUM)
        0.3
    """
    tolerance_range = find_range(dimension)
    if tolerance_range is None:
        logger.debug("No tolerance range for dimension %s", dimension)
        return None
    return tolerance_range.tolerance_for(_coerce_grade(grade))


def compute_limits(
    dimension: float,
    tolerance: Optional[float],
) -> Optional[ToleranceLimits]:
    """Nominal ± tolerance, unrounded. A missing tolerance yields no limits."""
    if tolerance is None:
        return None
    return ToleranceLimits(upper=dimension + tolerance, lower=dimension - tolerance)


def get_general_tolerance_table(
    grade: ToleranceGrade = ToleranceGrade.MEDIUM,
) -> List[Dict]:
    """
    Get full general tolerance table for a grade.

    Args:
        grade: Tolerance grade

    Returns:
        List of dictionaries with size ranges and tolerances
    """
    grade = _coerce_grade(grade)
    results = []

    for tolerance_range in LINEAR_TOLERANCE_TABLE:
        tol = tolerance_range.tolerance_for(grade)
        if tol is not None:
            results.append({
                "range_min": tolerance_range.min,
                "range_max": tolerance_range.max,
                "range_str": f"{tolerance_range.min:g}-{tolerance_range.max:g}",
                "tolerance_mm": tol,
            })

    return results


_GRADE_NAMES: Dict[str, ToleranceGrade] = {
    "fine": ToleranceGrade.FINE,
    "medium": ToleranceGrade.MEDIUM,
    "coarse": ToleranceGrade.COARSE,
    "very-coarse": ToleranceGrade.VERY_COARSE,
    "very_coarse": ToleranceGrade.VERY_COARSE,
    "verycoarse": ToleranceGrade.VERY_COARSE,
}

# e.g. "ISO 2768-mK", "JIS B 0405-m", "JIS B 0405 c"
_DESIGNATION_RE = re.compile(r"^(?:ISO2768|JISB0405)[-:]?([FMCV])[HKL]?$")


def parse_grade(value: Union[str, ToleranceGrade, None]) -> Optional[ToleranceGrade]:
    """
    Parse a grade selector value.

    Accepts letter codes, grade names and drawing designations
    (``ISO 2768-m``, ``JIS B 0405-f``).

    Example:
        >>> parse_grade("very-coarse")
        <ToleranceGrade.VERY_COARSE: 'v'>
    """
    if value is None:
        return None
    if isinstance(value, ToleranceGrade):
        return value

    text = str(value).strip()
    if not text:
        return None

    lowered = text.lower().replace(" ", "-")
    if lowered in _GRADE_NAMES:
        return _GRADE_NAMES[lowered]
    if len(lowered) == 1:
        try:
            return ToleranceGrade(lowered)
        except ValueError:
            return None

    # Designation: general class is the letter after the standard number
    compact = text.upper().replace(" ", "")
    match = _DESIGNATION_RE.match(compact)
    if match:
        return ToleranceGrade(match.group(1).lower())
    return None


def _coerce_grade(grade: Union[str, ToleranceGrade]) -> ToleranceGrade:
    parsed = parse_grade(grade)
    if parsed is None:
        raise ValueError(f"{grade!r} is not a valid tolerance grade")
    return parsed


__all__ = [
    "ToleranceGrade",
    "ToleranceRange",
    "ToleranceLimits",
    "LINEAR_TOLERANCE_TABLE",
    "MIN_DIMENSION",
    "MAX_DIMENSION",
    "validate_dimension",
    "find_range",
    "resolve_tolerance",
    "compute_limits",
    "get_general_tolerance_table",
    "parse_grade",
]
