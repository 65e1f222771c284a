"""
Design Standards Knowledge Module.

Provides general tolerances for linear dimensions (JIS B 0405 / ISO 2768-1):
the size range table, dimension validation, range lookup, tolerance
resolution and limit computation.

Reference Standards:
- JIS B 0405:1991 - General tolerances
- ISO 2768-1:1989 - General tolerances - Linear and angular
"""

from .general_tolerances import (
    LINEAR_TOLERANCE_TABLE,
    MAX_DIMENSION,
    MIN_DIMENSION,
    ToleranceGrade,
    ToleranceLimits,
    ToleranceRange,
    compute_limits,
    find_range,
    get_general_tolerance_table,
    parse_grade,
    resolve_tolerance,
    validate_dimension,
)

__all__ = [
    # Data
    "ToleranceGrade",
    "ToleranceRange",
    "ToleranceLimits",
    "LINEAR_TOLERANCE_TABLE",
    "MIN_DIMENSION",
    "MAX_DIMENSION",
    # Lookup
    "validate_dimension",
    "find_range",
    "resolve_tolerance",
    "compute_limits",
    "get_general_tolerance_table",
    "parse_grade",
]
