"""Static label text for the calculator front end (JIS wording)."""

from typing import Dict

from tolcalc.core.knowledge import ToleranceGrade

TITLE = "普通公差計算ツール"
SUBTITLE = "JIS B 0405-1991 長さ寸法に対する普通公差"

DIMENSION_LABEL = "基準寸法 (mm)"
GRADE_LABEL = "公差等級"
RESULT_HEADING = "計算結果"

TOLERANCE_LABEL = "許容差"
UPPER_LIMIT_LABEL = "上限寸法"
LOWER_LIMIT_LABEL = "下限寸法"

GRADE_LABELS: Dict[ToleranceGrade, str] = {
    ToleranceGrade.FINE: "精級 (f)",
    ToleranceGrade.MEDIUM: "中級 (m)",
    ToleranceGrade.COARSE: "粗級 (c)",
    ToleranceGrade.VERY_COARSE: "極粗級 (v)",
}

# Shown next to the input while the text is non-empty but out of domain
DIMENSION_RANGE_ERROR = "0.5mm以上、4000mm以下の数値を入力してください。"
# Shown in the result area
INVALID_DIMENSION_MESSAGE = "有効な寸法を入力してください"
UNSPECIFIED_TOLERANCE_MESSAGE = "この条件の公差は規定されていません"
INVALID_GRADE_MESSAGE = "公差等級を選択してください (f, m, c, v)"

SCOPE_NOTE = (
    "このツールは JIS B 0405-1991（長さ寸法及び角度寸法に対する普通公差）の"
    "「長さ寸法」の表に基づいています。"
    "面取り部分の長さ寸法や角度寸法には別の公差が適用されます。"
)
