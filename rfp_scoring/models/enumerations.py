from enum import Enum

class QuestionType(str, Enum):
    NUMERIC = "numeric"          # Tiered threshold ladder or presence
    YESNO = "yesno"
    SELECT = "select"            # Optional option -> fraction mapping
    MULTISELECT = "multiselect"
    TEXT = "text"
    FILE = "file"

class QualificationTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    QualificationTier.EXCELLENT: "Excellent",
    QualificationTier.GOOD: "Good",
    QualificationTier.FAIR: "Fair",
    QualificationTier.NEEDS_IMPROVEMENT: "Needs Improvement",
}
