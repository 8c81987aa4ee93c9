from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, Iterable, List
class AssessmentType(Enum):
    ASSESSMENT = "assessment"
    ACTIVITY = "activity"
    EVENT = "event"
    EXAM = "exam"
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    PROJECT = "project"
    PARTICIPATION = "participation"
    FINAL_EXAM = "final_exam"
    OTHER = "other"
    @classmethod
    def parse(cls, value) -> 'AssessmentType':
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER
@dataclass(frozen=True)
class AssessmentComponent:
    id: Any
    weight: float
    obtained_score: Optional[float] = None
    max_score: Optional[float] = None
    unit_id: Any = None
    name: str = ""
    type: AssessmentType = AssessmentType.OTHER
    due_at: Optional[str] = None
    @property
    def is_graded(self) -> bool:
        return self.obtained_score is not None
    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> 'AssessmentComponent':
        obtained = row.get('obtained_score')
        max_score = row.get('max_score')
        return cls(
            id=row.get('id'),
            unit_id=row.get('unit_id'),
            name=row.get('name') or "",
            type=AssessmentType.parse(row.get('type')),
            due_at=row.get('due_at'),
            weight=float(row.get('weight') or 0.0),
            obtained_score=float(obtained) if obtained is not None else None,
            max_score=float(max_score) if max_score is not None else None,
        )
    def to_dict(self):
        return {
            "id": self.id,
            "unit_id": self.unit_id,
            "name": self.name,
            "type": self.type.value,
            "due_at": self.due_at,
            "weight": self.weight,
            "obtained_score": self.obtained_score,
            "max_score": self.max_score
        }
@dataclass(frozen=True)
class UnitGradingConfig:
    minimum_passing_grade: float
    maximum_grade: float
    has_retake_exam: bool = False
@dataclass(frozen=True)
class GradeOverview:
    partial_average: Optional[float]
    projected_average: Optional[float]
    required_score: Optional[float]
    graded_weight: float
    remaining_weight: float
    total_weight: float
    def to_dict(self):
        return {
            "partial_average": self.partial_average,
            "projected_average": self.projected_average,
            "required_score": self.required_score,
            "graded_weight": self.graded_weight,
            "remaining_weight": self.remaining_weight,
            "total_weight": self.total_weight
        }
class NeededScoreOutcome(Enum):
    ALREADY_PASSED = "already_passed"
    STILL_CONTESTED = "still_contested"
    UNREACHABLE = "unreachable"
    NEEDS_RETAKE = "needs_retake"
    FULLY_GRADED_FAILED = "fully_graded_failed"
@dataclass(frozen=True)
class NeededScoreResult:
    required_score: Optional[float]
    outcome: NeededScoreOutcome
class UnitState(Enum):
    PASSED = "passed"
    FAILED = "failed"
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    UNREACHABLE = "unreachable"
    NEEDS_RETAKE = "needs_retake"
@dataclass(frozen=True)
class UnitStatus:
    status: UnitState
    overview: GradeOverview
    @property
    def is_critical(self) -> bool:
        return self.status in (UnitState.FAILED, UnitState.UNREACHABLE)
    def to_dict(self):
        return {
            "status": self.status.value,
            "overview": self.overview.to_dict(),
            "is_critical": self.is_critical
        }
def load_assessments(rows: Iterable[Dict[str, Any]]) -> List[AssessmentComponent]:
    return [AssessmentComponent.from_dict(row) for row in rows]
