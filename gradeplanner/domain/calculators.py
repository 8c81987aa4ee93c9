import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional
from .models import (
    AssessmentComponent,
    GradeOverview,
    NeededScoreOutcome,
    NeededScoreResult,
    UnitGradingConfig,
    UnitState,
    UnitStatus,
)
logger = logging.getLogger(__name__)
# Weights are authored as percentage points of a unit; the formulas never
# derive this from the data.
NOMINAL_TOTAL_WEIGHT = 100.0
ON_TRACK_RATIO = 0.7
@dataclass(frozen=True)
class WeightedAggregate:
    total_weight: float
    graded_weight: float
    weighted_score_sum: float
    @property
    def remaining_weight(self) -> float:
        return max(0.0, NOMINAL_TOTAL_WEIGHT - self.graded_weight)
    @property
    def graded_average(self) -> float:
        """Average over graded weight, 0 when nothing is graded."""
        if self.graded_weight > 0:
            return self.weighted_score_sum / self.graded_weight
        return 0.0
def aggregate(assessments: Iterable[AssessmentComponent]) -> WeightedAggregate:
    total_weight = 0.0
    graded_weight = 0.0
    weighted_score_sum = 0.0
    for a in assessments:
        total_weight += a.weight
        if a.obtained_score is None:
            continue
        graded_weight += a.weight
        weighted_score_sum += a.obtained_score * a.weight
    return WeightedAggregate(total_weight, graded_weight, weighted_score_sum)
class GradeCalculator:
    def _aggregate(self, assessments: Iterable[AssessmentComponent]) -> WeightedAggregate:
        agg = aggregate(assessments)
        if agg.total_weight and agg.total_weight != NOMINAL_TOTAL_WEIGHT:
            logger.debug("Unit weights sum to %s, formulas assume %s", agg.total_weight, NOMINAL_TOTAL_WEIGHT)
        return agg
class OverviewCalculator(GradeCalculator):
    def calculate(self, assessments: Iterable[AssessmentComponent], hypothetical_score: Optional[float] = None) -> GradeOverview:
        agg = self._aggregate(assessments)
        partial_average = None
        if agg.graded_weight > 0:
            partial_average = agg.weighted_score_sum / agg.graded_weight
        remaining = agg.remaining_weight
        projected = None
        if hypothetical_score is not None and remaining > 0:
            projected = (agg.weighted_score_sum + hypothetical_score * remaining) / NOMINAL_TOTAL_WEIGHT
        elif agg.graded_weight > 0:
            # Ungraded weight counts as zero.
            projected = agg.weighted_score_sum / NOMINAL_TOTAL_WEIGHT
        return GradeOverview(
            partial_average=partial_average,
            projected_average=projected,
            required_score=None,
            graded_weight=agg.graded_weight,
            remaining_weight=remaining,
            total_weight=agg.total_weight
        )
class NeededScoreCalculator(GradeCalculator):
    def calculate(self, assessments: Iterable[AssessmentComponent], minimum_passing_grade: float,
                  maximum_grade: float, has_retake_exam: bool) -> NeededScoreResult:
        agg = self._aggregate(assessments)
        remaining = agg.remaining_weight
        if remaining <= 0:
            if agg.graded_average >= minimum_passing_grade:
                return NeededScoreResult(None, NeededScoreOutcome.ALREADY_PASSED)
            return NeededScoreResult(None, NeededScoreOutcome.FULLY_GRADED_FAILED)
        points_needed_total = minimum_passing_grade * NOMINAL_TOTAL_WEIGHT
        points_missing = points_needed_total - agg.weighted_score_sum
        required = points_missing / remaining
        if required <= 0:
            return NeededScoreResult(0.0, NeededScoreOutcome.ALREADY_PASSED)
        if required > maximum_grade:
            outcome = NeededScoreOutcome.NEEDS_RETAKE if has_retake_exam else NeededScoreOutcome.UNREACHABLE
            return NeededScoreResult(required, outcome)
        return NeededScoreResult(required, NeededScoreOutcome.STILL_CONTESTED)
class PassFailClassifier:
    def __init__(self, overview_calculator: Optional[OverviewCalculator] = None,
                 needed_score_calculator: Optional[NeededScoreCalculator] = None):
        self.overview_calculator = overview_calculator or OverviewCalculator()
        self.needed_score_calculator = needed_score_calculator or NeededScoreCalculator()
    def classify(self, assessments: Iterable[AssessmentComponent], minimum_passing_grade: float,
                 maximum_grade: float, has_retake_exam: bool) -> UnitStatus:
        assessments = list(assessments)
        overview = self.overview_calculator.calculate(assessments)
        needed = self.needed_score_calculator.calculate(
            assessments, minimum_passing_grade, maximum_grade, has_retake_exam
        )
        full_overview = replace(overview, required_score=needed.required_score)
        if overview.remaining_weight <= 0:
            average = aggregate(assessments).graded_average
            status = UnitState.PASSED if average >= minimum_passing_grade else UnitState.FAILED
        else:
            nn = needed.required_score if needed.required_score is not None else 0.0
            if nn <= 0:
                status = UnitState.PASSED
            elif nn <= maximum_grade * ON_TRACK_RATIO:
                status = UnitState.ON_TRACK
            elif nn <= maximum_grade:
                status = UnitState.AT_RISK
            elif has_retake_exam:
                status = UnitState.NEEDS_RETAKE
            else:
                status = UnitState.UNREACHABLE
        logger.debug("Classified %d assessments as %s (required=%s)", len(assessments), status.value, needed.required_score)
        return UnitStatus(status=status, overview=full_overview)
    def classify_unit(self, assessments: Iterable[AssessmentComponent], config: UnitGradingConfig) -> UnitStatus:
        return self.classify(
            assessments, config.minimum_passing_grade, config.maximum_grade, config.has_retake_exam
        )
_overview_calculator = OverviewCalculator()
_needed_score_calculator = NeededScoreCalculator()
_classifier = PassFailClassifier(_overview_calculator, _needed_score_calculator)
def compute_overview(assessments: Iterable[AssessmentComponent], hypothetical_score: Optional[float] = None) -> GradeOverview:
    return _overview_calculator.calculate(list(assessments), hypothetical_score)
def compute_needed_score(assessments: Iterable[AssessmentComponent], minimum_passing_grade: float,
                         maximum_grade: float, has_retake_exam: bool) -> NeededScoreResult:
    return _needed_score_calculator.calculate(
        list(assessments), minimum_passing_grade, maximum_grade, has_retake_exam
    )
def classify(assessments: Iterable[AssessmentComponent], minimum_passing_grade: float,
             maximum_grade: float, has_retake_exam: bool) -> UnitStatus:
    return _classifier.classify(assessments, minimum_passing_grade, maximum_grade, has_retake_exam)
def classify_unit(assessments: Iterable[AssessmentComponent], config: UnitGradingConfig) -> UnitStatus:
    return _classifier.classify_unit(assessments, config)
