import os
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any
from .exceptions import GradingConfigError
from .models import UnitGradingConfig
logger = logging.getLogger(__name__)
DEFAULT_MINIMUM_PASSING_GRADE = 10.0
class GradeScale(Enum):
    ZERO_TO_TEN = "0-10"
    ZERO_TO_TWENTY = "0-20"
    ZERO_TO_HUNDRED = "0-100"
    @property
    def maximum_grade(self) -> float:
        return float(self.value.split('-')[1])
    @classmethod
    def parse(cls, value) -> Optional['GradeScale']:
        if value is None or value == '':
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise GradingConfigError(f"Unknown grade scale: {value!r}")
DEFAULT_GRADE_SCALE = GradeScale.ZERO_TO_TWENTY
@dataclass(frozen=True)
class GradingDefaults:
    minimum_passing_grade: float = DEFAULT_MINIMUM_PASSING_GRADE
    grade_scale: GradeScale = DEFAULT_GRADE_SCALE
    @classmethod
    def from_env(cls) -> 'GradingDefaults':
        raw_min = os.environ.get('GRADEPLANNER_DEFAULT_MINIMUM_PASSING_GRADE')
        raw_scale = os.environ.get('GRADEPLANNER_DEFAULT_GRADE_SCALE')
        minimum = DEFAULT_MINIMUM_PASSING_GRADE
        if raw_min:
            try:
                minimum = float(raw_min)
            except ValueError:
                raise GradingConfigError(
                    f"GRADEPLANNER_DEFAULT_MINIMUM_PASSING_GRADE must be a number, got {raw_min!r}"
                )
        scale = GradeScale.parse(raw_scale) or DEFAULT_GRADE_SCALE
        return cls(minimum_passing_grade=minimum, grade_scale=scale)
def resolve_grading_config(unit: Dict[str, Any], course: Optional[Dict[str, Any]] = None,
                           defaults: Optional[GradingDefaults] = None) -> UnitGradingConfig:
    """
    Builds the grading config of a unit, falling back to its course and then
    to the global defaults.

    The course is only consulted when the unit has no grade scale of its own.
    In that case a falsy unit minimum (missing or 0) is replaced by the
    course minimum.
    """
    defaults = defaults or GradingDefaults.from_env()
    unit_minimum = unit.get('minimum_passing_grade')
    minimum = unit_minimum if unit_minimum is not None else defaults.minimum_passing_grade
    maximum = defaults.grade_scale.maximum_grade
    unit_scale = GradeScale.parse(unit.get('grade_scale'))
    if unit_scale is not None:
        maximum = unit_scale.maximum_grade
    elif course:
        course_minimum = course.get('minimum_passing_grade')
        if not unit_minimum and course_minimum is not None:
            minimum = course_minimum
        course_scale = GradeScale.parse(course.get('grade_scale'))
        if course_scale is not None:
            maximum = course_scale.maximum_grade
    config = UnitGradingConfig(
        minimum_passing_grade=float(minimum),
        maximum_grade=maximum,
        has_retake_exam=bool(unit.get('has_retake_exam'))
    )
    logger.debug("Resolved grading config %s", config)
    return config
