import os
import logging
from dotenv import load_dotenv
load_dotenv()
from .domain.models import (
    AssessmentComponent,
    AssessmentType,
    GradeOverview,
    NeededScoreOutcome,
    NeededScoreResult,
    UnitGradingConfig,
    UnitState,
    UnitStatus,
    load_assessments,
)
from .domain.calculators import (
    NOMINAL_TOTAL_WEIGHT,
    ON_TRACK_RATIO,
    NeededScoreCalculator,
    OverviewCalculator,
    PassFailClassifier,
    classify,
    classify_unit,
    compute_needed_score,
    compute_overview,
)
from .domain.config import GradeScale, GradingDefaults, resolve_grading_config
from .domain.exceptions import GradingConfigError
def setup_logging(level=None):
    level = level or os.environ.get('LOG_LEVEL', 'INFO')
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level)
    return logging.getLogger(__name__)
