import pytest

from gradeplanner.domain.calculators import OverviewCalculator, aggregate, compute_overview


class TestPartialAverage:
    def test_all_graded(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=40, obtained_score=16),
            assessment(id=2, weight=60, obtained_score=12),
        ])
        # (16*40 + 12*60) / 100
        assert result.partial_average == pytest.approx(13.6)
        assert result.graded_weight == 100
        assert result.remaining_weight == 0
        assert result.total_weight == 100

    def test_only_graded_items_count(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=50, obtained_score=14),
            assessment(id=2, weight=50, obtained_score=None),
        ])
        assert result.partial_average == 14
        assert result.graded_weight == 50
        assert result.remaining_weight == 50
        assert result.total_weight == 100

    def test_nothing_graded(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=50),
            assessment(id=2, weight=50),
        ])
        assert result.partial_average is None
        assert result.projected_average is None
        assert result.graded_weight == 0
        assert result.remaining_weight == 100

    def test_zero_score_counts_as_graded(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=30, obtained_score=0),
            assessment(id=2, weight=70),
        ])
        assert result.partial_average == 0
        assert result.graded_weight == 30

    def test_empty_collection(self):
        result = compute_overview([])
        assert result.partial_average is None
        assert result.projected_average is None
        assert result.required_score is None
        assert result.graded_weight == 0
        assert result.remaining_weight == 100
        assert result.total_weight == 0


class TestProjection:
    def test_with_hypothetical_score(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=50, obtained_score=16),
            assessment(id=2, weight=50),
        ], 12)
        # (16*50 + 12*50) / 100
        assert result.projected_average == pytest.approx(14)

    def test_without_hypothetical_assumes_zero(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=40, obtained_score=18),
            assessment(id=2, weight=60),
        ])
        assert result.projected_average == pytest.approx(7.2)
        assert result.partial_average == pytest.approx(18)

    def test_hypothetical_ignored_when_fully_graded(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=40, obtained_score=10),
            assessment(id=2, weight=60, obtained_score=10),
        ], 20)
        assert result.projected_average == pytest.approx(10)

    def test_hypothetical_with_nothing_graded(self, assessment):
        result = compute_overview([assessment(id=1, weight=100)], 15)
        assert result.projected_average == pytest.approx(15)
        assert result.partial_average is None

    def test_required_score_left_empty(self, half_graded):
        assert compute_overview(half_graded, 10).required_score is None


class TestWeights:
    def test_remaining_weight_clamped(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=70, obtained_score=10),
            assessment(id=2, weight=60, obtained_score=10),
        ])
        assert result.graded_weight == 130
        assert result.remaining_weight == 0

    def test_total_weight_need_not_be_100(self, assessment):
        result = compute_overview([
            assessment(id=1, weight=20, obtained_score=10),
            assessment(id=2, weight=30),
        ])
        assert result.total_weight == 50
        # remaining is measured against the nominal 100, not the actual total
        assert result.remaining_weight == 80
        assert result.projected_average == pytest.approx(2)

    def test_accepts_generator(self, assessment):
        items = (assessment(id=i, weight=25, obtained_score=8) for i in range(4))
        result = OverviewCalculator().calculate(items)
        assert result.graded_weight == 100
        assert result.total_weight == 100


class TestAggregate:
    def test_sums(self, assessment):
        agg = aggregate([
            assessment(id=1, weight=40, obtained_score=5),
            assessment(id=2, weight=60),
        ])
        assert agg.total_weight == 100
        assert agg.graded_weight == 40
        assert agg.weighted_score_sum == 200
        assert agg.remaining_weight == 60
        assert agg.graded_average == 5

    def test_graded_average_without_grades(self, assessment):
        agg = aggregate([assessment(id=1, weight=100)])
        assert agg.graded_average == 0

    def test_max_score_is_not_read(self, assessment):
        with_max = aggregate([assessment(id=1, weight=50, obtained_score=8, max_score=10)])
        without_max = aggregate([assessment(id=1, weight=50, obtained_score=8)])
        assert with_max == without_max
