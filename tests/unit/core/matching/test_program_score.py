#!/usr/bin/env python3
"""
Test suite for per-program match scoring.
"""

import unittest
from decimal import Decimal

from core.config_loader import EligibilityThresholds
from core.matching.constants import (
    BudgetRange,
    DesiredTimeline,
    EligibilityStatus,
    EmploymentStatus,
    FundsReadiness,
    ProgramType,
)
from core.matching.program_score import (
    _clamp_score,
    calculate_budget_compatibility,
    calculate_estimated_timeline,
    calculate_funds_readiness,
    calculate_goal_alignment,
    calculate_professional_compatibility,
    calculate_timeline_compatibility,
    determine_eligibility_status,
    get_region_matches,
    score_program,
)
from tests.fixtures.matching_fixtures import caribbean_client, make_option, make_profile, make_program


class TestBudgetCompatibility(unittest.TestCase):
    """Budget points against the client's investment band."""

    def test_no_budget_range_scores_zero(self):
        self.assertEqual(calculate_budget_compatibility(None, Decimal('250000')), 0)

    def test_lower_boundary_is_eighty_percent_of_band_min(self):
        band = BudgetRange.FROM_500K_TO_1M
        self.assertEqual(calculate_budget_compatibility(band, Decimal('400000')), 25)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('399999')), 15)

    def test_upper_tiers(self):
        band = BudgetRange.FROM_500K_TO_1M
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1000000')), 25)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1200000')), 15)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1200001')), 8)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1500000')), 8)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1500001')), 0)

    def test_under_500k_band(self):
        band = BudgetRange.UNDER_500K
        self.assertEqual(calculate_budget_compatibility(band, Decimal('100000')), 25)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('600000')), 15)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('750000')), 8)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('750001')), 0)

    def test_open_ended_band(self):
        band = BudgetRange.OVER_2M
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1600000')), 25)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('5000000')), 25)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('1599999')), 15)
        self.assertEqual(calculate_budget_compatibility(band, Decimal('100000')), 15)


class TestTimelineCompatibility(unittest.TestCase):
    """Timeline points against expected months."""

    def test_exact_expected_months_scores_full(self):
        self.assertEqual(calculate_timeline_compatibility(DesiredTimeline.ONE_YEAR, 12), 20)
        self.assertEqual(calculate_timeline_compatibility(DesiredTimeline.EXPLORING, 36), 20)
        self.assertEqual(calculate_timeline_compatibility(DesiredTimeline.IMMEDIATE, 6), 20)

    def test_tiers_beyond_expected(self):
        timeline = DesiredTimeline.ONE_YEAR
        self.assertEqual(calculate_timeline_compatibility(timeline, 13), 12)
        self.assertEqual(calculate_timeline_compatibility(timeline, 18), 12)
        self.assertEqual(calculate_timeline_compatibility(timeline, 19), 6)
        self.assertEqual(calculate_timeline_compatibility(timeline, 24), 6)
        self.assertEqual(calculate_timeline_compatibility(timeline, 25), 0)

    def test_missing_desired_timeline_scores_zero(self):
        self.assertEqual(calculate_timeline_compatibility(None, 3), 0)
        self.assertEqual(calculate_timeline_compatibility(None, 24), 0)

    def test_unknown_processing_time_scores_zero(self):
        self.assertEqual(calculate_timeline_compatibility(DesiredTimeline.TWO_YEARS, None), 0)
        self.assertEqual(calculate_timeline_compatibility(None, None), 0)


class TestGoalAlignment(unittest.TestCase):
    """Goal points are shared evenly across the client's goals."""

    def test_no_goals(self):
        self.assertEqual(calculate_goal_alignment([], ProgramType.CITIZENSHIP), 0.0)

    def test_single_compatible_goal(self):
        self.assertEqual(calculate_goal_alignment(['global_mobility'], ProgramType.RESIDENCY), 15.0)

    def test_family_security_requires_citizenship(self):
        self.assertEqual(calculate_goal_alignment(['family_security'], ProgramType.RESIDENCY), 0.0)
        self.assertEqual(calculate_goal_alignment(['family_security'], ProgramType.CITIZENSHIP), 15.0)

    def test_partial_alignment_is_fractional(self):
        goals = ['global_mobility', 'family_security']
        self.assertAlmostEqual(calculate_goal_alignment(goals, ProgramType.RESIDENCY), 7.5)

    def test_unknown_goal_contributes_nothing(self):
        goals = ['global_mobility', 'retirement']
        self.assertAlmostEqual(calculate_goal_alignment(goals, ProgramType.CITIZENSHIP), 7.5)

    def test_never_exceeds_cap(self):
        goals = ['global_mobility', 'tax_optimization', 'education']
        self.assertLessEqual(calculate_goal_alignment(goals, ProgramType.CITIZENSHIP), 15.0)


class TestSmallFactors(unittest.TestCase):
    """Professional, funds, region and eligibility helpers."""

    def test_professional_compatibility(self):
        self.assertEqual(
            calculate_professional_compatibility(EmploymentStatus.EMPLOYED, 'Engineer', 'Software'), 10
        )
        self.assertEqual(
            calculate_professional_compatibility(EmploymentStatus.BUSINESS_OWNER, None, None), 5
        )
        self.assertEqual(
            calculate_professional_compatibility(EmploymentStatus.SELF_EMPLOYED, 'Consultant', 'Finance'), 5
        )
        self.assertEqual(calculate_professional_compatibility(None, 'Engineer', None), 0)

    def test_funds_readiness(self):
        self.assertEqual(calculate_funds_readiness(FundsReadiness.READY), 5)
        self.assertEqual(calculate_funds_readiness(FundsReadiness.ONE_MONTH), 5)
        self.assertEqual(calculate_funds_readiness(FundsReadiness.THREE_MONTHS), 0)
        self.assertEqual(calculate_funds_readiness(None), 0)

    def test_region_matches(self):
        self.assertEqual(get_region_matches('Portugal', ['Caribbean', 'Europe']), ['Europe'])
        self.assertEqual(get_region_matches('Portugal', ['Atlantis']), [])
        self.assertEqual(get_region_matches('Portugal', []), [])

    def test_eligibility_boundaries(self):
        thresholds = EligibilityThresholds()
        expected = {
            100: EligibilityStatus.QUALIFIED,
            80: EligibilityStatus.QUALIFIED,
            79: EligibilityStatus.LIKELY_QUALIFIED,
            60: EligibilityStatus.LIKELY_QUALIFIED,
            59: EligibilityStatus.NEEDS_REVIEW,
            40: EligibilityStatus.NEEDS_REVIEW,
            39: EligibilityStatus.NOT_QUALIFIED,
            0: EligibilityStatus.NOT_QUALIFIED,
        }
        for score, status in expected.items():
            with self.subTest(score=score):
                self.assertEqual(determine_eligibility_status(score, thresholds), status)

    def test_custom_eligibility_thresholds(self):
        thresholds = EligibilityThresholds(qualified=90, likely_qualified=70, needs_review=50)
        self.assertEqual(determine_eligibility_status(85, thresholds), EligibilityStatus.LIKELY_QUALIFIED)
        self.assertEqual(determine_eligibility_status(45, thresholds), EligibilityStatus.NOT_QUALIFIED)

    def test_estimated_timeline(self):
        self.assertEqual(calculate_estimated_timeline(6, FundsReadiness.READY), "5 months (estimated)")
        self.assertEqual(calculate_estimated_timeline(6, FundsReadiness.ONE_MONTH), "6 months (estimated)")
        self.assertEqual(calculate_estimated_timeline(6, FundsReadiness.NOT_READY), "9 months (estimated)")
        self.assertEqual(calculate_estimated_timeline(6, None), "6 months (estimated)")
        self.assertEqual(calculate_estimated_timeline(None, FundsReadiness.READY), "Processing time to be confirmed")

    def test_clamp_rounds_half_up(self):
        self.assertEqual(_clamp_score(27.5), 28)
        self.assertEqual(_clamp_score(27.4), 27)
        self.assertEqual(_clamp_score(150), 100)
        self.assertEqual(_clamp_score(-3), 0)


class TestScoreProgram(unittest.TestCase):
    """End-to-end scoring of one program."""

    def test_st_kitts_example(self):
        """Caribbean client against a 250k, 6-month St. Kitts program."""
        print("\n📊 UNIT Test: St. Kitts example")

        match = score_program(caribbean_client(), make_program())

        self.assertEqual(match.score_components['geography'], 25)
        self.assertEqual(match.score_components['budget'], 15)
        self.assertEqual(match.score_components['timeline'], 20)
        self.assertEqual(match.score_components['goals'], 15)
        self.assertEqual(match.score_components['professional'], 0)
        self.assertEqual(match.score_components['funds'], 5)
        self.assertEqual(match.match_score, 80)
        self.assertEqual(match.eligibility_status, EligibilityStatus.QUALIFIED)

        self.assertEqual(match.match_reasons, [
            'Geographic preference match: Caribbean',
            'Processing timeline matches client expectations',
            'Program type aligns with client goals',
            'Source of funds documentation ready',
        ])
        self.assertEqual(match.considerations, ['Investment budget may require adjustment'])
        self.assertEqual(match.estimated_timeline, "5 months (estimated)")

        print(f"  ✓ Match score: {match.match_score} ({match.eligibility_status.value})")

    def test_requirements_for_citizenship_program(self):
        match = score_program(caribbean_client(), make_program())
        self.assertEqual(match.requirements, [
            'Clean criminal background check',
            'Source of funds documentation',
            'Medical examination',
            'Valid passport',
            'Oath of allegiance',
            'Residency requirements (if applicable)',
            'Minimum investment of $250,000',
        ])

    def test_requirements_for_residency_program(self):
        program = make_program(program_type='residency', min_investment=Decimal('1250000'))
        match = score_program(make_profile(), program)
        self.assertNotIn('Oath of allegiance', match.requirements)
        self.assertEqual(match.requirements[-1], 'Minimum investment of $1,250,000')

    def test_empty_profile_scores_zero(self):
        match = score_program(make_profile(), make_program())

        self.assertEqual(match.score_components, {
            'geography': 0,
            'budget': 0,
            'timeline': 0,
            'goals': 0.0,
            'professional': 0,
            'funds': 0,
        })
        self.assertEqual(match.match_score, 0)
        self.assertEqual(match.eligibility_status, EligibilityStatus.NOT_QUALIFIED)
        self.assertEqual(match.match_reasons, [])
        self.assertEqual(match.considerations, [])

    def test_no_geography_or_budget_caps_at_fifty(self):
        profile = make_profile(
            desired_timeline='1_year',
            primary_goals=['global_mobility'],
            employment_status='employed',
            current_profession='Engineer',
            industry='Software',
            source_of_funds_readiness='ready',
        )
        match = score_program(profile, make_program())

        self.assertEqual(match.match_score, 50)
        self.assertEqual(match.eligibility_status, EligibilityStatus.NEEDS_REVIEW)

    def test_fractional_goal_points_round_half_up(self):
        profile = make_profile(
            desired_timeline='2_years',
            primary_goals=['global_mobility', 'family_security'],
        )
        match = score_program(profile, make_program(program_type='residency'))

        self.assertAlmostEqual(match.score_components['goals'], 7.5)
        self.assertEqual(match.match_score, 28)

    def test_eligibility_applies_to_rounded_score(self):
        profile = caribbean_client(
            desired_timeline='1_year',
            primary_goals=['global_mobility', 'family_security'],
            employment_status='self_employed',
            current_profession='Consultant',
            industry='Finance',
        )
        program = make_program(
            program_type='residency',
            min_investment=Decimal('400000'),
            processing_time_months=18,
        )
        match = score_program(profile, program)

        self.assertAlmostEqual(sum(match.score_components.values()), 79.5)
        self.assertEqual(match.match_score, 80)
        self.assertEqual(match.eligibility_status, EligibilityStatus.QUALIFIED)

    def test_unknown_processing_time(self):
        match = score_program(caribbean_client(), make_program(processing_time_months=None))

        self.assertEqual(match.score_components['timeline'], 0)
        self.assertEqual(match.estimated_timeline, "Processing time to be confirmed")
        self.assertNotIn('Processing timeline matches client expectations', match.match_reasons)
        self.assertNotIn('Processing timeline may exceed desired timeframe', match.considerations)

    def test_slow_program_adds_timeline_consideration(self):
        match = score_program(caribbean_client(), make_program(processing_time_months=18))

        self.assertEqual(match.score_components['timeline'], 12)
        self.assertIn('Processing timeline may exceed desired timeframe', match.considerations)

    def test_funds_not_ready_consideration(self):
        match = score_program(caribbean_client(source_of_funds_readiness='not_ready'), make_program())

        self.assertEqual(match.score_components['funds'], 0)
        self.assertIn('Source of funds documentation needs preparation', match.considerations)
        self.assertEqual(match.estimated_timeline, "9 months (estimated)")

    def test_budget_in_band_adds_reason(self):
        match = score_program(caribbean_client(), make_program(min_investment=Decimal('400000')))

        self.assertEqual(match.score_components['budget'], 25)
        self.assertIn('Investment budget aligns with program requirements', match.match_reasons)
        self.assertEqual(match.match_score, 90)

    def test_investment_options_are_attached(self):
        options = [make_option(sort_order=1), make_option(sort_order=2, option_name='Real Estate')]
        match = score_program(caribbean_client(), make_program(), options)

        self.assertEqual([o.sort_order for o in match.investment_options], [1, 2])

    def test_custom_thresholds(self):
        thresholds = EligibilityThresholds(qualified=85, likely_qualified=60, needs_review=40)
        match = score_program(caribbean_client(), make_program(), thresholds=thresholds)

        self.assertEqual(match.eligibility_status, EligibilityStatus.LIKELY_QUALIFIED)


if __name__ == "__main__":
    unittest.main()
