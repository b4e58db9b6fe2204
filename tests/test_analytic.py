"""Tests for the exact absorption probabilities."""

from fractions import Fraction

import pytest

from astumian.analytic import (
    REFERENCE_RATIOS,
    effective_matrix,
    expected_ratio,
    win_probabilities,
)
from astumian.matrices import GAME_A, GAME_B, NUM_STATES
from astumian.selector import GameMode


class TestEffectiveMatrix:

    def test_fixed_modes_match_float_tables(self):
        for mode, table in [(GameMode.FIXED_A, GAME_A), (GameMode.FIXED_B, GAME_B)]:
            exact = effective_matrix(mode)
            for s in range(NUM_STATES):
                assert [float(p) for p in exact[s]] == pytest.approx(list(table[s]))

    def test_uniform_is_the_average(self):
        exact = effective_matrix(GameMode.UNIFORM_SWITCH)
        assert exact[2] == [0, Fraction(9, 72), Fraction(53, 72), Fraction(10, 72), 0]

    def test_correlated_mixes_only_state_three(self):
        exact = effective_matrix(GameMode.CORRELATED_SWITCH)
        a = effective_matrix(GameMode.FIXED_A)
        assert exact[1] == a[1]
        assert exact[2] == a[2]
        assert exact[3] == [0, 0, Fraction(13, 108), Fraction(77, 108), Fraction(18, 108)]


class TestWinProbabilities:

    def test_boundaries(self):
        for mode in GameMode:
            h = win_probabilities(mode)
            assert h[0] == 0
            assert h[4] == 1

    def test_single_games(self):
        assert win_probabilities(GameMode.FIXED_A)[2] == Fraction(4, 9)
        assert win_probabilities(GameMode.FIXED_B)[2] == Fraction(4, 9)

    def test_uniform_is_a_biased_ruin(self):
        """Down 9/72, up 10/72 everywhere: P(win from 2) = 1 / (1 + 0.81)."""
        assert win_probabilities(GameMode.UNIFORM_SWITCH)[2] == Fraction(100, 181)

    def test_monotone_in_state(self):
        for mode in GameMode:
            h = win_probabilities(mode)
            assert h == sorted(h)


class TestExpectedRatio:

    def test_single_games_lose(self):
        assert expected_ratio(GameMode.FIXED_A) == Fraction(5, 4)
        assert expected_ratio(GameMode.FIXED_B) == Fraction(5, 4)

    def test_uniform_switch_wins(self):
        assert expected_ratio(GameMode.UNIFORM_SWITCH) == Fraction(81, 100)

    def test_correlated_switch_loses_more(self):
        ratio = expected_ratio(GameMode.CORRELATED_SWITCH)
        assert ratio == Fraction(155, 108)
        assert ratio > expected_ratio(GameMode.FIXED_A)

    def test_reference_ratios_agree(self):
        for mode, value in REFERENCE_RATIOS.items():
            assert float(expected_ratio(mode)) == pytest.approx(value)

    def test_no_printed_reference_for_correlated(self):
        assert GameMode.CORRELATED_SWITCH not in REFERENCE_RATIOS
