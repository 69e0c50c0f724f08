"""
Test Suite: Transport Configuration
===================================

Verifies the TransportParameters dataclass: trajectory construction from
names, trap frequency handling, sanity warnings and the standard presets.
"""

import warnings

import numpy as np
import pytest

from harmonic_transport import (
    LewisRiesenfeld,
    MinimumJerk,
    TransportParameters,
    fractional_trajectory,
    get_standard_invariant_transport,
    get_standard_tweezer_transport,
    trajectory,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def invariant_move() -> TransportParameters:
    return TransportParameters(
        total_time=100e-6,
        total_distance=20e-6,
        start_position=5e-6,
        trajectory_type="lewis_riesenfeld",
        trap_frequency_hz=50e3,
    )


# =============================================================================
# CATEGORY 1: PRESETS
# =============================================================================

class TestPresets:

    def test_presets_raise_no_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            get_standard_tweezer_transport()
            get_standard_invariant_transport()

    def test_tweezer_preset_is_minimum_jerk(self):
        move = get_standard_tweezer_transport()
        assert move.build_trajectory() == MinimumJerk(100e-6, 20e-6)
        assert move.extra_parameters() == ()

    def test_invariant_preset(self):
        move = get_standard_invariant_transport()
        traj = move.build_trajectory()
        assert isinstance(traj, LewisRiesenfeld)
        assert traj.classical == MinimumJerk(100e-6, 20e-6)
        assert move.omega == pytest.approx(2 * np.pi * 50e3)


# =============================================================================
# CATEGORY 2: EVALUATION
# =============================================================================

class TestEvaluation:

    def test_start_and_end_positions(self, invariant_move):
        assert invariant_move.position(0.0) == invariant_move.start_position
        assert invariant_move.position(100e-6) == pytest.approx(invariant_move.end_position())
        assert invariant_move.end_position() == pytest.approx(25e-6)

    def test_matches_trajectory_functions(self, invariant_move):
        traj = invariant_move.build_trajectory()
        omega = invariant_move.omega
        for t in [10e-6, 37e-6, 80e-6]:
            assert invariant_move.position(t) == trajectory(traj, t, 5e-6, omega)
            assert invariant_move.fractional_position(t) == fractional_trajectory(traj, t, omega)

    def test_extra_parameters(self, invariant_move):
        assert invariant_move.extra_parameters() == (invariant_move.omega,)

    def test_array_times(self, invariant_move):
        positions = invariant_move.position(np.linspace(0.0, 100e-6, 5))
        assert isinstance(positions, np.ndarray)
        assert positions.shape == (5,)

    def test_missing_trap_frequency_raises(self):
        move = TransportParameters(1.0, 1.0, trajectory_type="lr")
        assert move.omega is None
        with pytest.raises(ValueError, match="trap_frequency_hz"):
            move.extra_parameters()
        with pytest.raises(ValueError):
            move.position(0.5)

    def test_trap_frequency_ignored_for_classical_trajectories(self):
        move = TransportParameters(2.0, 10.0, trajectory_type="linear_ramp", trap_frequency_hz=1e3)
        assert move.extra_parameters() == ()
        assert move.position(1.0) == 5.0

    def test_unsupported_combination_raises_on_evaluation(self):
        move = TransportParameters(
            1.0, 1.0,
            trajectory_type="lewis_riesenfeld",
            classical_type="linear_ramp",
            trap_frequency_hz=10.0,
        )
        with pytest.raises(NotImplementedError):
            move.position(0.5)

    def test_unknown_trajectory_type_raises(self):
        with pytest.raises(ValueError, match="Unknown trajectory"):
            TransportParameters(1.0, 1.0, trajectory_type="spline")


# =============================================================================
# CATEGORY 3: SANITY WARNINGS
# =============================================================================

class TestSanityWarnings:
    """
    Doubtful but legal parameters warn, they never raise.

    Physics:
    - The Lewis-Riesenfeld correction peaks at 10/(√3 (ωT)²) × d
    - ωT < 2.4 means the trap excursion exceeds the transport distance
    """

    def test_non_positive_total_time_warns(self):
        with pytest.warns(UserWarning, match="not positive"):
            TransportParameters(0.0, 1.0)

    def test_non_positive_trap_frequency_warns(self):
        with pytest.warns(UserWarning, match="trap_frequency_hz"):
            TransportParameters(1.0, 1.0, trap_frequency_hz=-5.0)

    def test_fast_invariant_transport_warns(self):
        with pytest.warns(UserWarning, match="overshoot"):
            move = TransportParameters(
                1e-6, 1e-6, trajectory_type="lewis_riesenfeld", trap_frequency_hz=50e3
            )
        assert move.peak_correction() > 1

    def test_peak_correction_value(self, invariant_move):
        omega_T = 2 * np.pi * 50e3 * 100e-6
        assert invariant_move.peak_correction() == pytest.approx(10 / np.sqrt(3) / omega_T**2)

    def test_peak_correction_matches_sampled_maximum(self, invariant_move):
        traj = invariant_move.build_trajectory()
        times = np.linspace(0.0, 100e-6, 20001)
        correction = (
            fractional_trajectory(traj, times, invariant_move.omega)
            - fractional_trajectory(traj.classical, times)
        )
        assert np.max(np.abs(correction)) == pytest.approx(invariant_move.peak_correction(), rel=1e-4)

    def test_peak_correction_none_for_classical(self):
        assert get_standard_tweezer_transport().peak_correction() is None

    def test_peak_correction_none_without_formula(self):
        """No Lewis-Riesenfeld formula on a linear ramp, so no peak estimate or warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            move = TransportParameters(
                1.0, 1.0,
                trajectory_type="lr",
                classical_type="linear",
                trap_frequency_hz=0.1,
            )
        assert move.peak_correction() is None
