"""
Configuration Dataclasses for Transport Trajectories
====================================================

Dataclasses grouping the parameters of a single transport move, so that a
surrounding simulation can pass one object around instead of a trajectory,
a start position and a trap frequency separately.

    BAD:
    ```python
    x = trajectory(get_trajectory("lr", T, d), t, x_start, 2 * np.pi * f_trap)
    ```

    GOOD:
    ```python
    x = move.position(t)
    ```

PRESET CONFIGURATIONS
---------------------

- `get_standard_tweezer_transport()`: 20 μm tweezer move in 100 μs, minimum jerk
- `get_standard_invariant_transport()`: same move, Lewis-Riesenfeld in a
  2π × 50 kHz trap

Sanity Warnings
---------------
Parameters that are legal but physically doubtful produce a UserWarning
(never an error):

    - total_time ≤ 0
    - trap_frequency_hz ≤ 0
    - Lewis-Riesenfeld correction larger than the transport itself:
      max|ẍ_c|/ω² = 10/(√3 (ωT)²) × d > d, i.e. ωT < 2.4
"""

import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .trajectories import (
    ArrayLike,
    LewisRiesenfeld,
    MinimumJerk,
    Trajectory,
    fractional_trajectory,
    get_trajectory,
    required_parameters,
    trajectory,
)

# Peak of |60s - 180s² + 120s³| on [0, 1], reached at s = (3 ∓ √3)/6
LR_PEAK_CORRECTION = 10 / np.sqrt(3)


# =============================================================================
# TRANSPORT PARAMETERS
# =============================================================================

@dataclass
class TransportParameters:
    """
    Parameters for a single one-dimensional transport move.

    Attributes
    ----------
    total_time : float
        Transport duration T in seconds.
        Typical: 50-500 μs for tweezer rearrangement, 10-100 μs for QCCD
        ion shuttling.

    total_distance : float
        Net displacement d in meters (any sign).
        Typical: 3-50 μm.

    start_position : float
        Start coordinate in meters.

    trajectory_type : str
        "linear_ramp", "minimum_jerk" or "lewis_riesenfeld".

    classical_type : str
        Classical trajectory for "lewis_riesenfeld" (ignored otherwise).
        Only "minimum_jerk" has a formula.

    trap_frequency_hz : float, optional
        Trap oscillation frequency ω/2π in Hz. Required for
        "lewis_riesenfeld". Typical: 10-200 kHz.

    Example
    -------
    >>> move = TransportParameters(
    ...     total_time=100e-6,      # 100 μs
    ...     total_distance=20e-6,   # 20 μm
    ...     trajectory_type="lewis_riesenfeld",
    ...     trap_frequency_hz=50e3  # 50 kHz
    ... )
    >>> move.position(100e-6) == move.end_position()
    True
    """
    total_time: float
    total_distance: float
    start_position: float = 0.0
    trajectory_type: str = "minimum_jerk"
    classical_type: str = "minimum_jerk"
    trap_frequency_hz: Optional[float] = None

    def __post_init__(self):
        if self.total_time <= 0:
            warnings.warn(
                f"total_time = {self.total_time!r} s is not positive. "
                f"Trajectories will be extrapolated, not evaluated on a transport.",
                UserWarning
            )
        if self.trap_frequency_hz is not None and self.trap_frequency_hz <= 0:
            warnings.warn(
                f"trap_frequency_hz = {self.trap_frequency_hz!r} is not positive.",
                UserWarning
            )
        peak = self.peak_correction()
        if peak is not None and peak > 1:
            warnings.warn(
                f"ωT = {self.omega * self.total_time:.2f}: the Lewis-Riesenfeld correction "
                f"peaks at {peak:.2f}× the transport distance. "
                f"The trap will overshoot the end points strongly.",
                UserWarning
            )

    @property
    def omega(self) -> Optional[float]:
        """Trap angular frequency ω = 2π f in rad/s, or None if unset."""
        if self.trap_frequency_hz is None:
            return None
        return 2 * np.pi * self.trap_frequency_hz

    def peak_correction(self) -> Optional[float]:
        """
        Peak Lewis-Riesenfeld correction as a fraction of the distance.

            max_s |ẍ_c| / (ω² d) = 10 / (√3 (ωT)²)

        Returns None for non-invariant trajectories, classical trajectories
        other than MinimumJerk, an unset trap frequency or a degenerate ωT = 0.
        """
        traj = self.build_trajectory()
        if not isinstance(traj, LewisRiesenfeld) or type(traj.classical) is not MinimumJerk:
            return None
        if self.omega is None or self.omega * self.total_time == 0:
            return None
        return LR_PEAK_CORRECTION / (self.omega * self.total_time)**2

    def build_trajectory(self) -> Trajectory:
        """Build the Trajectory described by these parameters."""
        return get_trajectory(
            self.trajectory_type,
            self.total_time,
            self.total_distance,
            classical=self.classical_type,
        )

    def extra_parameters(self) -> Tuple[float, ...]:
        """
        Extra parameters for fractional_trajectory() in formula order.

        Raises
        ------
        ValueError
            If the trajectory needs ω but trap_frequency_hz is not set
        """
        values = []
        for name in required_parameters(self.build_trajectory()):
            if name == "omega":
                if self.omega is None:
                    raise ValueError(
                        f"trajectory_type={self.trajectory_type!r} requires "
                        f"trap_frequency_hz to be set."
                    )
                values.append(self.omega)
            else:
                raise ValueError(f"No configuration field for trajectory parameter {name!r}")
        return tuple(values)

    def fractional_position(self, elapsed_time: ArrayLike) -> ArrayLike:
        """Fractional progress at `elapsed_time` (seconds)."""
        return fractional_trajectory(
            self.build_trajectory(), elapsed_time, *self.extra_parameters()
        )

    def position(self, elapsed_time: ArrayLike) -> ArrayLike:
        """Absolute position in meters at `elapsed_time` (seconds)."""
        return trajectory(
            self.build_trajectory(), elapsed_time, self.start_position,
            *self.extra_parameters()
        )

    def end_position(self) -> float:
        """Final coordinate start_position + total_distance."""
        return self.start_position + self.total_distance


# =============================================================================
# PRESETS
# =============================================================================

def get_standard_tweezer_transport() -> TransportParameters:
    """
    Standard optical tweezer move: 20 μm in 100 μs on a minimum jerk profile.

    Returns
    -------
    TransportParameters
    """
    return TransportParameters(
        total_time=100e-6,
        total_distance=20e-6,
        start_position=0.0,
        trajectory_type="minimum_jerk",
    )


def get_standard_invariant_transport() -> TransportParameters:
    """
    Standard move engineered with Lewis-Riesenfeld invariants.

    Same 20 μm / 100 μs transport as get_standard_tweezer_transport() in a
    2π × 50 kHz trap (ωT ≈ 31, correction ≈ 0.6% of d).

    Returns
    -------
    TransportParameters
    """
    return TransportParameters(
        total_time=100e-6,
        total_distance=20e-6,
        start_position=0.0,
        trajectory_type="lewis_riesenfeld",
        classical_type="minimum_jerk",
        trap_frequency_hz=50e3,
    )
