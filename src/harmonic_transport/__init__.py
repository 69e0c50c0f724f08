"""
Harmonic Trap Transport Trajectories
====================================

Closed-form one-dimensional trajectories for transporting a particle held
in a harmonic trap (optical tweezer, segmented ion trap) between two
positions in a fixed time.

MODULE STRUCTURE
----------------

    - trajectories: LinearRamp, MinimumJerk, LewisRiesenfeld and the
      fractional_trajectory() / trajectory() evaluation functions
    - configurations: TransportParameters dataclass and standard presets
    - sampling: evaluation on a uniform time grid

Quick Start
-----------
>>> import numpy as np
>>> from harmonic_transport import LewisRiesenfeld, MinimumJerk, trajectory
>>> lr = LewisRiesenfeld.from_classical_type(MinimumJerk, 100e-6, 20e-6)
>>> x_end = trajectory(lr, 100e-6, 0.0, 2 * np.pi * 50e3)

References
----------
[1] E. Torrontegui et al., Phys. Rev. A 83, 013415 (2011)
"""

from .trajectories import (
    Trajectory,
    LinearRamp,
    MinimumJerk,
    LewisRiesenfeld,
    fractional_trajectory,
    trajectory,
    # Formula registry
    FractionalFormula,
    FRACTIONAL_FORMULAS,
    register_fractional_formula,
    required_parameters,
    # Name registry
    TRAJECTORY_TYPES,
    get_trajectory,
    list_available_trajectories,
)

from .configurations import (
    TransportParameters,
    get_standard_tweezer_transport,
    get_standard_invariant_transport,
)

from .sampling import (
    TrajectorySamples,
    time_grid,
    sample_trajectory,
    sample_transport,
)

__version__ = "0.1.0"
__all__ = [
    # =========================================================================
    # TRAJECTORY MODEL
    # =========================================================================
    "Trajectory", "LinearRamp", "MinimumJerk", "LewisRiesenfeld",
    "fractional_trajectory", "trajectory",
    "FractionalFormula", "FRACTIONAL_FORMULAS", "register_fractional_formula",
    "required_parameters",
    "TRAJECTORY_TYPES", "get_trajectory", "list_available_trajectories",

    # =========================================================================
    # CONFIGURATION
    # =========================================================================
    "TransportParameters",
    "get_standard_tweezer_transport", "get_standard_invariant_transport",

    # =========================================================================
    # SAMPLING
    # =========================================================================
    "TrajectorySamples", "time_grid", "sample_trajectory", "sample_transport",
]
