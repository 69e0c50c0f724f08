"""
Trajectory Sampling
===================

Evaluation of transport trajectories on a uniform time grid, e.g. to feed
an AOD frequency waveform or an electrode voltage sequence sample by sample.

Key Functions
-------------
- time_grid(): uniform grid over [0, T]
- sample_trajectory(): evaluate a Trajectory on the grid
- sample_transport(): same for a TransportParameters configuration
"""

from dataclasses import dataclass

import numpy as np

from .configurations import TransportParameters
from .trajectories import Trajectory, fractional_trajectory, trajectory


@dataclass
class TrajectorySamples:
    """Container for a trajectory evaluated on a time grid"""
    trajectory: Trajectory
    times: np.ndarray
    fractional: np.ndarray
    positions: np.ndarray

    def max_overshoot(self) -> float:
        """
        Largest excursion of the fractional progress outside [0, 1].

        Zero for the classical trajectories. For LewisRiesenfeld the trap
        runs ahead of (and behind) the particle by ẍ_c/ω², so the value
        shows how far the trap centre leaves the start/end interval.
        NaN when any sample is NaN (e.g. an unvalidated ω = 0 or T = 0).
        """
        if np.any(np.isnan(self.fractional)):
            return float("nan")
        below = -float(np.min(self.fractional))
        above = float(np.max(self.fractional)) - 1.0
        return max(0.0, below, above)


def time_grid(total_time: float, n_points: int = 101) -> np.ndarray:
    """
    Uniform time grid from 0 to `total_time` (inclusive).

    Raises
    ------
    ValueError
        If n_points < 2
    """
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")
    return np.linspace(0.0, total_time, n_points)


def sample_trajectory(
    traj: Trajectory,
    start: float,
    *params: float,
    n_points: int = 101,
    verbose: bool = False,
) -> TrajectorySamples:
    """
    Evaluate `traj` on a uniform grid over its total time.

    Parameters
    ----------
    traj : Trajectory
        Trajectory to sample
    start : float
        Start position (meters)
    *params : float
        Extra parameters for the trajectory type (ω for LewisRiesenfeld)
    n_points : int
        Number of grid points including both end points
    verbose : bool
        Print a summary of the sampled trajectory

    Returns
    -------
    TrajectorySamples
    """
    times = time_grid(traj.total_time, n_points)
    fractional = fractional_trajectory(traj, times, *params)
    positions = trajectory(traj, times, start, *params)
    samples = TrajectorySamples(
        trajectory=traj,
        times=times,
        fractional=fractional,
        positions=positions,
    )

    if verbose:
        print(f"\n{'='*60}")
        print(f"TRAJECTORY SAMPLES: {type(traj).__name__}")
        print(f"{'='*60}")
        print(f"Total time:      T = {traj.total_time*1e6:.3f} μs")
        print(f"Total distance:  d = {traj.total_distance*1e6:.3f} μm")
        if params:
            print(f"Extra params:    {', '.join(f'{p:.6g}' for p in params)}")
        print(f"Samples:         {n_points}")
        print(f"Start / end:     {positions[0]*1e6:.4f} μm → {positions[-1]*1e6:.4f} μm")
        print(f"Max overshoot:   {samples.max_overshoot():.4%} of d")
        print(f"{'='*60}")

    return samples


def sample_transport(
    transport: TransportParameters,
    n_points: int = 101,
    verbose: bool = False,
) -> TrajectorySamples:
    """Sample the move described by a TransportParameters configuration."""
    return sample_trajectory(
        transport.build_trajectory(),
        transport.start_position,
        *transport.extra_parameters(),
        n_points=n_points,
        verbose=verbose,
    )
