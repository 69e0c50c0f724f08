#!/usr/bin/env python3
"""
Transport Profile Comparison
============================

Prints the trap position for a 20 μm tweezer move in 100 μs on each of the
available trajectories, and shows how the Lewis-Riesenfeld correction
shrinks as the trap gets stiffer.
"""

import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from harmonic_transport import (
    TransportParameters,
    get_standard_invariant_transport,
    sample_transport,
)


def print_profiles(n_points: int = 11):
    base = get_standard_invariant_transport()
    moves = {
        "linear_ramp": TransportParameters(base.total_time, base.total_distance,
                                           trajectory_type="linear_ramp"),
        "minimum_jerk": TransportParameters(base.total_time, base.total_distance,
                                            trajectory_type="minimum_jerk"),
        "lewis_riesenfeld": base,
    }
    samples = {name: sample_transport(move, n_points=n_points) for name, move in moves.items()}

    times = samples["linear_ramp"].times
    print(f"{'t (μs)':>8}" + "".join(f"{name:>20}" for name in moves))
    for i, t in enumerate(times):
        row = "".join(f"{samples[name].positions[i]*1e6:>17.4f} μm" for name in moves)
        print(f"{t*1e6:>8.1f}" + row)


def print_frequency_sweep():
    print(f"\n{'f_trap (kHz)':>14}{'ωT':>10}{'peak correction':>18}{'max overshoot':>16}")
    for f_trap in [5e3, 10e3, 20e3, 50e3, 100e3]:
        move = TransportParameters(100e-6, 20e-6, trajectory_type="lewis_riesenfeld",
                                   trap_frequency_hz=f_trap)
        samples = sample_transport(move, n_points=501)
        omega_T = move.omega * move.total_time
        print(f"{f_trap/1e3:>14.1f}{omega_T:>10.2f}{move.peak_correction():>18.4%}"
              f"{samples.max_overshoot():>16.4%}")


def main():
    print_profiles()
    print_frequency_sweep()
    sample_transport(get_standard_invariant_transport(), verbose=True)


if __name__ == "__main__":
    main()
