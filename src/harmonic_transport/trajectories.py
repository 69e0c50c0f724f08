"""
Transport Trajectories in Harmonic Traps
========================================

This module implements closed-form one-dimensional transport trajectories
for moving a particle (an atom in an optical tweezer, an ion in a segmented
trap) from one position to another in a fixed time.

What is a transport trajectory?
-------------------------------
A trajectory is a rule x(t) that takes the trap (and with it the particle)
from a start position x_start to x_start + d over a total time T. We split
every trajectory into two parts:

    x(t) = x_start + d × f(t)

where f(t) is the *fractional trajectory*: a dimensionless progress that
is 0 at t = 0 and 1 at t = T. The fractional part carries all of the
physics, the distance d only rescales it.

Available Trajectories
----------------------
With s = t / T:

    Trajectory        f(s)                                   Smoothness
    ──────────────────────────────────────────────────────────────────────
    LinearRamp        s                                      velocity jumps
    MinimumJerk       10s³ - 15s⁴ + 6s⁵                      v = a = 0 at ends
    LewisRiesenfeld   (60s - 180s² + 120s³)/(Tω)² + f_c(s)   no final excitation

**Linear ramp:** constant velocity d/T. The velocity jumps at t = 0 and
t = T, which kicks the particle and leaves it sloshing in the trap.

**Minimum jerk:** the quintic that minimizes ∫ (d³x/dt³)² dt. Velocity and
acceleration vanish at both ends, so the motion starts and stops smoothly.
In the adiabatic limit (T ≫ 2π/ω) this is already close to excitation free.

**Lewis-Riesenfeld (invariant-based inverse engineering):** choose the
classical particle trajectory x_c(t) first, then compute the trap centre
path that makes the particle follow it exactly. For a harmonic trap

    ẍ_c = -ω² (x_c - x₀(t))   ⇒   x₀(t) = x_c(t) + ẍ_c(t) / ω²

With x_c the minimum jerk trajectory, ẍ_c = d (60s - 180s² + 120s³) / T²,
which gives the correction term in the table. Because ẍ_c vanishes at both
ends the trap and the particle coincide at t = 0 and t = T and the particle
ends at rest, for any T, with no residual oscillation.

Dispatch
--------
The set of trajectory variants is closed: LinearRamp, MinimumJerk and
LewisRiesenfeld wrapping a classical trajectory. Fractional formulas live
in a registry keyed by (trajectory type, classical type), so adding a new
combination (e.g. an invariant-based ramp on a different classical
trajectory) means registering one more formula:

    >>> @register_fractional_formula(LewisRiesenfeld, MyTrajectory, ("omega",))
    ... def _lr_my_trajectory(traj, t, omega):
    ...     ...

Combinations without a registered formula raise NotImplementedError.

References
----------
[1] E. Torrontegui et al., "Fast atomic transport without vibrational
    heating", Phys. Rev. A 83, 013415 (2011), doi:10.1103/PhysRevA.83.013415
[2] T. Flash & N. Hogan, "The coordination of arm movements: an
    experimentally confirmed mathematical model", J. Neurosci. 5, 1688 (1985)
"""

from __future__ import annotations

import numbers
from abc import ABC
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

import numpy as np

ArrayLike = Union[float, np.ndarray]


# =============================================================================
# TRAJECTORY TYPES
# =============================================================================

@dataclass(frozen=True)
class Trajectory(ABC):
    """
    Transport trajectory in a harmonic trap.

    Abstract base for all trajectory variants. Instances are immutable and
    are evaluated with fractional_trajectory() and trajectory().

    Attributes
    ----------
    total_time : float
        Total motional time T for the transport (seconds). Not validated:
        zero or negative values are the caller's responsibility.
    total_distance : float
        Net displacement d during the motion (meters). Any sign, or zero.

    See Also
    --------
    LinearRamp, MinimumJerk, LewisRiesenfeld
    """
    total_time: float
    total_distance: float

    def __post_init__(self):
        if type(self) is Trajectory:
            raise TypeError(
                "Trajectory is abstract. Use LinearRamp, MinimumJerk or LewisRiesenfeld."
            )
        for name in ("total_time", "total_distance"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise TypeError(
                    f"{name} must be a real number, got {type(value).__name__}: {value!r}"
                )
        # Promote integers (and numpy scalars) to plain floats
        object.__setattr__(self, "total_time", float(self.total_time))
        object.__setattr__(self, "total_distance", float(self.total_distance))


@dataclass(frozen=True)
class LinearRamp(Trajectory):
    """
    Simple linear trajectory: the particle moves at constant speed d/T
    between start and end points.

    Example
    -------
    >>> ramp = LinearRamp(total_time=2.0, total_distance=10.0)
    >>> trajectory(ramp, 1.0, 0.0)
    5.0
    """


@dataclass(frozen=True)
class MinimumJerk(Trajectory):
    """
    Trajectory minimising jerk (third derivative of position) throughout
    the motion.

    Velocity and acceleration are zero at t = 0 and t = T, and the progress
    is symmetric about the midpoint: f(T/2) = 1/2.
    """


@dataclass(frozen=True)
class LewisRiesenfeld(Trajectory):
    """
    Trap trajectory from Lewis-Riesenfeld invariant-based inverse
    engineering around a `classical` particle trajectory.

    The classical trajectory must describe the same transport: its
    total_time and total_distance have to be exactly equal to those of the
    wrapper (no tolerance). Use from_classical_type() to build both from a
    single pair of parameters.

    Attributes
    ----------
    total_time : float
        Total transport time T (seconds)
    total_distance : float
        Net displacement d (meters)
    classical : Trajectory
        Classical particle trajectory the trap is engineered around.
        Only MinimumJerk has a fractional formula at present.

    Raises
    ------
    ValueError
        If classical.total_time or classical.total_distance differ from the
        wrapper's own parameters.
    TypeError
        If classical is not a Trajectory.

    References
    ----------
    E. Torrontegui et al., Phys. Rev. A 83, 013415 (2011)
    """
    classical: Trajectory

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.classical, Trajectory):
            raise TypeError(
                f"classical must be a Trajectory, got {type(self.classical).__name__}."
            )
        if not (_same_value(self.total_time, self.classical.total_time)
                and _same_value(self.total_distance, self.classical.total_distance)):
            raise ValueError(
                "classical trajectory must have the same total_time and total_distance: "
                f"got total_time={self.total_time!r}, total_distance={self.total_distance!r} "
                f"but classical has total_time={self.classical.total_time!r}, "
                f"total_distance={self.classical.total_distance!r}."
            )

    @classmethod
    def from_classical_type(
        cls,
        classical_type: Type[Trajectory],
        total_time: float,
        total_distance: float,
    ) -> "LewisRiesenfeld":
        """
        Implicitly construct the classical trajectory from its type.

        Equivalent to
        ``LewisRiesenfeld(total_time, total_distance, classical_type(total_time, total_distance))``.

        Example
        -------
        >>> lr = LewisRiesenfeld.from_classical_type(MinimumJerk, 5.0, 2.0)
        >>> lr.classical
        MinimumJerk(total_time=5.0, total_distance=2.0)
        """
        return cls(total_time, total_distance, classical_type(total_time, total_distance))


def _same_value(a: float, b: float) -> bool:
    """Exact equality, treating NaN as equal to NaN."""
    return a == b or (np.isnan(a) and np.isnan(b))


# =============================================================================
# FRACTIONAL FORMULA REGISTRY
# =============================================================================

@dataclass(frozen=True)
class FractionalFormula:
    """
    Registered fractional trajectory formula.

    Attributes
    ----------
    function : Callable
        ``function(traj, t, *params)`` with t as a float ndarray
    parameters : tuple of str
        Names of the extra parameters the formula requires, in order
    """
    function: Callable
    parameters: Tuple[str, ...] = ()


FRACTIONAL_FORMULAS: Dict[Tuple[type, Optional[type]], FractionalFormula] = {}
"""Registry of fractional formulas keyed by (trajectory type, classical type or None)."""


def register_fractional_formula(
    trajectory_type: type,
    classical_type: Optional[type] = None,
    parameters: Tuple[str, ...] = (),
) -> Callable:
    """
    Decorator registering a fractional trajectory formula.

    Parameters
    ----------
    trajectory_type : type
        Outer trajectory type (e.g. LewisRiesenfeld)
    classical_type : type, optional
        Type of the wrapped classical trajectory, None for trajectories
        without one
    parameters : tuple of str
        Names of the extra parameters the formula needs after the time
    """
    def decorator(function: Callable) -> Callable:
        FRACTIONAL_FORMULAS[(trajectory_type, classical_type)] = FractionalFormula(
            function=function,
            parameters=tuple(parameters),
        )
        return function
    return decorator


def _formula_key(traj: Trajectory) -> Tuple[type, Optional[type]]:
    classical = getattr(traj, "classical", None)
    return type(traj), (None if classical is None else type(classical))


def _describe(key: Tuple[type, Optional[type]]) -> str:
    trajectory_type, classical_type = key
    if classical_type is None:
        return trajectory_type.__name__
    return f"{trajectory_type.__name__}[{classical_type.__name__}]"


def _lookup_formula(traj: Trajectory) -> FractionalFormula:
    key = _formula_key(traj)
    if key not in FRACTIONAL_FORMULAS:
        raise NotImplementedError(
            f"No fractional trajectory is implemented for {_describe(key)}."
        )
    return FRACTIONAL_FORMULAS[key]


def required_parameters(traj: Trajectory) -> Tuple[str, ...]:
    """
    Names of the extra parameters fractional_trajectory() needs for `traj`.

    Returns ``()`` for LinearRamp and MinimumJerk and ``("omega",)`` for
    LewisRiesenfeld wrapping MinimumJerk.

    Raises
    ------
    NotImplementedError
        If no formula is registered for the trajectory combination
    """
    return _lookup_formula(traj).parameters


# =============================================================================
# FRACTIONAL FORMULAS
# =============================================================================

@register_fractional_formula(LinearRamp)
def _linear_ramp_fraction(traj: LinearRamp, t: np.ndarray) -> np.ndarray:
    return t / traj.total_time


@register_fractional_formula(MinimumJerk)
def _minimum_jerk_fraction(traj: MinimumJerk, t: np.ndarray) -> np.ndarray:
    s = t / traj.total_time
    return 10 * s**3 - 15 * s**4 + 6 * s**5


@register_fractional_formula(LewisRiesenfeld, MinimumJerk, parameters=("omega",))
def _lewis_riesenfeld_minimum_jerk_fraction(
    traj: LewisRiesenfeld,
    t: np.ndarray,
    omega: float,
) -> np.ndarray:
    # Trap centre x₀ = x_c + ẍ_c/ω² for the minimum jerk particle path x_c
    s = t / traj.total_time
    correction = (60 * s - 180 * s**2 + 120 * s**3) / (traj.total_time * omega)**2
    return correction + fractional_trajectory(traj.classical, t)


# =============================================================================
# EVALUATION
# =============================================================================

def _as_output(value) -> ArrayLike:
    """Plain float for scalar results, ndarray otherwise."""
    value = np.asarray(value)
    if value.ndim == 0:
        return float(value)
    return value


def fractional_trajectory(
    traj: Trajectory,
    elapsed_time: ArrayLike,
    *params: float,
) -> ArrayLike:
    """
    Position on `traj` at time `elapsed_time` as a fraction of the total
    distance.

    Parameters
    ----------
    traj : Trajectory
        Trajectory to evaluate
    elapsed_time : float or array_like
        Time since the start of the transport (seconds). Not clamped:
        times outside [0, T] extrapolate the formula.
    *params : float
        Extra parameters required by the trajectory type, see
        required_parameters(). LewisRiesenfeld[MinimumJerk] needs the trap
        angular frequency ω (rad/s).

    Returns
    -------
    float or np.ndarray
        Dimensionless progress, 0 at t = 0 and 1 at t = T. A float for
        scalar input, an array of the broadcast shape otherwise.

    Raises
    ------
    NotImplementedError
        If no formula exists for the trajectory combination
        (e.g. LewisRiesenfeld wrapping LinearRamp)
    TypeError
        If the number of extra parameters does not match the formula

    Examples
    --------
    >>> fractional_trajectory(MinimumJerk(1.0, 1.0), 0.5)
    0.5
    >>> lr = LewisRiesenfeld.from_classical_type(MinimumJerk, 100e-6, 20e-6)
    >>> omega = 2 * np.pi * 50e3
    >>> fractional_trajectory(lr, 100e-6, omega)
    1.0
    """
    formula = _lookup_formula(traj)
    if len(params) != len(formula.parameters):
        expected = ", ".join(formula.parameters) if formula.parameters else "no extra parameters"
        raise TypeError(
            f"{_describe(_formula_key(traj))} fractional trajectory takes "
            f"{len(formula.parameters)} extra parameter(s) ({expected}), got {len(params)}."
        )
    t = np.asarray(elapsed_time, dtype=float)
    return _as_output(formula.function(traj, t, *params))


def trajectory(
    traj: Trajectory,
    elapsed_time: ArrayLike,
    start: ArrayLike,
    *params: float,
) -> ArrayLike:
    """
    Location at time `elapsed_time` for a particle on `traj` starting at
    position `start`.

        x(t) = start + d × f(t)

    Additional parameters required by fractional_trajectory() for the
    trajectory type are passed through unchanged.

    Parameters
    ----------
    traj : Trajectory
        Trajectory to evaluate
    elapsed_time : float or array_like
        Time since the start of the transport (seconds)
    start : float or array_like
        Start position (meters)
    *params : float
        Extra parameters, e.g. ω for LewisRiesenfeld[MinimumJerk]

    Returns
    -------
    float or np.ndarray
        Absolute position (meters)

    Example
    -------
    >>> trajectory(LinearRamp(2.0, 10.0), 1.0, 0.0)
    5.0
    """
    fraction = fractional_trajectory(traj, elapsed_time, *params)
    return _as_output(np.asarray(start, dtype=float) + traj.total_distance * fraction)


# =============================================================================
# TRAJECTORY NAME REGISTRY
# =============================================================================

TRAJECTORY_TYPES: Dict[str, Type[Trajectory]] = {
    "linear_ramp": LinearRamp,
    "minimum_jerk": MinimumJerk,
    "lewis_riesenfeld": LewisRiesenfeld,
}
"""Registry of trajectory types by canonical name."""

_TRAJECTORY_ALIASES: Dict[str, str] = {
    "linear": "linear_ramp",
    "ramp": "linear_ramp",
    "min_jerk": "minimum_jerk",
    "mj": "minimum_jerk",
    "lr": "lewis_riesenfeld",
    "invariant": "lewis_riesenfeld",
}


def _resolve_trajectory_type(name: str) -> Type[Trajectory]:
    name_norm = name.lower().replace("-", "_").replace(" ", "_")
    name_norm = _TRAJECTORY_ALIASES.get(name_norm, name_norm)
    if name_norm not in TRAJECTORY_TYPES:
        raise ValueError(
            f"Unknown trajectory: {name}. "
            f"Available trajectories: {list_available_trajectories()}"
        )
    return TRAJECTORY_TYPES[name_norm]


def get_trajectory(
    name: str,
    total_time: float,
    total_distance: float,
    classical: str = "minimum_jerk",
) -> Trajectory:
    """
    Build a trajectory by name.

    Parameters
    ----------
    name : str
        "linear_ramp", "minimum_jerk" or "lewis_riesenfeld" (case
        insensitive; aliases "linear", "ramp", "min_jerk", "mj", "lr",
        "invariant")
    total_time : float
        Total transport time (seconds)
    total_distance : float
        Net displacement (meters)
    classical : str
        Classical trajectory name, only used for "lewis_riesenfeld"

    Returns
    -------
    Trajectory

    Raises
    ------
    ValueError
        If a name is not recognized, or the classical trajectory is itself
        a Lewis-Riesenfeld trajectory

    Examples
    --------
    >>> get_trajectory("min-jerk", 1.0, 2.0)
    MinimumJerk(total_time=1.0, total_distance=2.0)
    >>> get_trajectory("lr", 1.0, 2.0).classical
    MinimumJerk(total_time=1.0, total_distance=2.0)
    """
    trajectory_type = _resolve_trajectory_type(name)
    if trajectory_type is LewisRiesenfeld:
        classical_type = _resolve_trajectory_type(classical)
        if classical_type is LewisRiesenfeld:
            raise ValueError(
                "The classical trajectory of a Lewis-Riesenfeld trajectory "
                "must be a classical trajectory, got 'lewis_riesenfeld'."
            )
        return LewisRiesenfeld.from_classical_type(classical_type, total_time, total_distance)
    return trajectory_type(total_time, total_distance)


def list_available_trajectories() -> List[str]:
    """Return list of available trajectory names."""
    return list(TRAJECTORY_TYPES.keys())
