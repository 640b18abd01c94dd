# physics/ballistics.py
"""
Closed-form projectile motion under a constant acceleration.

Every state is evaluated directly from its own sample time:

    position(t) = p0 + v0 * t + 0.5 * g * t^2
    velocity(t) = v0 + g * t

so there is no accumulated drift and the order in which samples are
evaluated does not matter.
"""
import math
from typing import Iterator, List, Sequence
from libray.core.vector import Vector3

EARTH_GRAVITY = Vector3(0.0, -9.8, 0.0)
ZERO = Vector3(0.0, 0.0, 0.0)

class ProjectileState:
    """
    Position and velocity of a projectile at one sample time.
    """
    __slots__ = ("position", "velocity", "time")

    def __init__(self, position: Vector3, velocity: Vector3, time: float):
        self.position = position
        self.velocity = velocity
        self.time = time

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProjectileState):
            return NotImplemented
        return (self.position == other.position and
                self.velocity == other.velocity and
                self.time == other.time)

    def __hash__(self) -> int:
        return hash((self.position, self.velocity, self.time))

    def __repr__(self) -> str:
        return f"ProjectileState(t={self.time}, position={self.position!r}, velocity={self.velocity!r})"

class Environment:
    """
    Constant forces acting on a projectile: gravity plus an optional wind.
    """
    def __init__(self, gravity: Vector3 = EARTH_GRAVITY, wind: Vector3 = ZERO):
        self.gravity = gravity
        self.wind = wind

    @property
    def acceleration(self) -> Vector3:
        return self.gravity + self.wind

def sample_times(dt: float, count: int, start: float = 0.0) -> List[float]:
    """
    Returns `count` evenly spaced times start, start + dt, ...
    """
    if dt <= 0 or not math.isfinite(dt):
        raise ValueError(f"dt must be a positive finite number, got {dt}")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return [start + i * dt for i in range(count)]

def landing_time(p0: Vector3, v0: Vector3, acceleration: Vector3, ground: float = 0.0) -> float:
    """
    Earliest t at which the height comes back down to `ground`.

    A projectile launched upward from the ground lands at the positive root,
    not at t = 0. Returns 0.0 when it starts below the ground, or at the
    ground without climbing. Raises ValueError if it never gets there.
    """
    # 0.5*g*t^2 + v*t + (y0 - ground) = 0
    a = 0.5 * acceleration.y
    b = v0.y
    c = p0.y - ground
    if c < 0 or (c == 0 and b <= 0):
        return 0.0
    if c == 0:
        # y(t) = t * (a*t + b), so the other root is -b/a
        if a >= 0:
            raise ValueError("projectile never comes back to the ground")
        return -b / a
    if a == 0:
        if b >= 0:
            raise ValueError("projectile never reaches the ground")
        return -c / b
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        raise ValueError("projectile never reaches the ground")
    sqrt_disc = math.sqrt(discriminant)
    roots = sorted(((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)))
    for root in roots:
        if root >= 0:
            return root
    raise ValueError("projectile never reaches the ground")

class Trajectory:
    """
    A recorded, immutable flight: one ProjectileState per sample time.

    States are computed lazily on iteration. Iterating again yields the
    same states, since each one depends only on its own time.
    """
    def __init__(self, p0: Vector3, v0: Vector3, acceleration: Vector3, times: Sequence[float]):
        times = tuple(float(t) for t in times)
        for t in times:
            if not math.isfinite(t):
                raise ValueError(f"sample times must be finite, got {t}")
        if any(later < earlier for earlier, later in zip(times, times[1:])):
            raise ValueError("sample times must be non-decreasing")
        self.p0 = p0
        self.v0 = v0
        self.acceleration = acceleration
        self.times = times

    @classmethod
    def from_environment(cls, p0: Vector3, v0: Vector3, environment: Environment,
                         times: Sequence[float]) -> "Trajectory":
        return cls(p0, v0, environment.acceleration, times)

    @classmethod
    def until_landing(cls, p0: Vector3, v0: Vector3, environment: Environment,
                      dt: float, ground: float = 0.0) -> "Trajectory":
        """
        Samples every `dt` from t = 0 through the first sample at or after
        `landing_time`, so the last position is at or below y = ground.
        A launch from the ground records the whole arc.
        """
        if dt <= 0 or not math.isfinite(dt):
            raise ValueError(f"dt must be a positive finite number, got {dt}")
        flight = landing_time(p0, v0, environment.acceleration, ground)
        count = int(math.ceil(flight / dt)) + 1
        return cls.from_environment(p0, v0, environment, sample_times(dt, count))

    def state_at(self, t: float) -> ProjectileState:
        g = self.acceleration
        position = self.p0 + self.v0 * t + g * (0.5 * t * t)
        velocity = self.v0 + g * t
        return ProjectileState(position, velocity, t)

    def __iter__(self) -> Iterator[ProjectileState]:
        return (self.state_at(t) for t in self.times)

    def __len__(self) -> int:
        return len(self.times)

    def __getitem__(self, index: int) -> ProjectileState:
        return self.state_at(self.times[index])

    def positions(self) -> List[Vector3]:
        return [state.position for state in self]

    def apex(self) -> ProjectileState:
        """
        The sampled state with the greatest height (earliest on ties).
        """
        if not self.times:
            raise ValueError("empty trajectory has no apex")
        return max(self, key=lambda state: state.position.y)
