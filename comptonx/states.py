"""
Discrete spin / polarization states and the selectors that pick them.

A leg's selector is either ``Fixed(state)`` (one definite state) or
``AllStates(kind)`` (every state of the enum ``kind``, summed over).
Both expose ``cardinality`` and ``enumerate()`` so callers never branch on
the selector's shape.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Type


class Spin(Enum):
    """Spin projection of a spin-1/2 fermion."""
    UP = 1
    DOWN = 2


class Polarization(Enum):
    """Linear polarization of a physical photon."""
    X = 1
    Y = 2


class StateSelector(ABC):

    @property
    @abstractmethod
    def cardinality(self) -> int:
        """Number of discrete states this selector enumerates."""

    @abstractmethod
    def enumerate(self) -> Tuple[Enum, ...]:
        """The selected states, in enum definition order."""


@dataclass(frozen=True)
class Fixed(StateSelector):
    state: Enum

    @property
    def cardinality(self) -> int:
        return 1

    def enumerate(self) -> Tuple[Enum, ...]:
        return (self.state,)


@dataclass(frozen=True)
class AllStates(StateSelector):
    kind: Type[Enum]

    @property
    def cardinality(self) -> int:
        return len(self.kind)

    def enumerate(self) -> Tuple[Enum, ...]:
        return tuple(self.kind)


ALL_SPINS = AllStates(Spin)
ALL_POLARIZATIONS = AllStates(Polarization)

SPIN_UP = Fixed(Spin.UP)
SPIN_DOWN = Fixed(Spin.DOWN)
POL_X = Fixed(Polarization.X)
POL_Y = Fixed(Polarization.Y)


def as_selector(value) -> StateSelector:
    """Wrap a bare Spin / Polarization in Fixed; pass selectors through."""
    if isinstance(value, StateSelector):
        return value
    if isinstance(value, (Spin, Polarization)):
        return Fixed(value)
    raise TypeError(f"Expected a StateSelector, Spin or Polarization, got {value!r}")
