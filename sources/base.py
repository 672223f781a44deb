"""
Abstract input interfaces of the generator model.

TerminalVoltage provides the terminal voltage vector v(t) in phase
coordinates [A, B, C], pu, in the synchronously rotating frame: a balanced
steady-state bus is a constant vector, not a 60 Hz waveform.

FieldVoltage provides the exogenous field voltage Ef(t), pu.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class TerminalVoltage(ABC):
    """Base class for terminal voltage sources."""

    @abstractmethod
    def __call__(self, t: float) -> np.ndarray:
        """
        Return terminal voltage vector [vA, vB, vC] at time t.
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Text description for logs."""
        ...


class FieldVoltage(ABC):
    """Base class for field voltage (excitation) inputs."""

    @abstractmethod
    def __call__(self, t: float) -> float:
        """Return field voltage Ef at time t."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Text description for logs."""
        ...
