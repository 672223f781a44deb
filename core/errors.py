"""
Исключения модели синхронной машины.

DomainError     - физически несогласованные параметры или входы вне области модели
InputShapeError - вектор состояния или напряжения неверной размерности
"""
from __future__ import annotations

import numpy as np


class DomainError(ValueError):
    """Invalid or physically inconsistent parameters or inputs."""


class InputShapeError(ValueError):
    """State or voltage vector of the wrong arity."""


def as_vector(values, size: int, name: str) -> np.ndarray:
    """Return `values` as a float vector of shape (size,) or raise InputShapeError."""
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size,):
        raise InputShapeError(
            f"{name} has shape {arr.shape}, expected ({size},)."
        )
    return arr
