"""Public SDK surface for data cubes.

This module provides a stable import path for library users.
It re-exports the cube containers, the option type and config models.
Domain counter helpers stay internal to the ``cube`` package.
"""

from __future__ import annotations

from core.config import CubeConfig
from core.errors import (
    CubeArityError,
    CubeConfigError,
    DataCubeError,
    DomainCounterError,
    OptionEmptyError,
)
from core.option import Empty, Option, Valued, empty, valued
from cube.data_cube import DataCube
from cube.fixed_cubes import DataCube1, DataCube2, DataCube3, FixedArityCube

__all__ = [
    "CubeArityError",
    "CubeConfig",
    "CubeConfigError",
    "DataCube",
    "DataCube1",
    "DataCube2",
    "DataCube3",
    "DataCubeError",
    "DomainCounterError",
    "Empty",
    "FixedArityCube",
    "Option",
    "OptionEmptyError",
    "Valued",
    "empty",
    "valued",
]
