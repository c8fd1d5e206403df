from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location


@runtime_checkable
class DistanceMetric(Protocol):
    """
    Vectorised distance from one point to many.
    xs, ys are candidate coordinates; returns one distance per candidate.
    """

    def __call__(self, xs: np.ndarray, ys: np.ndarray, origin: Location) -> np.ndarray: ...


@runtime_checkable
class MatchingPolicy(Protocol):
    """
    Responsibilities:
      • Pick one driver out of the available candidates for a pickup point.
      • Never mutate drivers; reservation belongs to the dispatcher.
    Returns (driver, distance) or None when there is no candidate.
    """

    def select(
        self, candidates: Sequence[Driver], source: Location
    ) -> tuple[Driver, float] | None: ...
