# rh_dispatch/policy/matching.py
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from rh_dispatch.app.protocols import DistanceMetric, MatchingPolicy
from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.policy.metrics import euclidean


@dataclass
class NearestAvailableMatchingPolicy(MatchingPolicy):
    metric: DistanceMetric = euclidean

    def select(
        self, candidates: Sequence[Driver], source: Location
    ) -> tuple[Driver, float] | None:
        if not candidates:
            return None
        n = len(candidates)
        xs = np.fromiter((d.loc.x for d in candidates), dtype=float, count=n)
        ys = np.fromiter((d.loc.y for d in candidates), dtype=float, count=n)
        dist = self.metric(xs, ys, source)
        ok = np.isfinite(dist)
        if not ok.any():
            return None
        # first index holding the minimum, so ties go to the earlier registration
        i = int(np.flatnonzero(ok & (dist == dist[ok].min()))[0])
        return candidates[i], float(dist[i])


@dataclass
class FirstAvailableMatchingPolicy(MatchingPolicy):
    """Takes the first free driver in registry order, ignoring distance."""

    def select(
        self, candidates: Sequence[Driver], source: Location
    ) -> tuple[Driver, float] | None:
        if not candidates:
            return None
        d = candidates[0]
        return d, d.loc.distance_to(source)
