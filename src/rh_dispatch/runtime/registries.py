# runtime/registries.py
from rh_dispatch.app.protocols import DistanceMetric
from rh_dispatch.policy.metrics import euclidean, manhattan

_metric_registry: dict[str, DistanceMetric] = {}


def register_metric(kind: str):
    def deco(fn: DistanceMetric):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(kind: str) -> DistanceMetric:
    try:
        return _metric_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {kind!r}") from None


register_metric("euclidean")(euclidean)
register_metric("manhattan")(manhattan)
