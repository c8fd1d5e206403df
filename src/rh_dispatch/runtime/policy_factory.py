from rh_dispatch.app.protocols import MatchingPolicy
from rh_dispatch.config.models import (
    MatchingPolicyFirstAvailableModel,
    MatchingPolicyNearestModel,
    MatchingPolicyUnion,
)
from rh_dispatch.policy.matching import (
    FirstAvailableMatchingPolicy,
    NearestAvailableMatchingPolicy,
)
from rh_dispatch.runtime.registries import make_metric


def make_matching_policy(cfg: MatchingPolicyUnion) -> MatchingPolicy:
    if isinstance(cfg, MatchingPolicyNearestModel):
        mp = NearestAvailableMatchingPolicy(metric=make_metric(cfg.metric))
        return mp
    elif isinstance(cfg, MatchingPolicyFirstAvailableModel):
        return FirstAvailableMatchingPolicy()
    else:
        raise TypeError(cfg)
