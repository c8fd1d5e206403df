# rh_dispatch/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from rh_dispatch.app.controllers.dispatch import RideDispatcher
from rh_dispatch.config.models import ScenarioModel
from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.registry import DriverRegistry
from rh_dispatch.io.dispatch_logging import DispatchLogging  # JSON logs
from rh_dispatch.io.recorder import JsonlSink, MemorySink, Recorder
from rh_dispatch.runtime.policy_factory import make_matching_policy
from rh_dispatch.sim.hooks import DispatchHooks, NoopHooks


@dataclass
class App:
    registry: DriverRegistry
    dispatcher: RideDispatcher
    hooks: DispatchHooks
    recorder: Recorder | None = None


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & recorder
    recorder = None
    if use_logging:
        sink = MemorySink() if model.log.sink == "memory" else JsonlSink()
        recorder = Recorder(sink)
        hooks = DispatchLogging(run_id=model.run_id, level=model.log.level, recorder=recorder)
    else:
        hooks = NoopHooks()

    # 2) Registry, policy, dispatcher (inject deps explicitly)
    registry = DriverRegistry(hooks=hooks)
    matching = make_matching_policy(model.matching)
    dispatcher = RideDispatcher(registry=registry, matching=matching, hooks=hooks)

    # 3) Seed fleet in config order; this is the registry order used for tie-breaks
    for d in model.fleet:
        registry.register(
            Driver(id=d.id, name=d.name, loc=Location(d.x, d.y), available=d.available)
        )

    return App(registry, dispatcher, hooks, recorder)
