# sim/hooks.py
from typing import Protocol

from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.entities.ride import Ride


class DispatchHooks(Protocol):
    def driver_registered(self, driver: Driver): ...
    def ride_requested(self, *, rider_id: int, source: Location, destination: Location): ...
    def ride_matched(self, ride: Ride, *, distance: float): ...
    def ride_ended(self, ride: Ride): ...
    def rejected(self, reason: str, *, rider_id: int, **kw): ...


class NoopHooks:
    def driver_registered(self, *_, **__):
        pass

    def ride_requested(self, **_):
        pass

    def ride_matched(self, *_, **__):
        pass

    def ride_ended(self, *_, **__):
        pass

    def rejected(self, *_, **__):
        pass
