# rh_dispatch/app/controllers/dispatch.py
from rh_dispatch.app.protocols import MatchingPolicy
from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.entities.ride import Ride
from rh_dispatch.domain.entities.rider import Rider
from rh_dispatch.domain.errors import (
    AlreadyHasActiveRideError,
    NoActiveRideError,
    NoDriverAvailableError,
)
from rh_dispatch.domain.registry import DriverRegistry
from rh_dispatch.sim.hooks import DispatchHooks, NoopHooks


class RideDispatcher:
    """
    Matches ride requests to drivers and owns the active-ride lifecycle.

    Single-threaded. request_ride reads availability and then flips it, so a
    concurrent caller would need one lock around the registry and the active map.
    """

    def __init__(
        self,
        registry: DriverRegistry,
        matching: MatchingPolicy,
        hooks: DispatchHooks | None = None,
    ):
        self.registry = registry
        self.matching = matching
        self.hooks = hooks or NoopHooks()
        self._active: dict[int, Ride] = {}  # rider_id -> Ride
        self._completed: list[Ride] = []
        self._next_ride_id = 1

    # ------------ queries --------------

    def get_active_ride(self, rider: Rider) -> Ride | None:
        return self._active.get(rider.id)

    def active_rides(self) -> tuple[Ride, ...]:
        return tuple(self._active.values())

    def completed_rides(self) -> tuple[Ride, ...]:
        return tuple(self._completed)

    def driver_for(self, ride: Ride) -> Driver:
        return self.registry.get(ride.driver_id)

    # ------------ lifecycle --------------

    def request_ride(self, rider: Rider, source: Location, destination: Location) -> Ride:
        self.hooks.ride_requested(rider_id=rider.id, source=source, destination=destination)

        current = self._active.get(rider.id)
        if current is not None:
            self.hooks.rejected("AlreadyHasActiveRide", rider_id=rider.id, ride_id=current.ride_id)
            raise AlreadyHasActiveRideError(rider.id, current.ride_id)

        match = self.matching.select(self.registry.list_available(), source)
        if match is None:
            self.hooks.rejected("NoDriverAvailable", rider_id=rider.id)
            raise NoDriverAvailableError(rider.id)
        driver, distance = match

        ride = Ride(
            ride_id=self._next_ride_id,
            rider_id=rider.id,
            driver_id=driver.id,
            source=source,
            destination=destination,
        )
        self._next_ride_id += 1

        self.registry.set_availability(driver.id, False)
        ride.activate()
        self._active[rider.id] = ride

        self.hooks.ride_matched(ride, distance=distance)
        return ride

    def end_ride(self, rider: Rider) -> Ride:
        ride = self._active.get(rider.id)
        if ride is None:
            self.hooks.rejected("NoActiveRide", rider_id=rider.id)
            raise NoActiveRideError(rider.id)

        ride.end()
        # driver is assumed to finish at the drop-off point
        self.registry.update_location(ride.driver_id, ride.destination)
        self.registry.set_availability(ride.driver_id, True)
        del self._active[rider.id]
        self._completed.append(ride)

        self.hooks.ride_ended(ride)
        return ride
