# domain/entities/ride.py
from dataclasses import dataclass
from enum import Enum

from rh_dispatch.domain.entities.geography import Location


class RideStatus(Enum):
    REQUESTED = "requested"
    ACTIVE = "active"
    ENDED = "ended"


_NEXT: dict[RideStatus, RideStatus] = {
    RideStatus.REQUESTED: RideStatus.ACTIVE,
    RideStatus.ACTIVE: RideStatus.ENDED,
}


@dataclass
class Ride:
    """
    One rider/driver pairing.

    Holds the driver's id rather than the Driver itself: location and
    availability are read back through the registry, never from a copy.
    """

    ride_id: int
    rider_id: int
    driver_id: int
    source: Location
    destination: Location
    status: RideStatus = RideStatus.REQUESTED

    @property
    def completed(self) -> bool:
        return self.status is RideStatus.ENDED

    def _advance(self, to: RideStatus) -> None:
        if _NEXT.get(self.status) is not to:
            raise RuntimeError(
                f"ride {self.ride_id}: illegal transition {self.status.value} -> {to.value}"
            )
        self.status = to

    def activate(self) -> None:
        self._advance(RideStatus.ACTIVE)

    def end(self) -> None:
        self._advance(RideStatus.ENDED)
