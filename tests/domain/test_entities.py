import math

import pytest

from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.entities.ride import Ride, RideStatus
from rh_dispatch.domain.entities.rider import Rider


def test_location_distance_is_euclidean_and_symmetric():
    a, b = Location(3.0, 3.0), Location(10.0, 20.0)
    assert a.distance_to(b) == pytest.approx(math.sqrt(49 + 289))
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0.0


def test_location_and_rider_are_immutable():
    loc = Location(1.0, 2.0)
    with pytest.raises(AttributeError):
        loc.x = 5.0
    r = Rider(100, "Rider One")
    with pytest.raises(AttributeError):
        r.name = "Other"


def _ride():
    return Ride(
        ride_id=1,
        rider_id=100,
        driver_id=1,
        source=Location(3.0, 3.0),
        destination=Location(7.0, 8.0),
    )


def test_ride_lifecycle_requested_active_ended():
    ride = _ride()
    assert ride.status is RideStatus.REQUESTED and not ride.completed
    ride.activate()
    assert ride.status is RideStatus.ACTIVE and not ride.completed
    ride.end()
    assert ride.status is RideStatus.ENDED and ride.completed


def test_ride_rejects_illegal_transitions():
    ride = _ride()
    with pytest.raises(RuntimeError):
        ride.end()  # cannot skip ACTIVE
    ride.activate()
    with pytest.raises(RuntimeError):
        ride.activate()
    ride.end()
    with pytest.raises(RuntimeError):
        ride.end()  # ENDED is terminal
    assert ride.status is RideStatus.ENDED
