# main.py
import sys

from rh_dispatch.app.build import build
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.entities.rider import Rider
from rh_dispatch.domain.errors import DispatchError
from rh_dispatch.io.config import load_scenario

DEMO = {
    "name": "demo",
    "run_id": "demo-1",
    "log": {"level": "WARNING"},
    "fleet": [
        {"id": 1, "name": "Driver A", "x": 2, "y": 3},
        {"id": 2, "name": "Driver B", "x": 10, "y": 20},
        {"id": 3, "name": "Driver C", "x": 4, "y": 4},
    ],
}


def run(cfg) -> None:
    app = build(cfg)
    rider = Rider(100, "Rider One")
    source, destination = Location(3, 3), Location(7, 8)

    try:
        ride = app.dispatcher.request_ride(rider, source, destination)
    except DispatchError as e:
        print(f"request failed: {e}")
        return
    driver = app.dispatcher.driver_for(ride)
    print(f"ride {ride.ride_id} booked with {driver.name}")
    print(f"from {source.as_tuple()} to {destination.as_tuple()}")

    app.dispatcher.end_ride(rider)
    print(f"ride ended; {driver.name} now at {driver.loc.as_tuple()}")

    if app.dispatcher.get_active_ride(rider) is None:
        print(f"no active ride for {rider.name}")


if __name__ == "__main__":
    run(load_scenario(sys.argv[1]) if len(sys.argv) > 1 else DEMO)
