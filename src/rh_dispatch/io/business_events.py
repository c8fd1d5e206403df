# rh_dispatch/io/business_events.py

from dataclasses import dataclass
from typing import Literal


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class DriverRegisteredBiz(BizEvent):
    driver_id: int
    loc: tuple[float, float]
    available: bool


@dataclass
class RideRequestedBiz(BizEvent):
    rider_id: int
    source: tuple[float, float]
    destination: tuple[float, float]


@dataclass
class RideMatchedBiz(BizEvent):
    rider_id: int
    driver_id: int
    ride_id: int
    distance: float


@dataclass
class RideRejectedBiz(BizEvent):
    rider_id: int
    reason: Literal["NoDriverAvailable", "NoActiveRide", "AlreadyHasActiveRide"]
    ride_id: int | None = None


@dataclass
class RideEndedBiz(BizEvent):
    rider_id: int
    driver_id: int
    ride_id: int
    destination: tuple[float, float]
