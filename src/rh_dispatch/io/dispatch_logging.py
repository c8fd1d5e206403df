# io/dispatch_logging.py
import json
import logging
import sys

from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.entities.ride import Ride
from rh_dispatch.io.business_events import (
    DriverRegisteredBiz,
    RideEndedBiz,
    RideMatchedBiz,
    RideRejectedBiz,
    RideRequestedBiz,
)
from rh_dispatch.io.recorder import Recorder
from rh_dispatch.sim.hooks import NoopHooks


def _default_json_logger(name="rh_dispatch", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class DispatchLogging(NoopHooks):
    """
    One place to shape and emit structured logs and business events for the dispatcher.
    Accepted outcomes log at INFO, rejected requests at WARNING.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id = run_id
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _biz(self, cls, name: str, **fields):
        self._seq += 1
        if self.recorder:
            self.recorder.emit(cls(run_id=self.run_id, seq=self._seq, name=name, **fields))

    # --------------------------------------------------------

    def driver_registered(self, driver: Driver):
        loc = driver.loc.as_tuple()
        self._emit("INFO", "DriverRegistered", driver_id=driver.id, loc=loc)
        self._biz(
            DriverRegisteredBiz,
            "DriverRegistered",
            driver_id=driver.id,
            loc=loc,
            available=driver.available,
        )

    def ride_requested(self, *, rider_id: int, source: Location, destination: Location):
        src, dst = source.as_tuple(), destination.as_tuple()
        self._emit("INFO", "RideRequested", rider_id=rider_id, source=src, destination=dst)
        self._biz(RideRequestedBiz, "RideRequested", rider_id=rider_id, source=src, destination=dst)

    def ride_matched(self, ride: Ride, *, distance: float):
        self._emit(
            "INFO",
            "RideMatched",
            rider_id=ride.rider_id,
            driver_id=ride.driver_id,
            ride_id=ride.ride_id,
            distance=distance,
        )
        self._biz(
            RideMatchedBiz,
            "RideMatched",
            rider_id=ride.rider_id,
            driver_id=ride.driver_id,
            ride_id=ride.ride_id,
            distance=distance,
        )

    def ride_ended(self, ride: Ride):
        dst = ride.destination.as_tuple()
        self._emit(
            "INFO",
            "RideEnded",
            rider_id=ride.rider_id,
            driver_id=ride.driver_id,
            ride_id=ride.ride_id,
            destination=dst,
        )
        self._biz(
            RideEndedBiz,
            "RideEnded",
            rider_id=ride.rider_id,
            driver_id=ride.driver_id,
            ride_id=ride.ride_id,
            destination=dst,
        )

    def rejected(self, reason: str, *, rider_id: int, **kw):
        self._emit("WARNING", reason, rider_id=rider_id, **kw)
        self._biz(RideRejectedBiz, "RideRejected", rider_id=rider_id, reason=reason, **kw)
