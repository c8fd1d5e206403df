# rh_dispatch/domain/registry.py
from rh_dispatch.domain.entities.driver import Driver
from rh_dispatch.domain.entities.geography import Location
from rh_dispatch.domain.errors import DriverNotFoundError, DuplicateDriverError
from rh_dispatch.sim.hooks import DispatchHooks, NoopHooks


class DriverRegistry:
    """Source of truth for which drivers exist, where they are and whether they are free."""

    def __init__(self, hooks: DispatchHooks | None = None):
        # dicts keep insertion order, which is the registry order used for tie-breaks
        self._drivers: dict[int, Driver] = {}
        self.hooks = hooks or NoopHooks()

    def __len__(self) -> int:
        return len(self._drivers)

    def __contains__(self, driver_id: object) -> bool:
        return driver_id in self._drivers

    def register(self, driver: Driver) -> None:
        if driver.id in self._drivers:
            raise DuplicateDriverError(driver.id)
        self._drivers[driver.id] = driver
        self.hooks.driver_registered(driver)

    def get(self, driver_id: int) -> Driver:
        try:
            return self._drivers[driver_id]
        except KeyError:
            raise DriverNotFoundError(driver_id) from None

    def update_location(self, driver_id: int, loc: Location) -> None:
        self.get(driver_id).loc = loc

    def set_availability(self, driver_id: int, available: bool) -> None:
        self.get(driver_id).available = available

    def list_all(self) -> tuple[Driver, ...]:
        return tuple(self._drivers.values())

    def list_available(self) -> list[Driver]:
        return [d for d in self._drivers.values() if d.available]
