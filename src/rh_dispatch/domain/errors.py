"""Expected dispatch outcomes, raised for callers to branch on."""


class DispatchError(Exception):
    """Base class for every dispatch outcome the caller is expected to handle."""


class NoDriverAvailableError(DispatchError):
    """Raised when a ride request finds no available driver."""

    def __init__(self, rider_id: int):
        super().__init__(f"no driver available for rider {rider_id}")
        self.rider_id = rider_id


class NoActiveRideError(DispatchError):
    """Raised when ending a ride for a rider with nothing active."""

    def __init__(self, rider_id: int):
        super().__init__(f"rider {rider_id} has no active ride")
        self.rider_id = rider_id


class AlreadyHasActiveRideError(DispatchError):
    """Raised when a rider requests a second ride while one is active."""

    def __init__(self, rider_id: int, ride_id: int):
        super().__init__(f"rider {rider_id} already has active ride {ride_id}")
        self.rider_id = rider_id
        self.ride_id = ride_id


class DriverNotFoundError(DispatchError, LookupError):
    def __init__(self, driver_id: int):
        super().__init__(f"unknown driver id {driver_id}")
        self.driver_id = driver_id


class DuplicateDriverError(DispatchError, ValueError):
    def __init__(self, driver_id: int):
        super().__init__(f"driver id {driver_id} is already registered")
        self.driver_id = driver_id
