# domain/entities/driver.py
from dataclasses import dataclass

from rh_dispatch.domain.entities.geography import Location


@dataclass
class Driver:
    id: int
    name: str
    loc: Location
    available: bool = True
