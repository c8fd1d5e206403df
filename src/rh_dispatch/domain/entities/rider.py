# domain/entities/rider.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Rider:
    id: int
    name: str
