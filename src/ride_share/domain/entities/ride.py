# domain/entities/ride.py
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, TextIO

from ride_share.domain.errors import RideOwnershipError

DELIMITER = "--------------------"


# frozen: fare must always match distance; eq=False: a ride is its identity
@dataclass(frozen=True, eq=False)
class Ride(ABC):
    """
    One trip: locations, distance in miles and the fare derived from it.

    Only the variants are constructible. Each computes its fare while being
    constructed, so `fare` is valid as soon as the object exists.
    Distance is not validated; a negative distance gives a negative fare.
    """

    kind: ClassVar[str] = ""

    id: str
    pickup: str
    dropoff: str
    distance: float
    _fare: float = field(default=0.0, init=False, repr=False)
    _owner: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.compute_fare()

    @abstractmethod
    def compute_fare(self) -> None: ...

    def _store_fare(self, fare: float) -> None:
        object.__setattr__(self, "_fare", fare)

    @property
    def fare(self) -> float:
        return self._fare

    @property
    def owner(self) -> str | None:
        return self._owner

    def claim(self, owner: str) -> None:
        if self._owner is not None:
            raise RideOwnershipError(
                f"ride {self.id!r} is owned by {self._owner!r}, cannot transfer to {owner!r}"
            )
        object.__setattr__(self, "_owner", owner)

    def details(self) -> str:
        return (
            f"Ride ID: {self.id}\n"
            f"  Pickup: {self.pickup}\n"
            f"  Dropoff: {self.dropoff}\n"
            f"  Distance: {self.distance:.1f} miles\n"
            f"  Fare: ${self._fare:.2f}\n"
        )

    def describe(self, out: TextIO | None = None) -> None:
        (out or sys.stdout).write(self.details())


@dataclass(frozen=True, eq=False)
class StandardRide(Ride):
    kind: ClassVar[str] = "standard"
    RATE_PER_MILE: ClassVar[float] = 2.0

    def compute_fare(self) -> None:
        self._store_fare(self.distance * self.RATE_PER_MILE)


@dataclass(frozen=True, eq=False)
class PremiumRide(Ride):
    kind: ClassVar[str] = "premium"
    RATE_PER_MILE: ClassVar[float] = 3.5
    SURCHARGE: ClassVar[float] = 5.0

    def compute_fare(self) -> None:
        self._store_fare(self.distance * self.RATE_PER_MILE + self.SURCHARGE)
