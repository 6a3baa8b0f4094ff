# domain/entities/rider.py
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.app.hooks import NoopHooks, RideHooks
from ride_share.domain.entities.ride import DELIMITER, Ride


@dataclass
class Rider:
    id: str
    name: str
    hooks: RideHooks = field(default_factory=NoopHooks, repr=False, compare=False)
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    def request_ride(self, ride: Ride, out: TextIO | None = None) -> None:
        """Take ownership of `ride` and print it straight away."""
        ride.claim(f"rider:{self.id}")
        self._rides.append(ride)
        out = out or sys.stdout
        out.write(f"\n{self.name} requested a ride.\n")
        ride.describe(out)
        self.hooks.ride_requested(self, ride)

    def report(self, out: TextIO | None = None) -> None:
        out = out or sys.stdout
        out.write(f"\n--- {self.name}'s Ride History ---\n")
        if not self._rides:
            out.write("  No rides requested yet.\n")
        for ride in self._rides:
            ride.describe(out)
            out.write(DELIMITER + "\n")
        self.hooks.report(owner_id=self.id, rides=len(self._rides))
