# domain/entities/driver.py
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.app.hooks import NoopHooks, RideHooks
from ride_share.domain.entities.ride import DELIMITER, Ride


@dataclass
class Driver:
    id: str
    name: str
    rating: float  # 0-5 by convention, not enforced
    hooks: RideHooks = field(default_factory=NoopHooks, repr=False, compare=False)
    _rides: list[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    def record_completed_ride(self, ride: Ride) -> None:
        """Take ownership of `ride`; the caller must not use it afterwards."""
        ride.claim(f"driver:{self.id}")
        self._rides.append(ride)
        self.hooks.ride_recorded(self, ride)

    def report(self, out: TextIO | None = None) -> None:
        out = out or sys.stdout
        out.write("\n--- Driver Details ---\n")
        out.write(f"Driver ID: {self.id}\n")
        out.write(f"Name: {self.name}\n")
        out.write(f"Rating: {self.rating:.1f}/5.0\n")
        out.write(f"Completed Rides ({len(self._rides)}):\n")
        if not self._rides:
            out.write("  No rides completed yet.\n")
        for ride in self._rides:
            ride.describe(out)
            out.write(DELIMITER + "\n")
        self.hooks.report(owner_id=self.id, rides=len(self._rides))
