# ride_share/app/demo.py
import sys
from typing import TextIO

from ride_share.app.build import App
from ride_share.domain.entities.ride import DELIMITER, Ride
from ride_share.runtime.registries import make_ride


def run_demo(app: App, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    cfg = app.config
    out.write("--- Ride Sharing System Demonstration ---\n")

    # each ride is constructed and handed over in one step; nothing keeps a reference
    for ride_cfg in cfg.rider.requests:
        app.rider.request_ride(make_ride(ride_cfg), out)

    # the driver gets its own instances of the same trips: a ride has one owner
    for ride_cfg in cfg.driver.completed:
        app.driver.record_completed_ride(make_ride(ride_cfg))

    app.driver.report(out)
    app.rider.report(out)

    out.write("\n--- Polymorphism Demonstration (List of All Rides in System) ---\n")
    system_rides: list[Ride] = [make_ride(r) for r in cfg.system_rides]
    for ride in system_rides:
        ride.compute_fare()
        ride.describe(out)
        out.write(DELIMITER + "\n")

    out.write("\n--- Demonstration Complete ---\n")
