# tests/app/test_demo_output.py
import io

from ride_share.app.build import build
from ride_share.app.demo import run_demo

DELIM = "--------------------\n"


def _ride(rid, pickup, dropoff, dist, fare):
    return (
        f"Ride ID: {rid}\n"
        f"  Pickup: {pickup}\n"
        f"  Dropoff: {dropoff}\n"
        f"  Distance: {dist} miles\n"
        f"  Fare: ${fare}\n"
    )


EXPECTED = (
    "--- Ride Sharing System Demonstration ---\n"
    "\nSandesh Shrestha requested a ride.\n"
    + _ride("S001", "Downtown", "Suburb A", "10.5", "21.00")
    + "\nSandesh Shrestha requested a ride.\n"
    + _ride("P002", "Airport", "City Center", "25.0", "92.50")
    + "\nSandesh Shrestha requested a ride.\n"
    + _ride("S003", "Park", "Museum", "3.2", "6.40")
    + "\n--- Driver Details ---\n"
    "Driver ID: D001\n"
    "Name: Alice Smith\n"
    "Rating: 4.8/5.0\n"
    "Completed Rides (3):\n"
    + _ride("S001-C", "Downtown", "Suburb A", "10.5", "21.00")
    + DELIM
    + _ride("P002-C", "Airport", "City Center", "25.0", "92.50")
    + DELIM
    + _ride("S003-C", "Park", "Museum", "3.2", "6.40")
    + DELIM
    + "\n--- Sandesh Shrestha's Ride History ---\n"
    + _ride("S001", "Downtown", "Suburb A", "10.5", "21.00")
    + DELIM
    + _ride("P002", "Airport", "City Center", "25.0", "92.50")
    + DELIM
    + _ride("S003", "Park", "Museum", "3.2", "6.40")
    + DELIM
    + "\n--- Polymorphism Demonstration (List of All Rides in System) ---\n"
    + _ride("SysR01", "Library", "Cafe", "7.0", "14.00")
    + DELIM
    + _ride("SysR02", "Mall", "Home", "4.5", "20.75")
    + DELIM
    + _ride("SysR03", "Gym", "Cafe", "2.0", "4.00")
    + DELIM
    + _ride("SysR04", "School", "Park", "12.0", "47.00")
    + DELIM
    + "\n--- Demonstration Complete ---\n"
)


def test_demo_transcript_matches():
    out = io.StringIO()
    run_demo(build(use_logging=False), out)
    assert out.getvalue() == EXPECTED


def test_demo_writes_to_stdout_by_default(capsys):
    run_demo(build(use_logging=False))
    captured = capsys.readouterr()
    assert captured.out == EXPECTED


def test_demo_leaves_owners_populated():
    app = build(use_logging=False)
    run_demo(app, io.StringIO())
    assert [r.id for r in app.rider.rides] == ["S001", "P002", "S003"]
    assert [r.id for r in app.driver.rides] == ["S001-C", "P002-C", "S003-C"]
    # no instance is shared between the two owners
    assert not {id(r) for r in app.rider.rides} & {id(r) for r in app.driver.rides}


def test_main_runs(capsys):
    from main import run

    run()
    assert capsys.readouterr().out == EXPECTED
