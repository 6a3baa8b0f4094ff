# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within a run
    name: str  # stable event name


@dataclass
class RideRequestedBiz(BizEvent):
    rider_id: str
    ride_id: str
    kind: str
    distance: float
    fare_cents: int


@dataclass
class RideCompletedBiz(BizEvent):
    driver_id: str
    ride_id: str
    kind: str
    distance: float
    fare_cents: int
