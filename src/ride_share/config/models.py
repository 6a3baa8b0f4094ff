from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # also lowers the logger to DEBUG


# ----------------- RIDES ---------------------
# distance is deliberately unconstrained: negative values flow into the fare


class StandardRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"
    ride_id: str
    pickup: str
    dropoff: str
    distance: float


class PremiumRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["premium"] = "premium"
    ride_id: str
    pickup: str
    dropoff: str
    distance: float


RideUnion = Annotated[StandardRideModel | PremiumRideModel, Field(discriminator="kind")]


def _rides(*rows: tuple[str, str, str, str, float]) -> list[RideUnion]:
    models = {"standard": StandardRideModel, "premium": PremiumRideModel}
    return [
        models[kind](ride_id=rid, pickup=pickup, dropoff=dropoff, distance=dist)
        for kind, rid, pickup, dropoff, dist in rows
    ]


# ----------------- OWNERS ---------------------


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    rider_id: str = "R001"
    name: str = "Sandesh Shrestha"
    requests: list[RideUnion] = Field(
        default_factory=lambda: _rides(
            ("standard", "S001", "Downtown", "Suburb A", 10.5),
            ("premium", "P002", "Airport", "City Center", 25.0),
            ("standard", "S003", "Park", "Museum", 3.2),
        )
    )


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    driver_id: str = "D001"
    name: str = "Alice Smith"
    rating: float = 4.8  # 0-5 scale, not enforced
    completed: list[RideUnion] = Field(
        default_factory=lambda: _rides(
            ("standard", "S001-C", "Downtown", "Suburb A", 10.5),
            ("premium", "P002-C", "Airport", "City Center", 25.0),
            ("standard", "S003-C", "Park", "Museum", 3.2),
        )
    )


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "demo"
    run_id: str = "local"
    log: LogModel = LogModel()
    rider: RiderModel = Field(default_factory=RiderModel)
    driver: DriverModel = Field(default_factory=DriverModel)
    system_rides: list[RideUnion] = Field(
        default_factory=lambda: _rides(
            ("standard", "SysR01", "Library", "Cafe", 7.0),
            ("premium", "SysR02", "Mall", "Home", 4.5),
            ("standard", "SysR03", "Gym", "Cafe", 2.0),
            ("premium", "SysR04", "School", "Park", 12.0),
        )
    )
