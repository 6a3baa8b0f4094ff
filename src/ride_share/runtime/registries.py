# runtime/registries.py
from collections.abc import Callable

from ride_share.config.models import PremiumRideModel, RideUnion, StandardRideModel
from ride_share.domain.entities.ride import PremiumRide, Ride, StandardRide

RideFactory = Callable[[RideUnion], Ride]

_ride_registry: dict[str, RideFactory] = {}


def register_ride(kind: str):
    def deco(fn: RideFactory):
        _ride_registry[kind] = fn
        return fn

    return deco


def make_ride(cfg: RideUnion) -> Ride:
    """Construct a fully priced ride of the configured variant."""
    try:
        factory = _ride_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown ride kind {cfg.kind!r}")
    return factory(cfg)


@register_ride("standard")
def _make_standard(cfg: StandardRideModel):
    return StandardRide(cfg.ride_id, cfg.pickup, cfg.dropoff, cfg.distance)


@register_ride("premium")
def _make_premium(cfg: PremiumRideModel):
    return PremiumRide(cfg.ride_id, cfg.pickup, cfg.dropoff, cfg.distance)
