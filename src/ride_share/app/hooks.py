# app/hooks.py
from typing import Protocol


class RideHooks(Protocol):
    def ride_requested(self, rider, ride): ...
    def ride_recorded(self, driver, ride): ...
    def report(self, *, owner_id: str, rides: int): ...


class NoopHooks:
    def ride_requested(self, *_, **__):
        pass

    def ride_recorded(self, *_, **__):
        pass

    def report(self, **_):
        pass
