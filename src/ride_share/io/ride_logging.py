# io/ride_logging.py
import json
import logging
import sys

from ride_share.app.hooks import NoopHooks
from ride_share.io.business_events import RideCompletedBiz, RideRequestedBiz
from ride_share.io.recorder import Recorder


def _default_json_logger(name="ride_share", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stderr: stdout carries the demo transcript
        h = logging.StreamHandler(sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _cents(fare: float) -> int:
    return int(round(fare * 100))


class RideLogging(NoopHooks):
    """
    Structured logs for owner activity, plus business events for the recorder.

    Every ride handed to a rider or driver produces one INFO record; reports
    are logged at DEBUG and only when `debug` is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        # debug records are emitted at DEBUG, so the logger has to let them through
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _shape_ride(ride) -> dict:
        return {
            "ride_id": ride.id,
            "kind": ride.kind,
            "distance": ride.distance,
            "fare": ride.fare,
        }

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    # --------------------------------------------------------

    def ride_requested(self, rider, ride):
        seq = self._next_seq()
        self._emit("INFO", "ride_requested", rider_id=rider.id, seq=seq, **self._shape_ride(ride))
        self.biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RideRequested",
                rider_id=rider.id,
                ride_id=ride.id,
                kind=ride.kind,
                distance=ride.distance,
                fare_cents=_cents(ride.fare),
            )
        )

    def ride_recorded(self, driver, ride):
        seq = self._next_seq()
        self._emit("INFO", "ride_recorded", driver_id=driver.id, seq=seq, **self._shape_ride(ride))
        self.biz(
            RideCompletedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RideCompleted",
                driver_id=driver.id,
                ride_id=ride.id,
                kind=ride.kind,
                distance=ride.distance,
                fare_cents=_cents(ride.fare),
            )
        )

    def report(self, *, owner_id: str, rides: int):
        if self.debug:
            self._emit("DEBUG", "report", owner_id=owner_id, rides=rides)

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
