# ride_share/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.app.hooks import NoopHooks, RideHooks
from ride_share.config.models import ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.rider import Rider
from ride_share.io.recorder import MemorySink, Recorder, Sink
from ride_share.io.ride_logging import RideLogging


@dataclass
class App:
    config: ScenarioModel
    hooks: RideHooks
    recorder: Recorder | None
    rider: Rider
    driver: Driver


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & recorder
    recorder = None
    if use_logging:
        # business events stay in memory unless a caller asks for a stream
        recorder = Recorder(*(sinks or (MemorySink(),)))
        hooks = RideLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 2) Owners (rides are created later, in the order the demo hands them over)
    rider = Rider(id=model.rider.rider_id, name=model.rider.name, hooks=hooks)
    driver = Driver(
        id=model.driver.driver_id,
        name=model.driver.name,
        rating=model.driver.rating,
        hooks=hooks,
    )

    return App(config=model, hooks=hooks, recorder=recorder, rider=rider, driver=driver)
