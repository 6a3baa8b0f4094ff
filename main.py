# main.py
import sys

from ride_share.app.build import build
from ride_share.app.demo import run_demo
from ride_share.io.config import load_scenario


def run(scenario_path: str | None = None) -> None:
    cfg = load_scenario(scenario_path) if scenario_path else None
    app = build(cfg)
    run_demo(app)


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else None)
