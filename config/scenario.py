"""
Signal-Mind – Scenario Loader
Reads approach and timing configuration from a JSON file.

Format:
    {
      "timing": {"cycle_time": 120, "all_red": 5, "min_green": 10, "max_green": 60},
      "approaches": [
        {"id": 1, "name": "North", "lanes": 2, "arrival_rate": 0.5, "service_rate": 2.0},
        ...
      ]
    }
"""

import json

from config.settings import DEFAULT_APPROACHES
from simulation.approach import ApproachRegistry
from simulation.errors import ConfigError
from simulation.traffic_light import TimingPlan

_TIMING_KEYS = ("cycle_time", "all_red", "min_green", "max_green")


def timing_from_dict(data: dict | None) -> TimingPlan:
    data = data or {}
    unknown = set(data) - set(_TIMING_KEYS)
    if unknown:
        raise ConfigError(f"unknown timing keys: {sorted(unknown)}")
    return TimingPlan(**{k: data[k] for k in _TIMING_KEYS if k in data})


def scenario_from_dict(data: dict) -> tuple[ApproachRegistry, TimingPlan]:
    if not isinstance(data, dict):
        raise ConfigError("scenario must be a JSON object")
    approaches = data.get("approaches", DEFAULT_APPROACHES)
    if not isinstance(approaches, list):
        raise ConfigError("'approaches' must be a list")
    registry = ApproachRegistry.from_configs(approaches)
    timing = timing_from_dict(data.get("timing"))
    return registry, timing


def load_scenario(path: str) -> tuple[ApproachRegistry, TimingPlan]:
    try:
        with open(path) as fh:
            data = json.load(fh)
    except OSError as e:
        raise ConfigError(f"cannot read scenario {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"scenario {path} is not valid JSON: {e}") from e
    return scenario_from_dict(data)


def default_scenario() -> tuple[ApproachRegistry, TimingPlan]:
    return ApproachRegistry.from_configs(DEFAULT_APPROACHES), TimingPlan()
