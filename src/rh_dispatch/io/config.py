# src/rh_dispatch/io/config.py
import json
import os
from pathlib import Path

from rh_dispatch.config.models import ScenarioModel


def load_scenario(path: str | os.PathLike) -> ScenarioModel:
    p = Path(os.path.expandvars(os.path.expanduser(os.fspath(path))))
    with p.open(encoding="utf-8") as fp:
        return ScenarioModel.model_validate(json.load(fp))
