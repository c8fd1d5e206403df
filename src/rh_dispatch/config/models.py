from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    sink: Literal["jsonl", "memory"] = "memory"  # where business events go


# ----------------- FLEET ---------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)
    available: bool = True


# ------------------ POLICIES -----------------------------


class MatchingPolicyNearestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["nearest"] = "nearest"
    metric: Literal["euclidean", "manhattan"] = "euclidean"


class MatchingPolicyFirstAvailableModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["first_available"] = "first_available"


MatchingPolicyUnion = Annotated[
    MatchingPolicyNearestModel | MatchingPolicyFirstAvailableModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    matching: MatchingPolicyUnion = Field(default_factory=MatchingPolicyNearestModel)
    fleet: list[DriverModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_driver_ids(self):
        seen: set[int] = set()
        for d in self.fleet:
            if d.id in seen:
                raise ValueError(f"fleet has duplicate driver id {d.id}")
            seen.add(d.id)
        return self
