from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .diagnostic import Level


class RunConfig(BaseModel):
    """Run configuration, usually loaded from fontcheck.yaml."""

    model_config = ConfigDict(extra="ignore")
    checks: list[str] = Field(default_factory=list)
    min_level: Level = Level.SKIP
    strict: bool = False
    jobs: int = Field(default=1, ge=1)

    @field_validator("min_level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return Level.parse(v)

    @field_serializer("min_level")
    def _serialize_level(self, level: Level) -> str:
        return level.label
