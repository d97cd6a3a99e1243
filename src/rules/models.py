from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class ArrayUtilsRules(BaseModel):
    default_chunk_size: int = Field(ge=1)
    batch_size: int = Field(ge=1)

class LogRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {list(LOG_LEVELS)}, got {value!r}")
        return level

class ObservabilityRules(BaseModel):
    logs: LogRules = Field(default_factory=LogRules)

class Rules(BaseModel):
    project: ProjectRules
    array_utils: ArrayUtilsRules
    observability: ObservabilityRules = Field(default_factory=ObservabilityRules)
