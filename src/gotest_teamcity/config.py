
from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Optional
import yaml, pathlib
from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConverterConfig(BaseModel):
    name_prefix: str = Field("", description="Prepended (with a space) to every reported test name")
    log_level: str = Field("WARNING", description="Diagnostic log level on stderr")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

def load_config(path: Optional[str]) -> ConverterConfig:
    if path is None:
        return ConverterConfig()
    try:
        data = yaml.safe_load(pathlib.Path(path).read_text())
    except OSError as e:
        raise ConfigError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(path, str(e)) from e
    try:
        return ConverterConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e
