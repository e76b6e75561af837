import os
from typing import Mapping

from pydantic import BaseModel, Field

INDIRECTION_FILE_NAME = "dt_metadata_e617c525669e072eebe3d0f08212e8f2.properties"
ENV_PREFIX = "FILE_POLLER_"


class Dimension(BaseModel):
    key: str
    value: str


class PollerSettings(BaseModel):
    poll_interval: float = Field(default=1.0, gt=0)
    indirection_file: str = Field(default=INDIRECTION_FILE_NAME)
    log_dir: str = Field(default=".file_poller")
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "PollerSettings":
        """Build settings from ``FILE_POLLER_*`` environment variables."""
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        return cls.model_validate(values)
