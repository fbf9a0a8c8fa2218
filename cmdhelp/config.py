"""
Runtime configuration.

Settings come from CMDHELP_* environment variables (a .env file is picked
up via python-dotenv) and are overridden by explicit CLI options.
"""

import codecs
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CMDHELP_"


class Settings(BaseModel):
    """Options shared by the markdown and MAML writers."""
    encoding: str = Field("utf-8", description="Text encoding of written files")
    output_folder: Path = Field(Path("./out"), description="Destination folder")
    locale: str = Field("en-US", description="Help content locale")
    help_version: Optional[str] = Field(None, description="Module help version")
    help_info_uri: Optional[str] = Field(None, description="Updatable help download link")
    num_workers: int = Field(4, ge=1, description="Parallel conversion workers")
    with_module_page: bool = Field(False, description="Also write the module index page")
    force: bool = Field(False, description="Overwrite existing markdown pages")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}") from None

    @classmethod
    def from_env(cls, **overrides: Any) -> "Settings":
        """
        Build settings from the environment.

        Args:
            **overrides: Explicit values; None means "not given"

        Returns:
            Settings
        """
        load_dotenv(find_dotenv(usecwd=True))

        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if env_value is not None:
                values[name] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
