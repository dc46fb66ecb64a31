"""Runtime configuration of the calculator."""
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "SMART_CALCULATOR_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """
    Calculator settings.

    Settings are immutable once built; a session keeps the instance it was
    started with for its whole lifetime.
    """

    model_config = ConfigDict(frozen=True)

    max_exponent: int = Field(
        default=100_000,
        ge=0,
        description="Largest exponent accepted by the power operator",
    )
    max_result_bits: int = Field(
        default=1_000_000,
        ge=1,
        description="Largest result size, in bits, the power operator may produce",
    )
    log_level: LogLevel = Field(default="WARNING", description="Level of the shared logger")
    prompt: str = Field(default="", description="Prompt printed before reading each line")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from ``SMART_CALCULATOR_*`` environment variables.

        Unset variables keep their default value; invalid values raise a
        pydantic ``ValidationError``.

        :param Mapping environ: Environment to read, defaults to ``os.environ``

        :return: Validated settings
        :rtype: Settings
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in environ:
                values[name] = environ[key]
        return cls.model_validate(values)


DEFAULT_SETTINGS = Settings()
