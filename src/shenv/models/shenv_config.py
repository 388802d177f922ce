"""Persisted user configuration for shenv."""

from pydantic import BaseModel, Field

# Names an "apply" consumer conventionally leaves alone: the working directory,
# shell bookkeeping, and our own logging knob.
CONVENTIONAL_IGNORES = frozenset({"PWD", "OLDPWD", "SHLVL", "_", "SHENV_LOG_LEVEL"})


class ShenvConfig(BaseModel):
    """Runtime configuration for the shenv CLI."""

    shell: str | None = None
    skip_conventional: bool = False
    ignore: list[str] = Field(default_factory=list)
