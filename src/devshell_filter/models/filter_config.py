"""Allow-list configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Controls which variables reach the shell and how path lists are trimmed.

    ``path_vars`` names extra variables handled as path lists, ``paths`` maps a
    path variable to literal segments to drop from it, and ``variables`` names
    variables that never reach the shell.
    """

    model_config = ConfigDict(frozen=True)

    path_vars: list[str] = Field(default_factory=list)
    paths: dict[str, list[str]] = Field(default_factory=dict)
    variables: list[str] = Field(default_factory=list)
