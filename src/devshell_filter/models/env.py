"""Environment snapshot and final environment models."""

from pydantic import BaseModel, ConfigDict, Field

from devshell_filter.models.variables import VariableValue


class Env(BaseModel):
    """Snapshot printed by ``nix print-dev-env --json``.

    The same shape doubles as a filter specification: the presence of a key
    marks the entry for removal and its value says how much to remove.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bash_functions: dict[str, str] = Field(default_factory=dict, alias="bashFunctions")
    variables: dict[str, VariableValue] = Field(default_factory=dict)


class FinalEnv(BaseModel):
    """Path variables and plain variables ready to inject into a shell."""

    model_config = ConfigDict(frozen=True)

    paths: dict[str, str] = Field(default_factory=dict)
    variables: dict[str, str] = Field(default_factory=dict)
