"""Typed values of a single environment entry."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Exported(BaseModel):
    """A scalar marked for export to child processes."""

    model_config = ConfigDict(frozen=True)

    type: Literal["exported"] = "exported"
    value: str

    def is_empty(self) -> bool:
        return not self.value


class Var(BaseModel):
    """A scalar shell variable that is not exported."""

    model_config = ConfigDict(frozen=True)

    type: Literal["var"] = "var"
    value: str

    def is_empty(self) -> bool:
        return not self.value


class Array(BaseModel):
    """An indexed shell array. Element order is significant."""

    model_config = ConfigDict(frozen=True)

    type: Literal["array"] = "array"
    value: list[str]

    def is_empty(self) -> bool:
        return not self.value


class Associative(BaseModel):
    """A shell associative array."""

    model_config = ConfigDict(frozen=True)

    type: Literal["associative"] = "associative"
    value: dict[str, str]

    def is_empty(self) -> bool:
        return not self.value


VariableValue = Annotated[
    Union[Exported, Var, Array, Associative],
    Field(discriminator="type"),
]

SCALAR_TYPES = (Exported, Var)
