"""Term identifiers and the identity capability."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from phenotypes.domain.constants import CURIE_SEPARATORS, INVALID_CURIE_MSG


class TermId(BaseModel):
    """
    Stable identifier of an ontology concept, e.g. `HP:0010442`.

    Opaque to the rest of the library: features store and return it, nothing
    else looks inside.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., min_length=1, pattern=r"^\S+$", description="Ontology prefix, e.g. 'HP'.")
    id: str = Field(..., min_length=1, pattern=r"^\S+$", description="Local identifier, e.g. '0010442'.")

    @model_validator(mode="before")
    @classmethod
    def _split_curie(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split(data)
        return data

    @classmethod
    def from_curie(cls, curie: str) -> "TermId":
        """
        Parse a CURIE into a `TermId`.

        Both `HP:0010442` and `HP_0010442` are accepted.

        Raises:
            pydantic.ValidationError: If no separator is found or a part is empty
        """
        return cls.model_validate(curie)

    @property
    def value(self) -> str:
        return f"{self.prefix}:{self.id}"

    def __str__(self) -> str:
        return self.value


def _split(curie: str) -> dict[str, str]:
    s = curie.strip()
    for sep in CURIE_SEPARATORS:
        prefix, found, local_id = s.partition(sep)
        if found:
            return {"prefix": prefix, "id": local_id}
    raise ValueError(f"{INVALID_CURIE_MSG}, got {curie!r}")


class Identified(ABC):
    """An entity that carries a term identifier."""

    __slots__ = ()

    @abstractmethod
    def identifier(self) -> TermId:
        raise NotImplementedError
