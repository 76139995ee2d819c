"""Forms as seen by submit handlers.

A submit handler only needs the form's bound model object. Host
frameworks can pass any object satisfying ModelForm; Form is a minimal
implementation for hosts without their own form layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ModelForm(Protocol[T_co]):
    """A form bound to a model object."""

    @property
    def id(self) -> str: ...

    def get_model_object(self) -> T_co: ...


@dataclass(frozen=True, slots=True)
class Form(Generic[T]):
    """A form and the object its fields were bound to."""

    id: str
    model_object: T

    def get_model_object(self) -> T:
        return self.model_object


__all__ = ["Form", "ModelForm"]
