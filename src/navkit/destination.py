"""Destination: where a navigation request should go.

A tagged union of frozen dataclasses. Consumers dispatch with
``match``::

    match destination:
        case Push(page=page): ...
        case Sheet(sheet=sheet): ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Destination(ABC):
    """Base of every navigation target."""

    @property
    @abstractmethod
    def payload(self) -> Any:
        """The value carried by this destination."""

    @property
    def as_page(self) -> Any | None:
        """The pushed page, if this is a ``Push`` destination."""
        return None


@dataclass(frozen=True, slots=True)
class External(Destination):
    """A URL handed to the platform opener."""

    url: str

    @property
    def payload(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class Tab[T](Destination):
    """Select a tab on the root router."""

    tab: T

    @property
    def payload(self) -> T:
        return self.tab


@dataclass(frozen=True, slots=True)
class Push[P](Destination):
    """Append a page to the receiving router's stack."""

    page: P

    @property
    def payload(self) -> P:
        return self.page

    @property
    def as_page(self) -> P:
        return self.page


@dataclass(frozen=True, slots=True)
class Alert[A](Destination):
    """Present an alert."""

    alert: A

    @property
    def payload(self) -> A:
        return self.alert


@dataclass(frozen=True, slots=True)
class Sheet[S](Destination):
    """Present a sheet."""

    sheet: S

    @property
    def payload(self) -> S:
        return self.sheet


@dataclass(frozen=True, slots=True)
class FullScreen[F](Destination):
    """Present a full-screen cover."""

    full_screen: F

    @property
    def payload(self) -> F:
        return self.full_screen
