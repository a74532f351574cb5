"""Subject and observer roles of the observer pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that reacts whenever the subject it watches changes."""

    def __init__(self) -> None:
        self.subject: Subject | None = None

    @abstractmethod
    def update(self) -> None:
        """React to a change in the subject."""


class Subject:
    """Keeps a list of observers and tells each of them about changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        """The attached observers, in the order they were attached."""
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Add an observer and make this subject its subject."""
        if observer is None:
            raise TypeError("cannot attach None as an observer")
        self._observers.append(observer)
        observer.subject = self

    def detach(self, observer: Observer) -> None:
        """Remove the first attachment of an observer.

        Raises ValueError if the observer is not attached.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            raise ValueError("observer is not attached to this subject") from None
        if observer.subject is self and observer not in self._observers:
            observer.subject = None

    def notify(self) -> None:
        """Call update() on every attached observer in attachment order."""
        for observer in list(self._observers):
            observer.update()