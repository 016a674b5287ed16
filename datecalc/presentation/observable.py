"""Property-change notification keyed by property name.

Observers subscribe to one property name, or to every property with
``None``. Setting a property to an equal value is not a change and notifies
nobody.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

PropertyCallback = Callable[[str, Any], None]


class Subscription:
    """Handle returned by ``ObservableObject.subscribe``."""

    __slots__ = ("_owner", "_name", "_callback")

    def __init__(
        self, owner: ObservableObject, name: str | None, callback: PropertyCallback
    ) -> None:
        self._owner: ObservableObject | None = owner
        self._name = name
        self._callback = callback

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def active(self) -> bool:
        return self._owner is not None

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call twice."""
        if self._owner is None:
            return
        self._owner._remove_observer(self._name, self._callback)
        self._owner = None


class ObservableObject:
    """Base class holding named property values and their observers.

    Subclasses read values with ``_get`` and write them with ``_set``;
    ``_set`` notifies observers and then calls ``on_property_changed``.

    Examples:
        >>> class Point(ObservableObject):
        ...     @property
        ...     def x(self):
        ...         return self._get("X")
        ...     @x.setter
        ...     def x(self, value):
        ...         self._set("X", value)
        >>> p = Point()
        >>> seen = []
        >>> sub = p.subscribe("X", lambda name, value: seen.append(value))
        >>> p.x = 3
        >>> p.x = 3
        >>> seen
        [3]
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._observers: dict[str | None, list[PropertyCallback]] = {}

    def subscribe(
        self, name: str | None, callback: PropertyCallback
    ) -> Subscription:
        """Call ``callback(name, value)`` whenever property ``name`` changes.

        Args:
            name: Property name, or None for every property.
            callback: Receives the property name and its new value.

        Returns:
            A Subscription whose ``unsubscribe()`` removes the callback.
        """
        self._observers.setdefault(name, []).append(callback)
        return Subscription(self, name, callback)

    def _remove_observer(self, name: str | None, callback: PropertyCallback) -> None:
        callbacks = self._observers.get(name)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def _get(self, name: str) -> Any:
        return self._values.get(name)

    def _set(self, name: str, value: Any) -> bool:
        """Store a property value, notifying observers if it changed.

        Returns:
            True if the value changed.
        """
        if name in self._values and self._values[name] == value:
            return False
        self._values[name] = value
        self.raise_property_changed(name)
        return True

    def raise_property_changed(self, name: str) -> None:
        """Notify observers of ``name``, then run ``on_property_changed``."""
        value = self._values.get(name)
        logger.debug("%s changed", name)
        # Copies: callbacks may subscribe or unsubscribe while we iterate
        for callback in list(self._observers.get(name, ())):
            callback(name, value)
        for callback in list(self._observers.get(None, ())):
            callback(name, value)
        self.on_property_changed(name)

    def on_property_changed(self, name: str) -> None:
        """Hook for subclasses; called after observers of ``name`` ran."""


__all__ = ["ObservableObject", "Subscription", "PropertyCallback"]
