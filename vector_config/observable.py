"""
Design (observable.py)
- Purpose: Give configuration objects "mutable field + change notification" behavior,
           so transport code can react to address/routing changes without polling disk.
- Inputs: Backing attribute name, new value, and the public property name to announce.
- Outputs: bool from set_property (True when the value actually changed).
- Side effects: Invokes subscribed handlers inline on the caller's thread.
- Thread-safety: None. Mutate an object from one thread at a time; handlers must not
                 re-enter a mutation of the same property.
"""

from typing import Any, Callable, List

PropertyChangedHandler = Callable[[Any, str], None]


class ObservableObject:
    """
    Design (ObservableObject)
    - State:
        _property_changed_handlers: handlers called as handler(sender, property_name)
    - Subclasses store observable values in private attributes and route their
      setters through set_property().
    """

    def __init__(self) -> None:
        self._property_changed_handlers: List[PropertyChangedHandler] = []

    def add_property_changed(self, handler: PropertyChangedHandler) -> None:
        """Subscribe handler(sender, property_name) to change events."""
        self._property_changed_handlers.append(handler)

    def remove_property_changed(self, handler: PropertyChangedHandler) -> None:
        """Unsubscribe a handler. Unknown handlers are ignored."""
        try:
            self._property_changed_handlers.remove(handler)
        except ValueError:
            pass

    def set_property(self, field: str, value: Any, name: str) -> bool:
        """
        Purpose: Assign value to the backing attribute `field` and announce `name`.
        Outputs: False (no-op) when the current value equals value, else True.
        Side effects: raise_changed(name) on change.
        """
        if getattr(self, field, None) == value:
            return False
        setattr(self, field, value)
        self.raise_changed(name)
        return True

    def raise_changed(self, name: str) -> None:
        """Announce a change of `name`; used directly by derived properties."""
        # copy so a handler may unsubscribe itself
        for handler in list(self._property_changed_handlers):
            handler(self, name)
