"""Observable state holders shared by the engines and the view-model.

``StateValue`` keeps the latest value and pushes every change through a Qt
signal.  New observers get the current value straight away, so a label
hooked up late still shows the right thing.
"""

from __future__ import annotations

from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal


class StateValue(QObject):
    """Latest-value channel.

    Signals
    -------
    changed(value: object)
        Emitted after ``set()`` stores a value different from the old one.
    """

    changed = pyqtSignal(object)

    def __init__(self, initial: Any, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._value = initial

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        # Equal values are conflated: observers only hear about real changes.
        if value == self._value:
            return
        self._value = value
        self.changed.emit(value)

    def observe(self, slot: Callable[[Any], None]) -> None:
        """Connect *slot* and replay the current value to it immediately."""
        self.changed.connect(slot)
        slot(self._value)

    def map(
        self,
        fn: Callable[[Any], Any],
        parent: QObject | None = None,
    ) -> StateValue:
        """Derived channel holding ``fn(value)``, kept in step with this one."""
        derived = StateValue(fn(self._value), parent if parent is not None else self)
        self.changed.connect(lambda value: derived.set(fn(value)))
        return derived

    def __repr__(self) -> str:
        return f"StateValue({self._value!r})"
