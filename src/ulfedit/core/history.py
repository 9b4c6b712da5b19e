"""Undo/redo command history.

The CommandStack is the only path through which a Font is edited. It keeps
a linear history of units, each either a single command or a macro of
commands, plus a current position and a clean position marking the state
last saved.

Key behaviours:
- Pushing applies the command immediately and discards any redo history.
- A pushed command merges into the previous unit when that unit is a single
  command that accepts it (repeated edits of one pixel become one step).
  Merging never touches the unit at the clean position.
- begin_macro/end_macro group several pushes into one atomic unit, used
  for drag strokes that span many input events.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ulfedit.core.commands import Command, Direction
from ulfedit.domain.font import Font
from ulfedit.exceptions import HistoryError
from ulfedit.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Macro:
    """Commands undone and redone as one step.

    Attributes:
        label: Text shown for the undo/redo step
        commands: Child commands in the order they were pushed
    """

    label: str
    commands: list[Command] = field(default_factory=list)

    def apply(self, font: Font, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            for command in self.commands:
                command.apply(font, direction)
        else:
            for command in reversed(self.commands):
                command.apply(font, direction)


HistoryUnit = Command | Macro


@dataclass(frozen=True)
class HistoryEvent:
    """Description of a history change, passed to listeners and returned to callers.

    Attributes:
        action: One of "push", "undo", "redo", "clean", "clear"
        label: Label of the affected unit ("" for clean/clear)
        index: Position after the change
        clean: Whether the history is at its clean position after the change
        merged: True for a push that merged into the previous unit instead of
            recording a new one
    """

    action: str
    label: str
    index: int
    clean: bool
    merged: bool = False


HistoryListener = Callable[[HistoryEvent], None]


class CommandStack:
    """Linear undo/redo history bound to one Font.

    Example:
        history = CommandStack(font)
        history.push(SetPixel.capture(font, GlyphLayer.BASE, 5, 2, 3, 1))
        history.undo()
    """

    def __init__(self, font: Font) -> None:
        """Initialize an empty history.

        Args:
            font: Font every command is applied to
        """
        self.font = font
        self._units: list[HistoryUnit] = []
        self._index = 0
        self._clean_index: int | None = 0
        self._open_macro: Macro | None = None
        self._listeners: list[HistoryListener] = []

    @property
    def index(self) -> int:
        """Current position: number of units applied."""
        return self._index

    def count(self) -> int:
        """Number of units in the history, including redoable ones."""
        return len(self._units)

    def subscribe(self, listener: HistoryListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: HistoryListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, action: str, label: str, merged: bool = False) -> HistoryEvent:
        event = HistoryEvent(action, label, self._index, self.is_clean(), merged)
        for listener in list(self._listeners):
            listener(event)
        return event

    def _discard_redo(self) -> None:
        if self._index < len(self._units):
            del self._units[self._index:]
            if self._clean_index is not None and self._clean_index > self._index:
                # The saved state is gone for good
                self._clean_index = None

    def push(self, command: Command) -> HistoryEvent | None:
        """Apply a command and record it.

        Returns:
            The resulting HistoryEvent, or None while a macro is open
        """
        command.apply(self.font, Direction.FORWARD)

        if self._open_macro is not None:
            self._open_macro.commands.append(command)
            return None

        self._discard_redo()

        if self._units and self._index != self._clean_index:
            previous = self._units[-1]
            if not isinstance(previous, Macro):
                merged = previous.merged_with(command)
                if merged is not None:
                    self._units[-1] = merged
                    return self._notify("push", merged.label, merged=True)

        self._units.append(command)
        self._index += 1
        return self._notify("push", command.label)

    def begin_macro(self, label: str) -> None:
        """Open a macro; following pushes join it until end_macro.

        Raises:
            HistoryError: If a macro is already open
        """
        if self._open_macro is not None:
            raise HistoryError(
                f"Cannot begin macro '{label}': macro '{self._open_macro.label}' is open"
            )
        self._open_macro = Macro(label)

    def end_macro(self) -> HistoryEvent | None:
        """Close the open macro and record it as one unit.

        A macro without commands records nothing.

        Returns:
            The resulting HistoryEvent, or None for an empty macro

        Raises:
            HistoryError: If no macro is open
        """
        if self._open_macro is None:
            raise HistoryError("end_macro() called without begin_macro()")

        macro = self._open_macro
        self._open_macro = None
        if not macro.commands:
            return None

        self._discard_redo()
        self._units.append(macro)
        self._index += 1
        return self._notify("push", macro.label)

    def is_macro_open(self) -> bool:
        return self._open_macro is not None

    def can_undo(self) -> bool:
        return self._open_macro is None and self._index > 0

    def can_redo(self) -> bool:
        return self._open_macro is None and self._index < len(self._units)

    def undo_text(self) -> str:
        """Label of the unit undo() would revert, or ""."""
        return self._units[self._index - 1].label if self._index > 0 else ""

    def redo_text(self) -> str:
        """Label of the unit redo() would reapply, or ""."""
        return self._units[self._index].label if self._index < len(self._units) else ""

    def undo(self) -> HistoryEvent | None:
        """Revert the unit before the current position.

        Returns:
            The resulting HistoryEvent, or None if there was nothing to undo
        """
        if self._open_macro is not None:
            logger.warning("Cannot undo in the middle of a macro", macro=self._open_macro.label)
            return None
        if self._index == 0:
            return None

        self._index -= 1
        unit = self._units[self._index]
        unit.apply(self.font, Direction.INVERSE)
        return self._notify("undo", unit.label)

    def redo(self) -> HistoryEvent | None:
        """Reapply the unit at the current position.

        Returns:
            The resulting HistoryEvent, or None if there was nothing to redo
        """
        if self._open_macro is not None:
            logger.warning("Cannot redo in the middle of a macro", macro=self._open_macro.label)
            return None
        if self._index >= len(self._units):
            return None

        unit = self._units[self._index]
        unit.apply(self.font, Direction.FORWARD)
        self._index += 1
        return self._notify("redo", unit.label)

    def is_clean(self) -> bool:
        """True when the position equals the clean position."""
        return self._index == self._clean_index

    def mark_clean(self) -> HistoryEvent:
        """Mark the current position as clean (after a successful save)."""
        self._clean_index = self._index
        return self._notify("clean", "")

    def clear(self, font: Font | None = None) -> HistoryEvent:
        """Drop all history and mark the empty history clean.

        Args:
            font: New font to bind to, if the document replaced its font
        """
        if font is not None:
            self.font = font
        self._units.clear()
        self._index = 0
        self._clean_index = 0
        self._open_macro = None
        return self._notify("clear", "")
