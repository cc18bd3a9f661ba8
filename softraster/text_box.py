"""Single-line editable text field."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _rgb(r: int, g: int, b: int) -> int:
    return (r & 0xFF) | ((g & 0xFF) << 8) | ((b & 0xFF) << 16) | (0xFF << 24)


_HIGHLIGHT = _rgb(75, 0, 130)
_PLAIN = _rgb(255, 255, 255)


class TextBox:
    """Text field that takes typed characters up to a length limit."""

    def __init__(
        self,
        text: str,
        max_chars: int,
        position: Sequence[float] = (0.0, 0.0),
        height: int = 20,
        width: int = 0,
    ) -> None:
        self.max_chars = max_chars
        self.position = tuple(position)
        self.height = height
        self.width = width
        self.text = text[:max_chars] if len(text) >= max_chars else text
        self.selected = False

    @property
    def selected(self) -> bool:
        return self._selected

    @selected.setter
    def selected(self, value: bool) -> None:
        self._selected = bool(value)
        self.color = _PLAIN if self._selected else _HIGHLIGHT

    @property
    def background_color(self) -> int:
        return _HIGHLIGHT if self._selected else _PLAIN

    def handle_input(self, characters: Iterable[str], backspace: bool) -> None:
        """Append the characters typed this frame, then apply a backspace."""
        for char in characters:
            if len(self.text) + 1 < self.max_chars:
                self.text += char
        if backspace and self.text:
            self.text = self.text[:-1]