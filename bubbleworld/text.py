"""Bitmap font layout: mapping characters to cells of a glyph sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bubbleworld.sprite import Rect


@dataclass(frozen=True)
class Glyph:
    """A character placed at a screen position, with its source rectangle."""

    char: str
    x: int
    y: int
    source: Rect


class BitmapFont:
    """A fixed-size font whose glyphs sit in a grid on one texture."""

    def __init__(
        self,
        texture: Any,
        first_character: str,
        character_size: int,
        sheet_width: int = 80,
        sheet_height: int = 8,
    ) -> None:
        if character_size <= 0:
            raise ValueError("character size must be positive")
        if len(first_character) != 1:
            raise ValueError("first character must be a single character")
        self.texture = texture
        self.first_character = first_character
        self.character_size = character_size
        self.columns = sheet_width // character_size
        self.rows = sheet_height // character_size

    def glyph_rect(self, char: str) -> Rect:
        """The sheet rectangle of ``char``; ValueError if it is not on the sheet."""
        index = ord(char) - ord(self.first_character)
        if index < 0 or self.columns == 0:
            raise ValueError(f"character {char!r} is not in the font")
        row, column = divmod(index, self.columns)
        if row >= self.rows:
            raise ValueError(f"character {char!r} is not in the font")
        size = self.character_size
        return Rect(column * size, row * size, size, size)

    def layout(self, x: int, y: int, text: str) -> list[Glyph]:
        """Place each character of ``text`` left to right from (x, y).

        Characters missing from the sheet are skipped but still take up space.
        """
        glyphs = []
        for offset, char in enumerate(text):
            try:
                source = self.glyph_rect(char)
            except ValueError:
                continue
            glyphs.append(Glyph(char, x + offset * self.character_size, y, source))
        return glyphs