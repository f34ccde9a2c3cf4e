"""Frame-based sprite animation and single-frame static images."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Rect:
    """A rectangle on a texture sheet, in pixels."""

    x: float
    y: float
    width: float
    height: float


class AnimMode(Enum):
    """How a sprite advances between frames."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


@dataclass
class Animation:
    """An animation: the number of ticks per frame and its frames."""

    delay: int = 0
    frames: list[Rect] = field(default_factory=list)


class Sprite:
    """A set of animations over one texture, with a current frame."""

    def __init__(self, texture: Any) -> None:
        self.texture = texture
        self.animations: list[Animation] = []
        self.current_animation = -1
        self.current_frame = 0
        self.current_delay = 0
        self.mode = AnimMode.AUTOMATIC
        self.animation_complete = False

    def _valid(self, anim_id: int) -> bool:
        return 0 <= anim_id < len(self.animations)

    def set_number_animations(self, num: int) -> None:
        """Discard all animations and create ``num`` empty ones."""
        self.animations = [Animation() for _ in range(num)]

    def set_animation_delay(self, anim_id: int, delay: int) -> None:
        """Set the ticks per frame of an animation; unknown ids are ignored."""
        if self._valid(anim_id):
            self.animations[anim_id].delay = delay

    def add_key_frame(self, anim_id: int, rect: Rect) -> None:
        """Append a frame to an animation; unknown ids are ignored."""
        if self._valid(anim_id):
            self.animations[anim_id].frames.append(rect)

    def set_animation(self, anim_id: int) -> None:
        """Start an animation from its first frame; unknown ids are ignored."""
        if self._valid(anim_id):
            self.current_animation = anim_id
            self.current_frame = 0
            self.current_delay = self.animations[anim_id].delay
            self.animation_complete = False

    def set_manual_mode(self) -> None:
        self.mode = AnimMode.MANUAL

    def set_automatic_mode(self) -> None:
        self.mode = AnimMode.AUTOMATIC

    def _step(self, step: int) -> None:
        animation = self.animations[self.current_animation]
        if animation.frames:
            self.current_frame = (self.current_frame + step) % len(animation.frames)
        self.current_delay = animation.delay

    def update(self) -> None:
        """Advance one tick; in automatic mode move to the next frame when due."""
        if self.current_delay > 0:
            self.current_delay -= 1
            if self.current_delay == 0 and self.mode is AnimMode.AUTOMATIC:
                self._step(1)
                self.animation_complete = self.current_frame == 0

    def _manual_step(self, step: int) -> None:
        if self.mode is AnimMode.MANUAL and self._valid(self.current_animation):
            self.current_delay -= 1
            if self.current_delay <= 0:
                self._step(step)

    def next_frame(self) -> None:
        """In manual mode, count down and move forward one frame when due."""
        self._manual_step(1)

    def prev_frame(self) -> None:
        """In manual mode, count down and move back one frame when due."""
        self._manual_step(-1)

    def frame(self) -> Rect | None:
        """The rectangle of the frame to draw, or None if nothing is playing."""
        if not self._valid(self.current_animation):
            return None
        frames = self.animations[self.current_animation].frames
        if not 0 <= self.current_frame < len(frames):
            return None
        return frames[self.current_frame]

    def release(self) -> None:
        """Drop all animations."""
        for animation in self.animations:
            animation.frames.clear()
        self.animations.clear()


class StaticImage:
    """A single fixed region of a texture."""

    def __init__(self, texture: Any, rect: Rect) -> None:
        self.texture = texture
        self.rect = rect

    def frame(self) -> Rect | None:
        """The rectangle to draw, or None when there is no texture."""
        if self.texture is None:
            return None
        return self.rect

    def release(self) -> None:
        """Drop the texture reference."""
        self.texture = None