"""Clickable widgets: image buttons, checkboxes and volume sliders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .geometry import RecArea, pnt_in_rect  # noqa: E402

SLIDER_COLOR = (255, 255, 255)


def _blit_scaled(surface: pygame.Surface, image: pygame.Surface, body: RecArea) -> None:
    scaled = pygame.transform.scale(image, (int(body.w), int(body.h)))
    surface.blit(scaled, (int(body.x), int(body.y)))


@dataclass
class Button:
    """An image button that shows another image while hovered."""

    body: RecArea
    default_img: pygame.Surface
    hovered_img: Optional[pygame.Surface] = None
    hovered: bool = False

    def hover(self, x: float, y: float) -> bool:
        """Update and return whether the point is over the button."""
        self.hovered = pnt_in_rect(x, y, self.body)
        return self.hovered

    def draw(self, surface: pygame.Surface) -> None:
        image = self.hovered_img if self.hovered and self.hovered_img else self.default_img
        _blit_scaled(surface, image, self.body)


@dataclass
class Checkbox:
    """An image checkbox with a checked and an unchecked picture."""

    body: RecArea
    default_img: pygame.Surface
    checked_img: Optional[pygame.Surface] = None
    checked: bool = False
    hovered: bool = False

    def hover(self, x: float, y: float) -> bool:
        """Update and return whether the point is over the checkbox."""
        self.hovered = pnt_in_rect(x, y, self.body)
        return self.hovered

    def toggle(self) -> bool:
        """Flip the checked state and return the new one."""
        self.checked = not self.checked
        return self.checked

    def draw(self, surface: pygame.Surface) -> None:
        image = self.checked_img if self.checked and self.checked_img else self.default_img
        _blit_scaled(surface, image, self.body)


@dataclass
class Slider:
    """A horizontal bar with a knob whose position gives a volume in [0, 1]."""

    body: RecArea
    now_pos: int
    hovered: bool = False

    def hover(self, x: float, y: float) -> bool:
        """Update and return whether the point is over the bar."""
        self.hovered = pnt_in_rect(x, y, self.body)
        return self.hovered

    def drag_to(self, x: float) -> None:
        """Move the knob to x, kept within the bar."""
        low = self.body.x
        high = self.body.x + self.body.w
        self.now_pos = int(min(max(x, low), high))

    def volume(self) -> float:
        """The knob position as a fraction of the bar length."""
        return (self.now_pos - self.body.x) / self.body.w

    def draw(self, surface: pygame.Surface) -> None:
        body = self.body
        pygame.draw.rect(
            surface,
            SLIDER_COLOR,
            pygame.Rect(int(body.x), int(body.y), int(body.w), int(body.h)),
        )
        pygame.draw.circle(
            surface, SLIDER_COLOR, (self.now_pos, body.y + body.h / 2), body.h * 2
        )


def make_slider(
    min_x: int, length: int, y: int, thickness: float, volume: float
) -> Slider:
    """A slider starting at min_x with its knob placed for the given volume."""
    body = RecArea(min_x, y, length, thickness)
    return Slider(body=body, now_pos=int(volume * length + min_x))