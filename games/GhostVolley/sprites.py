"""
Ghost Volley - procedurally drawn sprites.

All artwork is drawn with pygame primitives onto 256x256 transparent
canvases (512x512 for the icon), so the game ships without image files.
The skin scales these to their on-screen sizes.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

import pygame

from games.GhostVolley.config import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    DEFAULT_GHOST_SIZE,
    GHOST_SIZES,
)

CANVAS = 256

Color = Tuple[int, ...]

GHOST_FILL: Color = (255, 255, 255)
GHOST_EYES: Color = BACKGROUND_COLOR
BOW_STROKE: Color = (255, 209, 102)   # #ffd166
BOW_GRIP: Color = (141, 85, 36)       # #8d5524
ARROW_SHAFT: Color = (231, 240, 255)  # #e7f0ff
ARROW_TIP: Color = (255, 77, 109)     # #ff4d6d


@dataclass
class GhostAssets:
    """Drawable handles plus the per-tier ghost display sizes.

    Attributes:
        ghost, bow, arrow, icon: Full-resolution sprite surfaces
        ghost_sizes: Display size per tier, largest to smallest
    """
    ghost: pygame.Surface
    bow: pygame.Surface
    arrow: pygame.Surface
    icon: pygame.Surface
    ghost_sizes: List[float] = field(default_factory=lambda: list(GHOST_SIZES))

    def size_for(self, tier: int) -> float:
        """Display size for a tier, or the default when the tier has none."""
        return ghost_size(self.ghost_sizes, tier)


def ghost_size(sizes: List[float], tier: int) -> float:
    """Look up a tier's display size, falling back to DEFAULT_GHOST_SIZE."""
    if 0 <= tier < len(sizes):
        return sizes[tier]
    return DEFAULT_GHOST_SIZE


def _canvas(size: int = CANVAS) -> pygame.Surface:
    return pygame.Surface((size, size), pygame.SRCALPHA)


def _ghost_outline(cx: float = 128, top: float = 108, radius: float = 76,
                   bottom: float = 188) -> List[Tuple[float, float]]:
    """Dome on top, straight sides, scalloped hem."""
    points = []
    for i in range(33):
        angle = math.pi + math.pi * i / 32
        points.append((cx + radius * math.cos(angle), top + radius * math.sin(angle)))

    left = cx - radius
    right = cx + radius
    points.append((right, bottom))
    hem = [(190, 202), (176, 196), (162, 206), (146, 196), (128, 206),
           (112, 196), (96, 206), (80, 196), (66, 202)]
    points.extend(hem)
    points.append((left, bottom))
    return points


def draw_ghost(fill: Color = GHOST_FILL, stroke: Color = ACCENT_COLOR,
               eyes: Color = GHOST_EYES) -> pygame.Surface:
    """Cute ghost with a soft drop shadow."""
    surf = _canvas()
    outline = _ghost_outline()

    shadow = [(x, y + 8) for x, y in outline]
    pygame.draw.polygon(surf, (0, 0, 0, 90), shadow)

    pygame.draw.polygon(surf, fill, outline)
    pygame.draw.polygon(surf, stroke, outline, 10)

    pygame.draw.circle(surf, eyes, (100, 116), 16)
    pygame.draw.circle(surf, eyes, (156, 116), 16)
    pygame.draw.arc(surf, eyes, pygame.Rect(108, 126, 40, 30), math.pi, 2 * math.pi, 8)

    pygame.draw.circle(surf, (*stroke[:3], 90), (90, 86), 10)
    pygame.draw.circle(surf, (*stroke[:3], 64), (174, 78), 8)
    return surf


def draw_bow(stroke: Color = BOW_STROKE, grip: Color = BOW_GRIP) -> pygame.Surface:
    """Recurve bow seen from the side, string on the left."""
    surf = _canvas()
    limb = pygame.Rect(8, 40, 112, 176)
    pygame.draw.arc(surf, stroke, limb, -math.pi / 2, math.pi / 2, 18)
    pygame.draw.arc(surf, (0, 0, 0, 64), limb.inflate(-24, -40), -math.pi / 4, math.pi / 4, 8)
    pygame.draw.line(surf, (255, 255, 255, 217), (64, 40), (64, 216), 4)
    pygame.draw.rect(surf, grip, pygame.Rect(52, 118, 24, 20), border_radius=8)
    return surf


def draw_arrow(stroke: Color = ARROW_SHAFT, tip: Color = ARROW_TIP) -> pygame.Surface:
    """Arrow pointing along +x (heading 0)."""
    surf = _canvas()
    pygame.draw.line(surf, stroke, (40, 128), (196, 128), 10)
    pygame.draw.polygon(surf, tip, [(196, 128), (172, 110), (172, 146)])
    pygame.draw.line(surf, stroke, (40, 128), (54, 110), 8)
    pygame.draw.line(surf, stroke, (40, 128), (54, 146), 8)
    return surf


def draw_icon(ghost: pygame.Surface) -> pygame.Surface:
    """Application icon: a ghost on a rounded dark tile."""
    size = CANVAS * 2
    surf = _canvas(size)
    pygame.draw.rect(surf, BACKGROUND_COLOR, surf.get_rect(), border_radius=120)
    pygame.draw.circle(surf, (*ACCENT_COLOR, 46), (size // 2, size // 2), 190)
    figure = pygame.transform.smoothscale(ghost, (320, 320))
    surf.blit(figure, figure.get_rect(center=(size // 2, size // 2 + 10)))
    return surf


def load_assets() -> GhostAssets:
    """Draw every sprite and bundle them with the tier sizes."""
    ghost = draw_ghost()
    return GhostAssets(
        ghost=ghost,
        bow=draw_bow(),
        arrow=draw_arrow(),
        icon=draw_icon(ghost),
        ghost_sizes=list(GHOST_SIZES),
    )
