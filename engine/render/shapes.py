import pygame
from typing import Tuple


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    return pygame.font.SysFont(None, size, bold=bold)


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24, bold=False):
    surface.blit(_font(size, bold).render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24, bold=False):
    img = _font(size, bold).render(text, True, color)
    surface.blit(img, img.get_rect(center=center))
