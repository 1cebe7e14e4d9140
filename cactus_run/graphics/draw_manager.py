"""
draw_manager.py
---------------
Drawing surface used by every entity.

Responsibilities:
- Clear the game surface once per frame
- Fill rectangles and draw text at canvas-style coordinates
- Load and cache images and fonts
"""

import pygame

from cactus_run.core.debug.debug_logger import DebugLogger
from cactus_run.core.runtime.game_settings import Display


def to_rect(x, y, width, height) -> pygame.Rect:
    """Round float geometry to the nearest pixel rectangle."""
    return pygame.Rect(round(x), round(y), round(width), round(height))


class DrawManager:
    """Immediate-mode drawing onto a single pygame surface."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, surface, clear_color=Display.CLEAR_COLOR):
        """
        Args:
            surface: Target pygame.Surface (usually the display surface)
            clear_color: Color used by clear()
        """
        self.surface = surface
        self.clear_color = clear_color

        self.images = {}
        self.fonts = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path, size=None):
        """
        Load and cache an image.

        A missing or unreadable file is replaced by a flat placeholder so
        callers always receive a surface.

        Args:
            key: Cache identifier
            path: File path to image
            size: Optional (w, h) to scale to

        Returns:
            pygame.Surface
        """
        if key in self.images:
            return self.images[key]

        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image at {path}: {e}", category="render")
            img = pygame.Surface(size or (40, 40))
            img.fill((255, 0, 255))

        if size is not None and img.get_size() != tuple(size):
            img = pygame.transform.scale(img, (round(size[0]), round(size[1])))

        self.images[key] = img
        return img

    def get_font(self, font):
        """
        Return a cached font.

        Args:
            font: (name, size) tuple; name None selects the default font
        """
        if font not in self.fonts:
            name, size = font
            if name is None:
                self.fonts[font] = pygame.font.Font(None, size)
            else:
                self.fonts[font] = pygame.font.SysFont(name, size)
        return self.fonts[font]

    # ===========================================================
    # Surface Primitives
    # ===========================================================

    def clear(self):
        """Wipe the surface for a new frame."""
        self.surface.fill(self.clear_color)

    def fill_rect(self, x, y, width, height, color):
        self.surface.fill(color, to_rect(x, y, width, height))

    def fill_text(self, text, x, y, font, color):
        """
        Draw text with its baseline at y.

        Args:
            text: String to render
            x, y: Left edge and baseline position
            font: (name, size) tuple
            color: Any pygame color value
        """
        face = self.get_font(font)
        rendered = face.render(text, True, color)
        self.surface.blit(rendered, (round(x), round(y - face.get_ascent())))

    def draw_image(self, image, x, y, width=None, height=None):
        """Blit an image at (x, y), scaling when a size is given."""
        if width is not None and height is not None and image.get_size() != (round(width), round(height)):
            image = pygame.transform.scale(image, (round(width), round(height)))
        self.surface.blit(image, (round(x), round(y)))
