"""
Frame Rendering Service for Pacsnek sessions

This service turns game snapshots into images by:
1. Rendering each frame using PIL (Pillow)
2. Stitching frames into an animated GIF

Only the visible window of the level is drawn, using the viewport offset
carried by the snapshot.
"""

import os
import logging
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import VIEWPORT_WIDTH
from domain.game_state import GameStatus, Snapshot
from domain.vec2 import Vec2

logger = logging.getLogger(__name__)

# Render settings
DEFAULT_FPS = 6  # one frame per movement cycle at 60 ticks/s
CELL_SIZE = 20  # Size of each grid cell in pixels
HUD_HEIGHT = 60
TITLE = "PACSNEK MAZE"


class ColorScheme:
    """Colors used by the renderer"""

    BACKGROUND = "#000000"
    WALL = "#646464"
    FOOD = "#FF0000"
    EXIT = "#0000FF"
    SNAKE = "#00FF00"
    ENEMY = "#FF00FF"
    ENEMY_FRIGHTENED = "#3C64FF"
    TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class FrameRenderer:
    """Render snapshots to images"""

    def __init__(
        self,
        cell_size: int = CELL_SIZE,
        visible_width: int = VIEWPORT_WIDTH,
        fps: int = DEFAULT_FPS
    ):
        self.cell_size = cell_size
        self.visible_width = visible_width
        self.fps = fps
        self.font = ImageFont.load_default()

    def frame_size(self, snapshot: Snapshot) -> Tuple[int, int]:
        return (
            self.visible_width * self.cell_size,
            snapshot.height * self.cell_size + HUD_HEIGHT
        )

    def render_frame(self, snapshot: Snapshot) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(snapshot), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        if snapshot.status is GameStatus.START:
            self._draw_start_screen(draw, img.size, snapshot)
            return img

        self._draw_level(draw, snapshot)
        self._draw_snake(draw, snapshot)
        self._draw_enemies(draw, snapshot)
        self._draw_hud(draw, snapshot)

        if snapshot.status.is_over:
            img = self._draw_end_overlay(img, snapshot)

        return img

    def _screen_cell(self, snapshot: Snapshot, cell: Vec2) -> Optional[Tuple[int, int]]:
        """Pixel origin of a level cell, or None when it is scrolled out of view"""
        column = cell.x - snapshot.viewport_x
        if not 0 <= column < self.visible_width:
            return None
        return column * self.cell_size, HUD_HEIGHT + cell.y * self.cell_size

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        origin: Optional[Tuple[int, int]],
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single grid cell"""
        if origin is None:
            return
        x, y = origin
        draw.rectangle(
            [x, y, x + self.cell_size - padding, y + self.cell_size - padding],
            fill=color
        )

    def _draw_level(self, draw: ImageDraw.ImageDraw, snapshot: Snapshot):
        wall_color = hex_to_rgb(ColorScheme.WALL)
        rows, columns = snapshot.visible_walls.shape
        for y in range(rows):
            for x in range(columns):
                if snapshot.visible_walls[y, x]:
                    self._draw_cell(draw, (x * self.cell_size, HUD_HEIGHT + y * self.cell_size), wall_color)

        food_color = hex_to_rgb(ColorScheme.FOOD)
        for food in snapshot.foods:
            self._draw_cell(draw, self._screen_cell(snapshot, food), food_color)

        self._draw_cell(draw, self._screen_cell(snapshot, snapshot.exit), hex_to_rgb(ColorScheme.EXIT))

    def _draw_snake(self, draw: ImageDraw.ImageDraw, snapshot: Snapshot):
        body_color = hex_to_rgb(ColorScheme.SNAKE)
        for cell in snapshot.snake[1:]:
            self._draw_cell(draw, self._screen_cell(snapshot, cell), body_color)
        self._draw_cell(
            draw,
            self._screen_cell(snapshot, snapshot.head),
            darken_color(ColorScheme.SNAKE, 0.3),
            padding=0
        )

    def _draw_enemies(self, draw: ImageDraw.ImageDraw, snapshot: Snapshot):
        scheme = ColorScheme.ENEMY_FRIGHTENED if snapshot.power_up_ticks > 0 else ColorScheme.ENEMY
        color = hex_to_rgb(scheme)
        for enemy in snapshot.enemies:
            origin = self._screen_cell(snapshot, enemy)
            if origin is None:
                continue
            x, y = origin
            draw.ellipse([x + 1, y + 1, x + self.cell_size - 2, y + self.cell_size - 2], fill=color)

    def _draw_hud(self, draw: ImageDraw.ImageDraw, snapshot: Snapshot):
        text_color = hex_to_rgb(ColorScheme.TEXT)
        draw.text((10, 10), f"score: {snapshot.score}", fill=text_color, font=self.font)
        if snapshot.power_up_ticks > 0:
            # Convert ticks to seconds
            draw.text((10, 30), f"power-up: {snapshot.power_up_ticks // 60}", fill=text_color, font=self.font)

    def _draw_centered(self, draw: ImageDraw.ImageDraw, width: int, y: int, text: str):
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        draw.text((width // 2 - text_width // 2, y), text, fill=hex_to_rgb(ColorScheme.TEXT), font=self.font)

    def _draw_start_screen(self, draw: ImageDraw.ImageDraw, size: Tuple[int, int], snapshot: Snapshot):
        width, height = size
        self._draw_centered(draw, width, height // 2 - 30, TITLE)
        if snapshot.show_start_prompt:
            self._draw_centered(draw, width, height // 2 + 30, "press SPACE to start")

    def _draw_end_overlay(self, img: Image.Image, snapshot: Snapshot) -> Image.Image:
        # semi-transparent black background
        overlay = Image.new('RGBA', img.size, (0, 0, 0, 128))
        img = Image.alpha_composite(img.convert('RGBA'), overlay).convert('RGB')
        draw = ImageDraw.Draw(img)

        message = "you win!" if snapshot.status is GameStatus.WON else "game over!"
        width, height = img.size
        self._draw_centered(draw, width, height // 2 - 25, message)
        self._draw_centered(draw, width, height // 2 + 25, "press R to restart")
        return img

    def save_animation(self, snapshots: Sequence[Snapshot], output_path: str) -> str:
        """
        Render snapshots and write them as an animated GIF

        Args:
            snapshots: Frames in playback order
            output_path: Destination .gif path

        Returns:
            Path to the written file
        """
        if not snapshots:
            raise ValueError("Cannot render an animation without frames")

        logger.info(f"Rendering {len(snapshots)} frames")
        frames: List[Image.Image] = []
        for i, snapshot in enumerate(snapshots):
            if i % 50 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(snapshots)}")
            frames.append(self.render_frame(snapshot))

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        frames[0].save(
            output_path,
            save_all=True,
            append_images=frames[1:],
            duration=max(1, 1000 // self.fps),
            loop=0
        )
        logger.info(f"Animation saved to {output_path}")
        return output_path
