"""
Frame rendering and replay video export for Snake sessions.

This service turns GameState snapshots into images and videos by:
1. Building the drawable primitives with board_render.render()
2. Rasterizing them with PIL (Pillow)
3. Encoding a recorded history to MP4 using MoviePy/FFmpeg
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw, ImageFont

from domain.game_state import GameState
from .board_render import (
    CIRCLE,
    GRID_LINE_WIDTH,
    LINE,
    RECT,
    ROUNDED_RECT,
    TEXT,
    TILE_SIZE,
    ColorScheme,
    Primitive,
    canvas_size,
    render,
)

logger = logging.getLogger(__name__)


def hex_to_rgb(hex_color: str) -> Tuple[int, ...]:
    """Convert #RRGGBB or #RRGGBBAA to an RGB or RGBA tuple"""
    hex_color = hex_color.lstrip('#')
    if len(hex_color) not in (6, 8):
        raise ValueError(f"Unsupported color '{hex_color}'.")
    return tuple(int(hex_color[i:i+2], 16) for i in range(0, len(hex_color), 2))


class SnakeFrameRenderer:
    """Rasterize game snapshots and export recorded sessions"""

    def __init__(self, tile_size: int = TILE_SIZE):
        self.tile_size = tile_size
        self._fonts = {}

    def _font(self, size: int):
        if size not in self._fonts:
            try:
                self._fonts[size] = ImageFont.load_default(size=size)
            except (TypeError, OSError, ImportError):
                # Pillow < 10.1 has a single fixed-size bitmap font
                self._fonts[size] = ImageFont.load_default()
        return self._fonts[size]

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        size = canvas_size(state.grid_size, self.tile_size)
        img = Image.new('RGB', (size, size), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img, 'RGBA')

        for primitive in render(state, self.tile_size):
            self._draw_primitive(draw, primitive)

        return img

    def _draw_primitive(self, draw: ImageDraw.ImageDraw, primitive: Primitive):
        color = hex_to_rgb(primitive.color)
        x, y = primitive.x, primitive.y

        if primitive.kind == RECT:
            draw.rectangle([x, y, x + primitive.width - 1, y + primitive.height - 1], fill=color)
        elif primitive.kind == ROUNDED_RECT:
            draw.rounded_rectangle(
                [x, y, x + primitive.width - 1, y + primitive.height - 1],
                radius=primitive.radius,
                fill=color
            )
        elif primitive.kind == CIRCLE:
            r = primitive.radius
            draw.ellipse([x - r, y - r, x + r, y + r], fill=color)
        elif primitive.kind == LINE:
            draw.line([x, y, x + primitive.width, y + primitive.height], fill=color, width=GRID_LINE_WIDTH)
        elif primitive.kind == TEXT:
            font = self._font(primitive.size)
            if primitive.align == "center":
                bbox = draw.textbbox((0, 0), primitive.text, font=font)
                text_width = bbox[2] - bbox[0]
                text_height = bbox[3] - bbox[1]
                x = x - text_width // 2
                y = y - text_height // 2
            draw.text((x, y), primitive.text, fill=color, font=font)
        else:
            raise ValueError(f"Unknown primitive kind '{primitive.kind}'.")

    def generate_video(
        self,
        history: Sequence[GameState],
        output_path: str,
        fps: Optional[float] = None
    ) -> str:
        """
        Generate an MP4 from a recorded session

        Args:
            history: snapshots in tick order (SnakeEngine.history)
            output_path: where to write the video
            fps: frames per second; defaults to the tick rate of the first snapshot

        Returns:
            Path to the generated video file
        """
        if not history:
            raise ValueError("Cannot generate a video from an empty history.")

        if fps is None:
            fps = 1000.0 / history[0].speed_ms

        logger.info(f"Rendering {len(history)} frames at {fps:.2f} fps")

        frames: List[np.ndarray] = []
        for i, state in enumerate(history):
            if i % 50 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(history)}")
            frames.append(np.array(_even_canvas(self.render_frame(state))))

        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)

        clip = ImageSequenceClip(frames, fps=fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )
        clip.close()

        logger.info(f"Video created successfully at {output_path}")
        return output_path


def _even_canvas(img: Image.Image) -> Image.Image:
    """libx264 needs even frame dimensions; pad odd ones with background."""
    width, height = img.size
    if width % 2 == 0 and height % 2 == 0:
        return img
    padded = Image.new('RGB', (width + width % 2, height + height % 2), hex_to_rgb(ColorScheme.BACKGROUND))
    padded.paste(img, (0, 0))
    return padded
