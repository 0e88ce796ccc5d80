#!/usr/bin/env python3
"""Pressure Ink Demo with Visual Feedback.

Draw with the mouse: the live preview uses speed-estimated pressure and the
finished stroke is replaced by its final outline.
"""

from typing import List, Tuple

import pygame

from pressure_ink.config.settings import BrushSettings, PRESSURE_STEP_PRESETS
from pressure_ink.core.brush import PressureBrush
from pressure_ink.core.events import MouseEvent
from pressure_ink.utils.logger import StrokeLogger


class InkDemo:
    """Interactive demo for pressure ink strokes."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1600, 1000))
        pygame.display.set_caption("Pressure Ink Demo")

        self.preset_names = list(PRESSURE_STEP_PRESETS)
        self.preset_index = 0
        self.stroke_width = 30.0
        self.is_pressure_brush = True
        self.stroke_logger = StrokeLogger()
        self.brush = self._make_brush()
        self.outlines: List[List[Tuple[float, float]]] = []

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.RED = (255, 0, 0)
        self.GRAY = (128, 128, 128)

        self.small_font = pygame.font.Font(None, 32)

    def _make_brush(self) -> PressureBrush:
        settings = BrushSettings.from_preset(
            self.preset_names[self.preset_index],
            stroke_width=self.stroke_width,
            is_pressure_brush=self.is_pressure_brush,
        )
        return PressureBrush(settings, self.stroke_logger)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:  # Left click
                        self.brush.on_stroke_start(self._mouse_event(event.pos))
                elif event.type == pygame.MOUSEMOTION:
                    if self.brush.is_drawing:
                        self.brush.on_stroke_move(self._mouse_event(event.pos))
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.finish_stroke()
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            self.draw()
            clock.tick(120)

    def _mouse_event(self, pos: Tuple[int, int]) -> MouseEvent:
        x, y = pos
        return MouseEvent(x=float(x), y=float(y), timestamp=float(pygame.time.get_ticks()))

    def finish_stroke(self) -> None:
        """Replace the live preview by the final outline."""
        path = self.brush.on_stroke_end()
        polygon = path.flatten()
        if len(polygon) > 2:
            self.outlines.append(polygon)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_c:
            self.outlines = []
        elif key == pygame.K_p:
            self.is_pressure_brush = not self.is_pressure_brush
            self.brush = self._make_brush()
        elif key == pygame.K_m:
            self.preset_index = (self.preset_index + 1) % len(self.preset_names)
            self.brush = self._make_brush()
        elif key == pygame.K_UP:
            self.stroke_width = min(120.0, self.stroke_width + 5)
            self.brush = self._make_brush()
        elif key == pygame.K_DOWN:
            self.stroke_width = max(5.0, self.stroke_width - 5)
            self.brush = self._make_brush()

    def draw(self) -> None:
        """Render the UI, finished outlines and the live preview."""
        self.screen.fill(self.WHITE)
        instructions = [
            "Draw with the left mouse button",
            "C: Clear   P: Toggle pressure   M: Step preset   UP/DOWN: Width",
            f"Width: {self.stroke_width:.0f}   Pressure: {'on' if self.is_pressure_brush else 'off'}"
            f"   Preset: {self.preset_names[self.preset_index]}",
        ]
        y = 10
        for line in instructions:
            txt = self.small_font.render(line, True, self.GRAY)
            self.screen.blit(txt, (10, y))
            y += 28

        for polygon in self.outlines:
            pygame.draw.polygon(self.screen, self.BLACK, polygon)

        if self.brush.is_drawing:
            preview = self.brush.preview_outline().flatten()
            if len(preview) > 2:
                pygame.draw.polygon(self.screen, self.RED, preview)
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = InkDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        demo.stroke_logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
