"""
Polygon viewer window using pygame.

Presents the framebuffer produced by the frame driver once per frame.
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from ..frame import FrameDriver
from ..hardware.display import BufferDisplay

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Viewer window configuration."""
    width: int = 800
    height: int = 600
    title: str = "Polygons"
    fps: int = 60
    scale: int = 1


class WindowDisplay(BufferDisplay):
    """
    In-memory display that can be drawn onto a pygame surface.

    The window blits the surface from render() onto the screen and
    flips it.
    """

    def render(self, scale: int = 1) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Args:
            scale: Integer pixel scale factor

        Returns:
            pygame.Surface with rendered display
        """
        # surfarray is indexed [x, y]
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if scale != 1:
            surface = pygame.transform.scale(
                surface, (self.width * scale, self.height * scale)
            )
        return surface


class PolygonWindow:
    """
    Window that renders polygons every frame.

    Keyboard Mapping:
        S: Save the current frame as PNG
        ESC / Q: Exit
    """

    def __init__(self, driver: FrameDriver, config: WindowConfig | None = None) -> None:
        self.driver = driver
        self.config = config or WindowConfig(
            width=driver.buffer.width, height=driver.buffer.height
        )

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False

        self.display = WindowDisplay(driver.buffer.width, driver.buffer.height)

        # Log history; the newest line is shown in the title bar
        self._log_buffer: list[str] = []
        self._max_log_lines = 20
        self._caption = ""
        self._setup_log_capture()

        logger.info("PolygonWindow created")

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the title bar."""
        class WindowLogHandler(logging.Handler):
            def __init__(self, window: 'PolygonWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                # Keep buffer size limited
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        self._log_handler = WindowLogHandler(self)
        self._log_handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(self._log_handler)

    @property
    def log_lines(self) -> list[str]:
        """Captured log messages, oldest first."""
        return list(self._log_buffer)

    def _update_caption(self) -> None:
        """Show the newest log line next to the window title."""
        caption = self.config.title
        if self._log_buffer:
            caption = f"{caption} - {self._log_buffer[-1]}"
        if caption != self._caption:
            pygame.display.set_caption(caption)
            self._caption = caption

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (self.config.width * self.config.scale, self.config.height * self.config.scale)
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_s:
            self._capture_screenshot()

    def _capture_screenshot(self) -> None:
        """Save the current frame through the exporter."""
        filename = f"screenshot_{self.driver.frame_count}.png"
        if self.driver.export(filename):
            logger.info(f"Screenshot saved: {filename}")

    def _render(self) -> None:
        """Render one frame and flip."""
        if not self._screen:
            return

        self.driver.render_frame()
        self.driver.present(self.display)

        surface = self.display.render(self.config.scale)
        self._screen.blit(surface, (0, 0))
        self._update_caption()
        pygame.display.flip()

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window started")

        while self._running:
            self._handle_events()
            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        logging.getLogger().removeHandler(self._log_handler)
        pygame.quit()
        logger.info("Window stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
