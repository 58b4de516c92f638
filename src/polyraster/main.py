"""
Main entry point for polyraster.

Renders the polygon scene in a pygame window, or headless straight
to an image file.
"""

import asyncio
import logging
import sys

from polyraster.frame import FrameDriver
from polyraster.graphics.exporter import ImageExporter
from polyraster.graphics.framebuffer import PixelBuffer
from polyraster.graphics.renderer import PolygonRenderer, RenderStyle
from polyraster.hardware.display import BufferDisplay
from polyraster.scenes import DEFAULT_POLYGONS, Scene, load_polygons
from polyraster.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def load_scene(settings: Settings) -> Scene:
    """Polygons from the configured scene file, or the default set."""
    if settings.render.scene_file is not None:
        return load_polygons(settings.render.scene_file)
    return DEFAULT_POLYGONS


def build_driver(settings: Settings) -> FrameDriver:
    """Create the frame driver described by settings."""
    render = settings.render
    style = RenderStyle(
        fill_color=render.fill_color,
        outline_color=render.outline_color,
        min_outline_vertices=render.min_outline_vertices,
    )
    return FrameDriver(
        buffer=PixelBuffer(settings.display.width, settings.display.height, render.background),
        renderer=PolygonRenderer(style),
        polygons=load_scene(settings),
        background=render.background,
        exporter=ImageExporter(),
        export_path=render.export_path,
        export_once=render.export_once,
    )


def run_headless(settings: Settings, frames: int | None = None) -> FrameDriver:
    """Render frames into an in-memory display."""
    driver = build_driver(settings)
    display = BufferDisplay(settings.display.width, settings.display.height)

    count = settings.headless_frames if frames is None else frames
    for _ in range(count):
        driver.render_frame()
        driver.present(display)

    logger.info(f"Rendered {driver.frame_count} frame(s) headless")
    return driver


async def run_window(settings: Settings) -> None:
    """Run the pygame viewer."""
    from polyraster.simulator.window import PolygonWindow, WindowConfig

    config = WindowConfig(
        width=settings.display.width,
        height=settings.display.height,
        title=settings.display.title,
        fps=settings.display.fps,
        scale=settings.display.scale,
    )
    window = PolygonWindow(build_driver(settings), config)
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("polyraster starting...")

    try:
        if settings.is_headless:
            logger.info("Running headless")
            run_headless(settings)
        else:
            logger.info("Running in window mode")
            asyncio.run(run_window(settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("polyraster stopped")


if __name__ == "__main__":
    main()
