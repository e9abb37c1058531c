"""Command-line entry point: renders the demo scene to an image file."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from raytracer.core import RenderError
from raytracer.core.rendering.image import Renderer
from raytracer.logging_config import setup_logging
from raytracer.runtime import build_demo_scene, initialize, save_frame, save_metrics
from raytracer.utils.metrics import Timer, color_stats, time_breakdown

logger = logging.getLogger("raytracer.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo triangle scene")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with render settings")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--supersampling", type=int, default=None,
                        help="Rays per pixel along each axis")
    parser.add_argument("--depth", dest="max_depth", type=int, default=None,
                        help="Reflection bounces")
    parser.add_argument("--blend", action=argparse.BooleanOptionalAction, default=None,
                        help="Mix the direct colour into reflections (--no-blend uses the reflected colour alone)")
    parser.add_argument("--blend-amount", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--threads", dest="num_threads", type=int, default=None)
    parser.add_argument("-o", "--output", default="frame.png",
                        help="Output file (.png, .jpg, .bmp or .npy)")
    parser.add_argument("--metrics", default=None, help="Also write a JSON render report")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("raytracer", level=args.log_level)

    try:
        render_config = initialize(
            args.config,
            width=args.width,
            height=args.height,
            supersampling=args.supersampling,
            max_depth=args.max_depth,
            blend=args.blend,
            blend_amount=args.blend_amount,
            seed=args.seed,
            num_threads=args.num_threads,
        )
        scene = build_demo_scene()
        logger.info("Dimensions: %dx%d", render_config.width, render_config.height)
        logger.info("Objects: %d", scene.object_count)

        renderer = Renderer(scene, render_config)
        with Timer("rendering") as render_timer:
            pixels = renderer.render_image()
        with Timer("output") as output_timer:
            path = save_frame(pixels, Path(args.output).resolve())
    except RenderError as e:
        logger.error("Render failed: %s", e)
        return 1

    breakdown = time_breakdown(rendering=render_timer.elapsed, output=output_timer.elapsed)
    logger.info("Time breakdown:")
    for phase, entry in breakdown.items():
        logger.info("  %s: %.1fms (%.1f%%)", phase, entry["seconds"] * 1000.0, entry["percent"])

    if args.metrics:
        save_metrics(
            {
                "output": path,
                "width": render_config.width,
                "height": render_config.height,
                "supersampling": render_config.supersampling,
                "max_depth": render_config.max_depth,
                "blend": render_config.blend,
                "objects": scene.object_count,
                "timing": breakdown,
                "colors": color_stats(pixels),
            },
            Path(args.metrics).resolve(),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
