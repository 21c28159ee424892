#!/usr/bin/env python3
"""
Tunnel Visualizer CLI Tool
==========================

Renders the tunnel effect: concentric discs shrinking toward a focal badge,
radial lines between the tunnel mouth and the badge, and particles sliding
along those lines with fading trails.

Usage:
    python -m tunnelvis --output tunnel.mp4 --duration 10
    python -m tunnelvis --preview
    python -m tunnelvis -h (for help)
"""

import argparse
import logging
import sys

import cv2
from moviepy import VideoClip

from tunnelvis.constants import (
    DEFAULT_DPI,
    DEFAULT_DURATION,
    DEFAULT_FOCAL_SIZE,
    DEFAULT_FPS,
    DEFAULT_RESOLUTION,
)
from tunnelvis.engine import TunnelConfig, TunnelEngine
from tunnelvis.geometry import Rect
from tunnelvis.preview import PreviewWindow
from tunnelvis.tunnel_renderer import TunnelRenderer

logger = logging.getLogger("tunnelvis")


def build_parser():
    parser = argparse.ArgumentParser(description="Render an animated particle tunnel.")
    parser.add_argument("--output", "-o", default="tunnel.mp4", help="Path to output video file")
    parser.add_argument("--width", type=int, default=DEFAULT_RESOLUTION[0], help="Surface width")
    parser.add_argument("--height", type=int, default=DEFAULT_RESOLUTION[1], help="Surface height")
    parser.add_argument("--dpi", type=float, default=DEFAULT_DPI, help="Device pixel ratio")
    parser.add_argument(
        "--focal-width", type=int, default=DEFAULT_FOCAL_SIZE[0], help="Width of the focal badge"
    )
    parser.add_argument(
        "--focal-height", type=int, default=DEFAULT_FOCAL_SIZE[1], help="Height of the focal badge"
    )
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    parser.add_argument(
        "--duration", type=float, default=DEFAULT_DURATION, help="Video length in seconds"
    )
    parser.add_argument("--seed", type=int, help="Seed for particle randomness (optional)")
    parser.add_argument(
        "--preview", action="store_true", help="Open a live window instead of writing a video"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def validate_args(args):
    """Exit with a message on arguments that cannot produce a picture."""
    if args.width <= 0 or args.height <= 0:
        sys.exit(f"[!] Surface size must be positive: {args.width}x{args.height}")
    if args.focal_width < 0 or args.focal_height < 0:
        sys.exit(f"[!] Focal size cannot be negative: {args.focal_width}x{args.focal_height}")
    if args.dpi <= 0:
        sys.exit(f"[!] Device pixel ratio must be positive: {args.dpi}")
    if args.fps <= 0:
        sys.exit(f"[!] FPS must be positive: {args.fps}")
    if args.duration <= 0:
        sys.exit(f"[!] Duration must be positive: {args.duration}")


def render_video(renderer, args):
    size = (args.width, args.height)
    focal_rect = Rect.centered(size, args.focal_width, args.focal_height)
    renderer.setup(size, focal_rect, args.dpi)

    logger.info(f"[+] Preparing render: {args.width}x{args.height} @ {args.fps}fps (dpi {args.dpi})")
    logger.info(f"[+] Duration: {args.duration:.2f} seconds")

    # Renderer draws BGR for OpenCV, MoviePy expects RGB
    def make_frame_wrapper(t):
        frame = renderer.make_frame(t)
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    video_clip = VideoClip(make_frame_wrapper, duration=args.duration)

    # VideoClip renders frame 0 to learn its size; start the animation afresh
    renderer.setup(size, focal_rect, args.dpi)

    logger.info("[+] Rendering video... (This may take a while)")
    try:
        video_clip.write_videofile(
            args.output,
            fps=args.fps,
            codec="libx264",
            audio=False,
            threads=4,
            preset="medium",
            logger="bar",
        )
    except OSError as e:
        sys.exit(f"[!] Error writing video: {e}")
    finally:
        renderer.stop()

    logger.info(f"[+] Done! Saved to {args.output}")


def render_preview(renderer, args):
    window = PreviewWindow(renderer, (args.focal_width, args.focal_height), args.dpi, args.fps)
    window.run((args.width, args.height))


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    validate_args(args)

    engine = TunnelEngine(TunnelConfig(seed=args.seed))
    renderer = TunnelRenderer(engine)

    if args.preview:
        render_preview(renderer, args)
    else:
        render_video(renderer, args)


if __name__ == "__main__":
    main()
