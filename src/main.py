# main.py
import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional
from renderer.export import save_image
from renderer.raytracer import Renderer
from scenes.demos import SceneSetup, get_scene, image_height_for, scene_names

# samples/bounces override the scene defaults, scale multiplies the width
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 8, "scale": 0.5},
    "balanced": {"samples": 32, "bounces": 25, "scale": 1.0},
    "final": {"samples": None, "bounces": None, "scale": 1.0},
}

DEFAULT_OUTPUT_DIR = Path("pic")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtweekend",
        description="Render a demo scene with the Monte-Carlo sphere ray tracer.",
    )
    parser.add_argument(
        "scene",
        nargs="?",
        help="Scene name, scene index, or '*' to render every scene",
    )
    parser.add_argument("--list", action="store_true", help="List the available scenes and exit")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels (default: scene's)")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel (default: scene's)")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum bounces (default: scene's)")
    parser.add_argument(
        "--quality",
        choices=sorted(QUALITY_LEVELS),
        default="final",
        help="Quality preset applied before explicit overrides (default: final)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible render")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file, .ppm or any Pillow format (default: pic/<scene>.ppm)",
    )
    parser.add_argument("--preview", action="store_true", help="Show the finished frame in a window")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def resolve_settings(setup: SceneSetup, args: argparse.Namespace):
    """
    Returns (width, height, samples, max_depth) after applying the quality
    preset and then any explicit command line values.
    """
    quality = QUALITY_LEVELS[args.quality]
    width = max(int(setup.image_width * quality["scale"]), 1)
    samples = quality["samples"] or setup.samples_per_pixel
    max_depth = quality["bounces"] or setup.max_depth
    # Never raise the depth of the shading demos above what they ask for
    max_depth = min(max_depth, setup.max_depth)

    if args.width is not None:
        width = args.width
    if args.samples is not None:
        samples = args.samples
    if args.max_depth is not None:
        max_depth = args.max_depth
    return width, image_height_for(width, setup.aspect_ratio), samples, max_depth


def render_scene(setup: SceneSetup, args: argparse.Namespace, rng) -> Path:
    """
    Renders one scene with rng, the generator its world was built with,
    and saves it. Returns the output path.
    """
    width, height, samples, max_depth = resolve_settings(setup, args)

    if not args.quiet:
        print(f"=== Rendering '{setup.name}' ===", file=sys.stderr)
        print(f"{len(setup.world)} objects, {width}x{height}, "
              f"{samples} samples, max depth {max_depth}", file=sys.stderr)

    renderer = Renderer(width, height, samples_per_pixel=samples, max_depth=max_depth,
                        integrator=setup.integrator, verbose=not args.quiet)
    pixels = renderer.render(setup.world, setup.camera, rng)

    if args.output is not None:
        output = Path(args.output)
    else:
        output = DEFAULT_OUTPUT_DIR / f"{setup.name}.ppm"
    save_image(output, pixels)
    if not args.quiet:
        print(f"Saved {output}", file=sys.stderr)

    if args.preview:
        # pygame is only needed when a window is requested
        from renderer.preview import show_image
        show_image(pixels, title=f"Ray Tracer - {setup.name}")
    return output


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for index, name in enumerate(scene_names()):
            print(f"{index:2d}  {name}")
        return 0
    if args.scene is None:
        parser.error("a scene is required (use --list to see them)")

    if args.scene == "*" and args.output is not None:
        parser.error("--output names a single file and cannot be used with '*'")

    names = scene_names() if args.scene == "*" else [args.scene]
    for name in names:
        rng = random.Random(args.seed)
        try:
            setup = get_scene(name, rng)
        except KeyError as e:
            parser.error(str(e.args[0]) if e.args else str(e))
        try:
            render_scene(setup, args, rng)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
