# main.py
import argparse
import logging
import sys
from libray import scenes
from libray.config import RenderSettings
from libray.renderer.image_io import save_image

logger = logging.getLogger("libray")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render one of the libray example scenes")
    parser.add_argument("scene", nargs="?", choices=sorted(scenes.SCENES),
                        help="Scene to render")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Output image file (default: <scene>.ppm)")
    parser.add_argument("--kernel", dest="use_kernel", action="store_true", default=True,
                        help="Trace spheres with the parallel numba kernel (default)")
    parser.add_argument("--no-kernel", dest="use_kernel", action="store_false",
                        help="Trace spheres pixel by pixel in Python")
    parser.add_argument("--list", action="store_true", help="List the available scenes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name in sorted(scenes.SCENES):
            print(name)
        return 0
    if args.scene is None:
        parser.error("a scene name is required unless --list is given")

    output = args.output or f"{args.scene}.ppm"
    settings = RenderSettings(use_kernel=args.use_kernel)
    try:
        canvas = scenes.build(args.scene, settings)
        save_image(canvas, output)
    except (ValueError, OSError) as e:
        logger.error("Failed to render %s: %s", args.scene, e)
        return 1

    logger.info("Wrote %s (%dx%d)", output, canvas.width, canvas.height)
    return 0

if __name__ == "__main__":
    sys.exit(main())
