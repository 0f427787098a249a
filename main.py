"""
Raster Transform Studio
Command-line front end for the image-transform engines.
"""

import argparse
import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raster-studio",
        description="Apply one image-transform command and save the result.",
    )
    parser.add_argument("command", nargs="?", help="e.g. filter/gaussian, fft/dft, binary_op/add")
    parser.add_argument("image", nargs="?", help="input image path")
    parser.add_argument("--synthetic", metavar="NAME",
                        help="use a generated image instead (see --list)")
    parser.add_argument("--arg", default="", help="argument text, comma-separated for multi-parameter ops")
    parser.add_argument("--with", dest="other", metavar="PATH", help="second image for binary_op/* commands")
    parser.add_argument("--out", default="transformed.png", help="output path (default: transformed.png)")
    parser.add_argument("--compare", action="store_true", help="print PSNR/SSIM against the input")
    parser.add_argument("--list", action="store_true", help="list available commands")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def run_cli(argv=None) -> int:
    from engines import transform_image, COMMANDS, TransformError
    from utils.image_io import load_image, save_image
    from utils.metrics import compute_psnr_ssim
    from utils.test_images import generate_demo_image, DEMO_IMAGES

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print("\n".join(COMMANDS))
        print("\nSynthetic images: " + ", ".join(sorted(DEMO_IMAGES)))
        return 0

    if not args.command or not (args.image or args.synthetic):
        parser.print_usage()
        return 2

    try:
        if args.synthetic:
            image = generate_demo_image(args.synthetic)
            if image is None:
                print(f"Unknown synthetic image: {args.synthetic}")
                return 2
        else:
            print(f"Loading: {args.image}")
            image = load_image(args.image)

        other = load_image(args.other) if args.other else None

        print(f"Image: {image.width}x{image.height} ({image.format.value})")
        print(f"Command: {args.command} {args.arg}".rstrip())

        result = transform_image(args.command, image, args.arg, other)

        print("\n=== Result ===")
        print(f"Size:   {result.width}x{result.height} ({result.format.value})")

        if args.compare:
            if (result.width, result.height) == (image.width, image.height):
                metrics = compute_psnr_ssim(image, result)
                print(f"PSNR:   {metrics['psnr']:.2f} dB")
                print(f"SSIM:   {metrics['ssim']:.4f}")
            else:
                print("PSNR/SSIM skipped: output size differs from input")

        save_image(result, args.out)
        print(f"\nSaved: {args.out}")
    except TransformError as e:
        print(f"Error: {e}")
        return 1

    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
