import argparse
import logging
import shutil
import sys
import time
from pathlib import Path

from inpaint.errors import InpaintError
from inpaint.fmm.telea import DEFAULT_RADIUS


def _formatter(prog: str) -> argparse.HelpFormatter:
    width = shutil.get_terminal_size().columns
    return argparse.HelpFormatter(prog, max_help_position=40, width=width)


def _require_exists(path: Path, label: str = "Input") -> None:
    if not path.exists():
        print(f"Error: {label} not found: {path}", file=sys.stderr)
        sys.exit(1)


def _validate(input_path: Path, output_path: Path, mask_path: Path) -> None:
    from inpaint.utils import is_image

    _require_exists(input_path, "Input")
    _require_exists(mask_path, "Mask file")
    if not (input_path.is_dir() or is_image(input_path)):
        sys.exit(f"Error: Input must be a directory or an image file: {input_path}")
    if not is_image(mask_path):
        sys.exit(f"Error: Mask must be an image file: {mask_path}")
    if input_path.is_dir():
        if is_image(output_path):
            sys.exit(f"Error: Output must be a directory when input is a directory: {output_path}")
    elif not is_image(output_path):
        sys.exit(f"Error: Output must be an image file when input is an image: {output_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inpaint",
        description="Fill masked image regions with Telea's fast marching method.",
        formatter_class=_formatter,
    )
    parser.add_argument("input", help="Image file or directory of images.")
    parser.add_argument("output", help="Result image, or output directory.")
    parser.add_argument(
        "-m", "--mask", required=True, help="Mask image; non-zero pixels are filled."
    )
    parser.add_argument(
        "-r",
        "--radius",
        type=int,
        default=DEFAULT_RADIUS,
        help=f"Neighborhood radius in pixels (default: {DEFAULT_RADIUS}).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log fast marching progress."
    )
    parser._positionals.title = "arguments"
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.radius < 1:
        parser.error("--radius must be at least 1")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        _cmd_inpaint(args)
    except InpaintError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _cmd_inpaint(args):
    from inpaint.inpainters.telea import TeleaInpainter
    from inpaint.utils import load_image, load_mask, mask_stats, save_image

    input_path = Path(args.input)
    output_path = Path(args.output)
    mask_path = Path(args.mask)
    _validate(input_path, output_path, mask_path)

    print(f"Input: {input_path}")
    print(f"Mask:  {mask_path}")

    inpainter = TeleaInpainter(radius=args.radius)
    mask = load_mask(mask_path)

    if input_path.is_dir():
        from inpaint.batch import inpaint_batch

        print(f"Output: {output_path}")
        failed = inpaint_batch(
            input_path=input_path,
            output_path=output_path,
            mask=mask,
            inpainter=inpainter,
        )
        if failed:
            print(f"Error: {len(failed)} image(s) failed.", file=sys.stderr)
            sys.exit(1)
    else:
        image = load_image(input_path)
        _, _, pct = mask_stats(mask)
        print(f"  Inpainting with {inpainter.name} ({pct:.1f}% masked)...")

        t0 = time.time()
        result = inpainter.inpaint(image, mask)
        elapsed = time.time() - t0
        print(f"  Inpainting done in {elapsed:.1f}s")

        save_image(result, output_path)
        print(f"Result saved to {output_path}")

    print("Done.")


if __name__ == "__main__":
    main()
