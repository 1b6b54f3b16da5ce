"""
Command-line interface for vpcbox.

Usage:
  vpcbox video.mp4                     # Print every vpcC box
  vpcbox --boxes video.mp4             # Box tree, then vpcC boxes
  vpcbox --json video.mp4              # JSON output
  vpcbox -o report.json *.mp4          # JSON export
  vpcbox -q *.mp4                      # One line per box
  vpcbox --hex 010000000032800101010000        # Decode a vpcC body
  vpcbox --hex 00000014767063430100... --box   # Decode a complete box
"""

from __future__ import annotations

import argparse
import sys

from vpcbox._version import __version__
from vpcbox.boxes import VpcCBox, decode_box
from vpcbox.codec import decode_record
from vpcbox.config import get_config
from vpcbox.errors import FormatError, UnknownBoxTypeError
from vpcbox.formatters import (
    format_box_tree,
    format_info,
    format_json,
    format_json_list,
    format_quiet,
)
from vpcbox.models import RecordLayout
from vpcbox.utils.container import find_vpcc_boxes, parse_mp4_boxes


def _print_boxes(boxes: list[VpcCBox], output_format: str) -> None:
    for box in boxes:
        if output_format == "quiet":
            print(format_quiet(box))
        else:
            print(format_info(box))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for vpcbox CLI."""
    parser = argparse.ArgumentParser(
        prog="vpcbox",
        description="Inspect and decode VP codec configuration (vpcC) boxes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Layouts:
  (default)    Versioned vpcC (version 1 + flags, length-prefixed init data)
  --legacy     Legacy vpcC (reserved byte, init data runs to end of box)

Error policy:
  (default)    Warn and skip vpcC boxes that fail to decode
  --strict     Stop at the first vpcC box that fails to decode

Configuration:
  ~/.vpcbox/config.yaml or VPCBOX_LAYOUT / VPCBOX_STRICT / VPCBOX_OUTPUT_FORMAT
        """,
    )
    parser.add_argument("files", nargs="*", help="Media file(s) to scan")
    parser.add_argument("-o", "--output", help="Save decoded boxes to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--hex",
        metavar="PAYLOAD",
        help="Decode a vpcC body given as hex instead of scanning files",
    )
    parser.add_argument(
        "--box",
        action="store_true",
        help="With --hex: the payload includes the 8-byte box header",
    )
    parser.add_argument("--legacy", action="store_true", help="Decode the legacy layout")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first vpcC box that does not decode",
    )
    parser.add_argument("--boxes", action="store_true", help="Print the box tree of each file")

    # Output selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--json", action="store_true", help="JSON output")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="One line per box")

    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    layout = RecordLayout.LEGACY if args.legacy else RecordLayout(config.decode.layout)
    strict = args.strict or config.decode.strict
    if args.json:
        output_format = "json"
    elif args.quiet:
        output_format = "quiet"
    else:
        output_format = config.output.format

    # Handle raw payload mode
    if args.hex is not None:
        return decode_hex(args.hex, layout, output_format, full_box=args.box)

    # Require files for other modes
    if not args.files:
        parser.error("the following arguments are required: files (or --hex)")

    all_boxes: list[VpcCBox] = []
    errors = 0

    for file_path in args.files:
        try:
            if args.boxes and output_format != "json":
                print(format_box_tree(parse_mp4_boxes(file_path)))
            boxes = find_vpcc_boxes(file_path, layout=layout, strict=strict)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            errors += 1
            continue
        except (FormatError, OSError) as e:
            print(f"Error analyzing {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        all_boxes.extend(boxes)
        if output_format != "json":
            print(f"{file_path}: {len(boxes)} vpcC box(es)")
            _print_boxes(boxes, output_format)
            print()

    # JSON export
    if args.output:
        if all_boxes:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(format_json_list(all_boxes))
            print(f"Report saved to: {args.output}", file=sys.stderr)
    elif output_format == "json":
        print(format_json_list(all_boxes))

    return 1 if errors > 0 else 0


def decode_hex(payload: str, layout: RecordLayout, output_format: str, full_box: bool = False) -> int:
    """Decode a vpcC body or complete box given as hex.

    Args:
        payload: Hex string, whitespace allowed
        layout: Wire layout of the body
        output_format: "text", "json" or "quiet"
        full_box: The payload starts with the box header

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        data = bytes.fromhex(payload)
    except ValueError as e:
        print(f"Error: invalid hex payload: {e}", file=sys.stderr)
        return 1

    try:
        if full_box:
            box = decode_box(data, layout=layout)
        else:
            box = VpcCBox(decode_record(data, layout=layout))
    except UnknownBoxTypeError as e:
        print(f"Error: expected a vpcC box, got {e.box_type!r}", file=sys.stderr)
        return 1
    except FormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(format_json(box))
    elif output_format == "quiet":
        print(format_quiet(box))
    else:
        print(format_info(box))
    return 0


if __name__ == "__main__":
    sys.exit(main())
