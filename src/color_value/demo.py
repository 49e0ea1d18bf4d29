# src/color_value/demo.py
import argparse
import json
import os
import sys


def _describe(text, hex_mode, alpha_decoding):
    from .color import ColorValue
    from .conversions import hex_to_rgb

    if hex_mode:
        rgb = hex_to_rgb(text, alpha_decoding)
        return {"input": text, "rgb": rgb._asdict() if rgb else None}

    color = ColorValue(text)
    return {
        "input": text,
        "format": color.input_format.value if color.input_format else None,
        "hex": color.to_hex_string(),
        "rgb": color.to_rgb_string(),
        "rgba": color.to_rgba_string(),
    }


def main(argv=None):
    """CLI demo: parse color strings and print them in hex, rgb() and rgba() form."""
    from .types import AlphaDecoding
    from .utils import log

    parser = argparse.ArgumentParser(
        prog="color-value-demo",
        description="Convert colors between hex, rgb() and rgba() strings.",
    )
    parser.add_argument(
        "colors",
        nargs="+",
        help="Colors to convert (e.g. '#ff8800' 'rgba(10, 20, 30, 0.5)' navy)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable all trace topics")
    parser.add_argument(
        "--hex-to-rgb",
        action="store_true",
        dest="hex_mode",
        help="Use the static hex_to_rgb helper (accepts #rrggbbaa)",
    )
    parser.add_argument(
        "--alpha-decoding",
        choices=[m.value for m in AlphaDecoding],
        default=None,
        help="Decoder for the alpha pair in --hex-to-rgb mode",
    )

    args = parser.parse_args(argv)
    if args.debug:
        os.environ[log.ENV_VAR] = "all"
        log.reload_topics()

    decoding = AlphaDecoding(args.alpha_decoding) if args.alpha_decoding else None
    try:
        result = [_describe(text, args.hex_mode, decoding) for text in args.colors]
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
