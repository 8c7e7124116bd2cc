import argparse
import sys

from typing import List, Optional
from codec import HuffmanCodec
from errors import HuffmanError

DEFAULT_SAMPLE = "hey pratap"  #: Sample text used by the demo command


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Huffman coder for text, using '0'/'1' bit strings"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    demo = subparsers.add_parser(
        "demo", aliases=["d"], help="Encode and decode a sample text"
    )
    demo.add_argument(
        "-s",
        "--sample",
        default=DEFAULT_SAMPLE,
        help=f"Sample text (default: {DEFAULT_SAMPLE!r})",
    )

    encode = subparsers.add_parser(
        "encode", aliases=["e"], help="Encode text to a bit string"
    )
    encode.add_argument("text", help="Text to encode")
    encode.add_argument(
        "-s",
        "--sample",
        help="Sample text to build the code from (default: the text itself)",
    )

    decode = subparsers.add_parser(
        "decode", aliases=["x"], help="Decode a bit string to text"
    )
    decode.add_argument("bits", help="Bit string of '0'/'1' characters")
    decode.add_argument(
        "-s",
        "--sample",
        required=True,
        help="Sample text the bit string was encoded with",
    )

    table = subparsers.add_parser(
        "table", aliases=["t"], help="Print the code table of a sample text"
    )
    table.add_argument(
        "-s",
        "--sample",
        default=DEFAULT_SAMPLE,
        help=f"Sample text (default: {DEFAULT_SAMPLE!r})",
    )

    return parser


def _fmt_symbol(symbol) -> str:
    """Render a symbol for display, quoting anything not plainly printable.

    :param symbol: Symbol to render.
    :returns: Display string.
    :rtype: str
    """
    if isinstance(symbol, str) and symbol.isprintable() and not symbol.isspace():
        return symbol
    return repr(symbol)


def _fmt_bits(n: int) -> str:
    """Format a bit count, with the byte equivalent once it reaches a byte.

    :param n: Number of bits.
    :type n: int
    :returns: Human-readable string.
    :rtype: str
    """
    if n < 8:
        return f"{n} bits"
    return f"{n} bits ({n / 8:.2f} B)"


def _fmt_ratio(before: int, after: int) -> str:
    """Format ``before / after`` as a ratio, ``n/a`` when ``after`` is zero."""
    if after <= 0:
        return "n/a"
    return f"{before / after:.2f}"


def run_demo(sample: str) -> None:
    """Encode ``sample`` with its own code, decode it back and print both.

    :param sample: Sample text.
    :type sample: str
    :returns: None
    :rtype: None
    :raises HuffmanError: If the sample is empty or the round trip fails.
    """
    coder = HuffmanCodec(sample)
    encoded = coder.encode(sample)
    print(f"encoded: {encoded}")
    decoded = coder.decode(encoded)
    print(f"decoded: {decoded}")

    fixed_bits = len(sample) * coder.table.fixed_width()
    print("Size with fixed-width code: ", _fmt_bits(fixed_bits))
    print("Size after encoding: ", _fmt_bits(len(encoded)))
    print(f"Compression ratio: {_fmt_ratio(fixed_bits, len(encoded))}")


def run_encode(text: str, sample: Optional[str]) -> None:
    coder = HuffmanCodec(text if sample is None else sample)
    print(coder.encode(text))


def run_decode(bits: str, sample: str) -> None:
    coder = HuffmanCodec(sample)
    print(coder.decode(bits))


def run_table(sample: str) -> List[str]:
    """Print ``symbol<TAB>count<TAB>code`` for every symbol of ``sample``.

    :param sample: Sample text.
    :type sample: str
    :returns: The printed lines.
    :rtype: List[str]
    """
    coder = HuffmanCodec(sample)
    lines = [
        f"{_fmt_symbol(sym)}\t{coder.frequencies[sym]}\t{coder.encode_of[sym]}"
        for sym in coder.table
    ]
    for line in lines:
        print(line)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: List[str] | None
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        if args.cmd in ["demo", "d"]:
            run_demo(args.sample)
        elif args.cmd in ["encode", "e"]:
            run_encode(args.text, args.sample)
        elif args.cmd in ["decode", "x"]:
            run_decode(args.bits, args.sample)
        elif args.cmd in ["table", "t"]:
            run_table(args.sample)
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
