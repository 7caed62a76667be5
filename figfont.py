#!/usr/bin/env python3
"""
FIGlet font parser and ASCII-art banner renderer.

This module reads FIGlet font definitions (.flf files) into an immutable,
in-memory font table and uses that table to render text as multi-line
ASCII-art banners. No external figlet/toilet binary is needed.

Parsing happens in four stages, each of which can fail with FormatError:

1. HEADER: The first line holds the signature, hardblank and the numeric
   parameters (height, baseline, max length, old layout, comment lines and
   the optional print direction, full layout and codetag count).
2. COMMENTS: The next Comment_Lines lines are free-form font comments.
3. REQUIRED GLYPHS: ASCII 32..126 followed by the seven German characters
   Ä Ö Ü ä ö ü ß, each exactly Height lines tall.
4. CODE-TAGGED GLYPHS: Optional glyphs, each preceded by a line whose first
   token is the code point (decimal, 0x-hex or 0-octal).

Rendering is literal: glyph rows are concatenated side by side with no
smushing or kerning.

Usage examples:
    python figfont.py "Hello"
    python figfont.py "World" -f fonts/slant.flf -o banner.txt
    python figfont.py --info -f fonts/slant.flf

License: MIT
"""

from __future__ import annotations

# =============================================================================
# IMPORTS
# =============================================================================

import argparse  # CLI argument parsing
import logging  # Structured logging to stderr
import re  # Integer literal validation
import sys  # System exit codes and stdout
from collections.abc import Mapping, Sequence
from dataclasses import dataclass  # Immutable data structures
from pathlib import Path  # Font/output file handling
from types import MappingProxyType  # Read-only view over the glyph table
from typing import Final, TypeAlias

from figfont_standard import STANDARD_FONT

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

__all__ = [
    # Data classes
    "HeaderLine",  # Parsed first line of a font
    "Glyph",  # One FIGcharacter
    "Font",  # Complete parsed font
    "Figure",  # Glyphs selected for one message
    # Exception classes
    "FigFontError",  # Base exception for all errors
    "FormatError",  # Malformed font text
    # Parsing functions
    "parse_header_line",
    "extract_comments",
    "extract_glyph",
    "build_font_table",
    "parse_font",
    "load_standard_font",
    # Rendering functions
    "convert",
    "render",
]

logger = logging.getLogger(__name__)

# =============================================================================
# TYPE ALIASES
# =============================================================================

CodePoint: TypeAlias = int  # Unicode code point a glyph is registered under
FontTable: TypeAlias = Mapping[CodePoint, "Glyph"]

# =============================================================================
# CONSTANTS
# =============================================================================

# Printable ASCII, in the order the glyphs appear in every font
REQUIRED_ASCII_CODES: Final[tuple[int, ...]] = tuple(range(32, 127))

# Ä Ö Ü ä ö ü ß, stored right after the ASCII block in this exact order
REQUIRED_GERMAN_CODES: Final[tuple[int, ...]] = (196, 214, 220, 228, 246, 252, 223)

REQUIRED_GLYPH_COUNT: Final[int] = len(REQUIRED_ASCII_CODES) + len(REQUIRED_GERMAN_CODES)

# Signature + hardblank + five required numeric fields
MIN_HEADER_FIELDS: Final[int] = 6

# "flf2a" plus the hardblank character
MIN_SIGNATURE_LENGTH: Final[int] = 6

INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# Code-tag literals: hexadecimal, octal and decimal digit runs (sign excluded)
HEX_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9a-fA-F]+")
OCT_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-7]+")
DEC_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")


# =============================================================================
# EXCEPTION CLASSES
# =============================================================================


class FigFontError(Exception):
    """
    Base exception for all FIGfont errors.

    Catching this exception will catch all module-specific errors.
    """


class FormatError(FigFontError):
    """
    Raised when font text does not follow the FIGlet font layout.

    This includes:
    - Too few header fields or a malformed signature/hardblank token
    - Non-numeric or out-of-range required header fields
    - Fewer lines than the declared comment block needs
    - A glyph that runs past the end of the input
    - A code-tagged block of the wrong size or with a bad code literal
    """


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """
    Parsed first line of a FIGlet font.

    Layout of the line (optional fields in brackets):

        flf2a$ 6 5 20 15 3 [0 143 229]
        |    | | | |  |  |  |  |   |
        |    | | | |  |  |  |  |   Codetag_Count
        |    | | | |  |  |  |  Full_Layout
        |    | | | |  |  |  Print_Direction
        |    | | | |  |  Comment_Lines
        |    | | | |  Old_Layout
        |    | | | Max_Length
        |    | | Baseline
        |    | Height
        |    Hardblank
        Signature

    Attributes:
        header_line: The raw line exactly as it appeared in the font
        signature: Signature prefix, normally "flf2a"
        hardblank: Placeholder character for blank pixels that must not be
                   smushed; replaced by a space when glyphs are loaded
        height: Number of rows in every glyph (at least 1)
        baseline: Rows from the top of a glyph to the baseline
        max_length: Longest glyph line in the file, end marks included
        old_layout: Legacy layout mode, conventionally -1..63
        comment_lines: Number of comment lines following the header
        print_direction: 0 for left-to-right, 1 for right-to-left, or None
        full_layout: Full layout mode (0..32767), or None
        codetag_count: Number of code-tagged glyphs declared, or None
    """

    header_line: str
    signature: str
    hardblank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: int | None = None
    full_layout: int | None = None
    codetag_count: int | None = None


@dataclass(frozen=True, slots=True)
class Glyph:
    """
    One FIGcharacter: the rows of ASCII art drawn for a single code point.

    Rows already have end marks removed and hardblanks replaced by spaces.

    Attributes:
        code: Code point this glyph is registered under
        rows: Exactly `height` strings, top to bottom
        width: Length of the first row
        height: Number of rows
    """

    code: CodePoint
    rows: tuple[str, ...]
    width: int
    height: int

    def __str__(self) -> str:
        return "\n".join(self.rows)


@dataclass(frozen=True, slots=True)
class Figure:
    """
    Glyphs selected from a Font for one message, ready to render.

    The glyphs are the Font's own Glyph objects; a Figure never copies
    glyph rows.

    Attributes:
        glyphs: Glyphs in message order
        height: Row count taken from the font header
    """

    glyphs: tuple[Glyph, ...]
    height: int

    def render(self) -> str:
        """Return the banner text; see render()."""
        return render(self)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Font:
    """
    A fully parsed FIGlet font.

    Fonts are built once by parse_font() and never change afterwards, so a
    single instance can serve any number of convert() calls, including
    concurrent ones.

    Attributes:
        header: Parsed header line
        comments: Comment block joined with newlines ("" when there is none)
        glyphs: Read-only mapping from code point to Glyph

    Example:
        >>> font = Font.standard()
        >>> print(font.convert("Hi"))
    """

    header: HeaderLine
    comments: str
    glyphs: FontTable

    @classmethod
    def parse(cls, text: str) -> Font:
        """Parse font text; see parse_font()."""
        return parse_font(text)

    @classmethod
    def standard(cls) -> Font:
        """Return the bundled standard font; see load_standard_font()."""
        return load_standard_font()

    @property
    def height(self) -> int:
        return self.header.height

    def convert(self, message: str) -> Figure | None:
        """Select glyphs for a message; see convert()."""
        return convert(self, message)


# =============================================================================
# HEADER AND COMMENT PARSING
# =============================================================================


def _parse_required_int(fields: Sequence[str], index: int, name: str) -> int:
    """Parse a mandatory numeric header field or raise FormatError."""
    value = fields[index]
    if not INT_PATTERN.fullmatch(value):
        msg = f"Cannot parse required header field {name}: {value!r} is not an integer"
        raise FormatError(msg)
    return int(value)


def _parse_optional_int(fields: Sequence[str], index: int) -> int | None:
    # Missing or garbage optional fields are treated as absent
    if index >= len(fields) or not INT_PATTERN.fullmatch(fields[index]):
        return None
    return int(fields[index])


def parse_header_line(line: str) -> HeaderLine:
    """
    Parse the first line of a FIGlet font.

    The line is trimmed and split on single spaces. The first token is the
    signature immediately followed by the hardblank character; the next
    five tokens are the required integer fields. Up to three further
    integer fields are optional and become None when missing or unparsable.

    Args:
        line: First line of the font file

    Returns:
        HeaderLine with all fields populated

    Raises:
        FormatError: If fewer than six fields are present, the signature
                     token is shorter than six characters, a required field
                     is not an integer, height is below 1 or comment_lines
                     is negative

    Example:
        >>> header = parse_header_line("flf2a$ 6 5 20 15 3")
        >>> header.signature, header.hardblank, header.height
        ('flf2a', '$', 6)
        >>> header.codetag_count is None
        True
    """
    fields = line.strip().split(" ")
    if len(fields) < MIN_HEADER_FIELDS:
        msg = (
            f"Header line has {len(fields)} fields, "
            f"at least {MIN_HEADER_FIELDS} are required: {line!r}"
        )
        raise FormatError(msg)

    # The hardblank is glued to the end of the signature ("flf2a$")
    signature_with_hardblank = fields[0]
    if len(signature_with_hardblank) < MIN_SIGNATURE_LENGTH:
        msg = f"Cannot read signature and hardblank from {signature_with_hardblank!r}"
        raise FormatError(msg)

    height = _parse_required_int(fields, 1, "height")
    baseline = _parse_required_int(fields, 2, "baseline")
    max_length = _parse_required_int(fields, 3, "max length")
    old_layout = _parse_required_int(fields, 4, "old layout")
    comment_lines = _parse_required_int(fields, 5, "comment lines")

    if height < 1:
        raise FormatError(f"Glyph height must be at least 1, got {height}")
    if comment_lines < 0:
        raise FormatError(f"Comment line count cannot be negative, got {comment_lines}")

    return HeaderLine(
        header_line=line,
        signature=signature_with_hardblank[:-1],
        hardblank=signature_with_hardblank[-1],
        height=height,
        baseline=baseline,
        max_length=max_length,
        old_layout=old_layout,
        comment_lines=comment_lines,
        print_direction=_parse_optional_int(fields, 6),
        full_layout=_parse_optional_int(fields, 7),
        codetag_count=_parse_optional_int(fields, 8),
    )


def extract_comments(lines: Sequence[str], comment_lines: int) -> str:
    """
    Return the comment block that follows the header line.

    Args:
        lines: All lines of the font, header included
        comment_lines: Number of comment lines declared in the header

    Returns:
        Lines 1..comment_lines joined with newlines; "" when there are none

    Raises:
        FormatError: If the font has fewer than comment_lines + 1 lines
    """
    if len(lines) < comment_lines + 1:
        msg = (
            f"Header declares {comment_lines} comment lines "
            f"but the font only has {len(lines)} lines"
        )
        raise FormatError(msg)
    return "\n".join(lines[1 : 1 + comment_lines])


# =============================================================================
# GLYPH EXTRACTION
# =============================================================================


def _extract_row(
    lines: Sequence[str],
    index: int,
    hardblank: str,
    end_marks: int,
) -> str:
    try:
        line = lines[index]
    except IndexError:
        msg = f"Glyph row at line {index} is past the end of the font ({len(lines)} lines)"
        raise FormatError(msg) from None
    content = line[: max(len(line) - end_marks, 0)]
    return content.replace(hardblank, " ")


def extract_glyph(
    lines: Sequence[str],
    code: CodePoint,
    start: int,
    height: int,
    hardblank: str,
) -> Glyph:
    """
    Read one glyph of `height` rows starting at line `start`.

    Every row ends with one end mark (conventionally "@"). The last row of a
    glyph carries a doubled end mark, so one extra character is dropped
    there, except for single-row fonts where the only row is treated like
    any other. Hardblank characters are replaced by spaces.

    Rows are not checked for equal width: a font with ragged rows yields a
    ragged glyph.

    Args:
        lines: All lines of the font
        code: Code point to register the glyph under
        start: Index of the glyph's first row in `lines`
        height: Number of rows to read
        hardblank: Hardblank character from the header

    Returns:
        Glyph with `height` rows and width equal to its first row's length

    Raises:
        FormatError: If any row index is past the end of `lines`

    Example:
        >>> glyph = extract_glyph([" _ @", "|_|@@"], 65, 0, 2, "$")
        >>> glyph.rows
        (' _ ', '|_|')
    """
    rows = []
    for offset in range(height):
        is_last_row = offset == height - 1 and height != 1
        end_marks = 2 if is_last_row else 1
        rows.append(_extract_row(lines, start + offset, hardblank, end_marks))

    return Glyph(code=code, rows=tuple(rows), width=len(rows[0]), height=height)


# =============================================================================
# FONT TABLE ASSEMBLY
# =============================================================================


def _read_required_glyphs(
    lines: Sequence[str],
    header: HeaderLine,
    table: dict[CodePoint, Glyph],
) -> None:
    """Load ASCII 32..126 and the German set, stopping early at end of input."""
    height = header.height
    offset = 1 + header.comment_lines

    for codes in (REQUIRED_ASCII_CODES, REQUIRED_GERMAN_CODES):
        for i, code in enumerate(codes):
            start = offset + i * height
            if start >= len(lines):
                logger.debug("Font ends before glyph %d, table is partial", code)
                break
            table[code] = extract_glyph(lines, code, start, height, header.hardblank)
        offset += len(codes) * height


def _parse_code_tag(line: str, index: int) -> CodePoint:
    """
    Parse the code point from a code-tag line such as "0x00C0 LATIN A GRAVE".

    The first token selects the radix: "0x"/"0X" hexadecimal, a leading
    "0" octal, anything else decimal.
    """
    token = line.strip().split(" ")[0].strip()

    if token[:2] in ("0x", "0X"):
        digits, pattern, radix = token[2:], HEX_DIGITS_PATTERN, 16
    elif token.startswith("0") and token != "0":
        digits, pattern, radix = token[1:], OCT_DIGITS_PATTERN, 8
    else:
        digits, pattern, radix = token, DEC_DIGITS_PATTERN, 10

    if not pattern.fullmatch(digits):
        msg = f"Cannot parse code tag {token!r} on line {index}"
        raise FormatError(msg)
    return int(digits, radix)


def _read_code_tagged_glyphs(
    lines: Sequence[str],
    header: HeaderLine,
    table: dict[CodePoint, Glyph],
) -> None:
    """Load glyphs that follow the required block, each after a code line."""
    height = header.height
    offset = 1 + header.comment_lines + REQUIRED_GLYPH_COUNT * height
    if offset >= len(lines):
        return

    group_size = height + 1
    remaining = len(lines) - offset
    if remaining % group_size != 0:
        msg = (
            f"Code-tagged block has {remaining} lines, "
            f"which is not a multiple of {group_size} (code line + {height} rows)"
        )
        raise FormatError(msg)

    for start in range(offset, len(lines), group_size):
        code = _parse_code_tag(lines[start], start)
        table[code] = extract_glyph(lines, code, start + 1, height, header.hardblank)


def build_font_table(
    lines: Sequence[str],
    header: HeaderLine,
) -> dict[CodePoint, Glyph]:
    """
    Build the code point to glyph mapping for a font.

    The required block (ASCII 32..126, then Ä Ö Ü ä ö ü ß) starts right
    after the comment block. Fonts may stop early; whatever glyphs are
    present are loaded. Code-tagged glyphs follow the full required block.
    If a code point is defined twice, the later definition replaces the
    earlier one.

    Args:
        lines: All lines of the font
        header: Parsed header line

    Returns:
        Dictionary mapping code points to glyphs

    Raises:
        FormatError: If a glyph runs past the end of input, the code-tagged
                     block size is not a multiple of height + 1, or a code
                     tag cannot be parsed
    """
    table: dict[CodePoint, Glyph] = {}
    _read_required_glyphs(lines, header, table)
    _read_code_tagged_glyphs(lines, header, table)
    return table


# =============================================================================
# FONT LOADING
# =============================================================================


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing CR per line and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_font(text: str) -> Font:
    """
    Parse the full text of a FIGlet font.

    Runs header parsing, comment extraction and table assembly in order and
    stops at the first failure. Either a complete Font is returned or
    FormatError is raised; no partially built font is ever visible.

    Args:
        text: Contents of a .flf file

    Returns:
        Immutable Font

    Raises:
        FormatError: If the text is empty or any parsing stage fails

    Example:
        >>> font = parse_font(Path("slant.flf").read_text(encoding="utf-8"))
        >>> font.header.height
        6
    """
    lines = _split_lines(text)
    if not lines:
        raise FormatError("Cannot parse a font from empty text")

    header = parse_header_line(lines[0])
    comments = extract_comments(lines, header.comment_lines)
    table = build_font_table(lines, header)

    logger.debug(
        "Parsed %s font: height=%d, %d glyphs, %d comment lines",
        header.signature,
        header.height,
        len(table),
        header.comment_lines,
    )
    return Font(header=header, comments=comments, glyphs=MappingProxyType(table))


def load_standard_font() -> Font:
    """
    Parse the standard font bundled with this module.

    Returns:
        Font built from STANDARD_FONT

    Raises:
        FormatError: Only if the bundled font text is corrupt
    """
    return parse_font(STANDARD_FONT)


# =============================================================================
# RENDERING
# =============================================================================


def convert(font: Font, message: str) -> Figure | None:
    """
    Select the glyphs needed to draw a message.

    Characters without a glyph in the font are skipped silently; they are
    neither replaced nor reported as errors.

    Args:
        font: Font to draw with
        message: Text to draw

    Returns:
        Figure with one glyph per drawable character in message order, or
        None if the message is empty or has no drawable characters

    Example:
        >>> figure = convert(load_standard_font(), "Hi")
        >>> len(figure.glyphs), figure.height
        (2, 6)
    """
    if not message:
        return None

    glyphs = tuple(font.glyphs[ord(ch)] for ch in message if ord(ch) in font.glyphs)
    if not glyphs:
        return None

    skipped = len(message) - len(glyphs)
    if skipped:
        logger.debug("Skipped %d characters with no glyph in the font", skipped)
    return Figure(glyphs=glyphs, height=font.header.height)


def render(figure: Figure) -> str:
    """
    Render a Figure to multi-line text.

    Output line i is row i of every glyph concatenated left to right,
    followed by a newline, for i in 0..height-1. A glyph with fewer rows
    than the figure height contributes nothing to the rows it lacks.

    Args:
        figure: Figure produced by convert()

    Returns:
        Banner text with exactly `height` newline-terminated lines, or ""
        when the figure has no glyphs or a height of zero

    Example:
        >>> print(render(convert(load_standard_font(), "Hi")), end="")
          _   _   _
         | | | | (_)
         | |_| | | |
         |  _  | | |
         |_| |_| |_|

    """
    if not figure.glyphs or figure.height <= 0:
        return ""

    lines = (
        "".join(glyph.rows[row] for glyph in figure.glyphs if row < len(glyph.rows))
        for row in range(figure.height)
    )
    return "".join(f"{line}\n" for line in lines)


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================


def cli_main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line interface entry point.

    Exit Codes:
        0   - Success (banner written)
        1   - Error (unreadable font, malformed font, nothing to draw)
        130 - Interrupted (Ctrl+C)

    Args:
        argv: Argument list; defaults to sys.argv[1:]

    Returns:
        Integer exit code for sys.exit()
    """
    # Banner goes to stdout, diagnostics to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(
        description="Render text as an ASCII-art banner using a FIGlet font.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s "Hello World"
  %(prog)s "Kitchn" -f fonts/slant.flf -o banner.txt
  %(prog)s --info -f fonts/slant.flf
""",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to render",
    )
    parser.add_argument(
        "-f",
        "--font",
        type=Path,
        metavar="FILE",
        help="Path to a .flf font file (default: bundled standard font)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print the font header and comments and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if not args.info and not args.text:
        parser.error("the following arguments are required: text")

    try:
        font = _load_font(args.font)

        if args.info:
            print(_describe_font(font))
            return 0

        figure = font.convert(args.text)
        if figure is None:
            logger.error("Nothing to render: no character of %r has a glyph", args.text)
            return 1

        banner = figure.render()
        if args.output:
            args.output.write_text(banner, encoding="utf-8")
            logger.info("Banner written to %s", args.output)
        else:
            sys.stdout.write(banner)

        return 0

    except FormatError as e:
        logger.error("Font format error: %s", e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def _load_font(path: Path | None) -> Font:
    if path is None:
        logger.debug("Using bundled standard font")
        return load_standard_font()
    logger.debug("Loading font from %s", path)
    data = path.read_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        # Most .flf files predate UTF-8 and are Latin-1
        logger.debug("%s is not valid UTF-8, decoding as Latin-1", path)
        text = data.decode("latin-1")
    return parse_font(text)


def _describe_font(font: Font) -> str:
    """Format header fields and comments for --info output."""
    header = font.header
    fields = [
        ("signature", header.signature),
        ("hardblank", header.hardblank),
        ("height", header.height),
        ("baseline", header.baseline),
        ("max length", header.max_length),
        ("old layout", header.old_layout),
        ("comment lines", header.comment_lines),
        ("print direction", header.print_direction),
        ("full layout", header.full_layout),
        ("codetag count", header.codetag_count),
        ("glyphs", len(font.glyphs)),
    ]
    lines = [f"{name:>16}: {'-' if value is None else value}" for name, value in fields]
    if font.comments:
        lines.append("")
        lines.append(font.comments)
    return "\n".join(lines)


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(cli_main())
