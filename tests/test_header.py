import pytest

from figfont import FormatError, extract_comments, parse_header_line


def test_required_fields():
    header = parse_header_line("flf2a$ 6 5 20 15 3")

    assert header.signature == "flf2a"
    assert header.hardblank == "$"
    assert header.height == 6
    assert header.baseline == 5
    assert header.max_length == 20
    assert header.old_layout == 15
    assert header.comment_lines == 3
    assert header.print_direction is None
    assert header.full_layout is None
    assert header.codetag_count is None


def test_optional_fields():
    header = parse_header_line("flf2a$ 6 5 16 15 11 0 24463 229")

    assert header.print_direction == 0
    assert header.full_layout == 24463
    assert header.codetag_count == 229


def test_unparsable_optional_fields_are_absent():
    header = parse_header_line("flf2a$ 6 5 16 15 11 left 24463")

    assert header.print_direction is None
    assert header.full_layout == 24463
    assert header.codetag_count is None


def test_negative_old_layout():
    assert parse_header_line("flf2a$ 4 3 8 -1 0").old_layout == -1


def test_keeps_raw_line_and_trims_for_parsing():
    line = "  flf2a# 4 3 8 0 0  \n"
    header = parse_header_line(line)

    assert header.header_line == line
    assert header.hardblank == "#"
    assert header.comment_lines == 0


def test_longer_signature():
    header = parse_header_line("flf2a.custom$ 4 3 8 0 0")

    assert header.signature == "flf2a.custom"
    assert header.hardblank == "$"


@pytest.mark.parametrize(
    "line",
    [
        "flf2a$ 6 5 20 15",
        "flf2a$",
        "",
    ],
)
def test_too_few_fields(line):
    with pytest.raises(FormatError, match="fields"):
        parse_header_line(line)


def test_short_signature():
    with pytest.raises(FormatError, match="signature"):
        parse_header_line("flf$ 6 5 20 15 3")


@pytest.mark.parametrize(
    ("line", "field"),
    [
        ("flf2a$ six 5 20 15 3", "height"),
        ("flf2a$ 6 5.0 20 15 3", "baseline"),
        ("flf2a$ 6 5 x 15 3", "max length"),
        ("flf2a$ 6 5 20 ? 3", "old layout"),
        ("flf2a$ 6 5 20 15 many", "comment lines"),
    ],
)
def test_non_numeric_required_field(line, field):
    with pytest.raises(FormatError, match=field):
        parse_header_line(line)


def test_trailing_newline_is_not_part_of_a_number():
    with pytest.raises(FormatError, match="height"):
        parse_header_line("flf2a$ 6\n 5 20 15 3")

    header = parse_header_line("flf2a$ 6 5 20 15 3 0\n 1")
    assert header.print_direction is None
    assert header.full_layout == 1


def test_fields_split_on_single_spaces():
    # A double space yields an empty field where baseline should be
    with pytest.raises(FormatError, match="baseline"):
        parse_header_line("flf2a$ 6  5 20 15 3")


def test_height_must_be_positive():
    with pytest.raises(FormatError, match="height"):
        parse_header_line("flf2a$ 0 0 20 15 3")


def test_comment_lines_cannot_be_negative():
    with pytest.raises(FormatError, match="Comment"):
        parse_header_line("flf2a$ 6 5 20 15 -2")


def test_extract_comments():
    lines = ["flf2a$ 1 1 2 0 2", "first", "second", "glyph@"]

    assert extract_comments(lines, 2) == "first\nsecond"


def test_extract_no_comments():
    assert extract_comments(["flf2a$ 1 1 2 0 0"], 0) == ""


def test_extract_comments_past_end():
    with pytest.raises(FormatError, match="comment"):
        extract_comments(["flf2a$ 1 1 2 0 3", "only one"], 3)
