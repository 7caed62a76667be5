import pytest

from figfont import FormatError, build_font_table, extract_glyph, parse_font, parse_header_line


def test_strips_end_marks():
    glyph = extract_glyph([" _ @", "|_|@", "| |@@"], 65, 0, 3, "$")

    assert glyph.code == 65
    assert glyph.rows == (" _ ", "|_|", "| |")
    assert glyph.width == 3
    assert glyph.height == 3
    assert str(glyph) == " _ \n|_|\n| |"


def test_replaces_hardblanks():
    glyph = extract_glyph([" $x@", "$$$@@"], 120, 0, 2, "$")

    assert glyph.rows == ("  x", "   ")


def test_reads_from_start_index():
    lines = ["header", "aa@", "bb@@", "cc@", "dd@@"]

    assert extract_glyph(lines, 66, 3, 2, "$").rows == ("cc", "dd")


def test_single_row_glyph_drops_one_mark():
    assert extract_glyph(["ab@"], 97, 0, 1, "$").rows == ("ab",)
    assert extract_glyph(["ab@@"], 97, 0, 1, "$").rows == ("ab@",)


def test_ragged_rows_are_kept():
    glyph = extract_glyph(["abc@", "a@@"], 97, 0, 2, "$")

    assert glyph.rows == ("abc", "a")
    assert glyph.width == 3


def test_short_lines_become_empty_rows():
    assert extract_glyph(["", "@"], 32, 0, 2, "$").rows == ("", "")


def test_glyph_past_end_of_input():
    with pytest.raises(FormatError, match="past the end"):
        extract_glyph(["aa@", "bb@"], 97, 1, 2, "$")


def test_required_block(font_factory):
    text = font_factory(height=2, glyphs={65: ["/\\", "||"]})
    font = parse_font(text)

    assert len(font.glyphs) == 102
    assert set(font.glyphs) == set(range(32, 127)) | {196, 214, 220, 228, 246, 252, 223}
    assert font.glyphs[65].rows == ("/\\", "||")
    assert font.glyphs[223].rows == ("ßß", "ßß")


def test_german_glyphs_follow_ascii_in_order(font_factory):
    font = parse_font(font_factory(height=2))

    for code in (196, 214, 220, 228, 246, 252, 223):
        assert font.glyphs[code].rows == (chr(code) * 2, chr(code) * 2)


def test_partial_required_block(font_factory):
    font = parse_font(font_factory(height=2, count=10))

    assert sorted(font.glyphs) == list(range(32, 42))


def test_partial_ascii_block_skips_german(font_factory):
    font = parse_font(font_factory(height=2, count=95))

    assert 126 in font.glyphs
    assert 196 not in font.glyphs


def test_truncated_glyph_is_an_error(font_factory):
    text = font_factory(height=3, count=10)
    truncated = text.rstrip("\n").rsplit("\n", 1)[0]

    with pytest.raises(FormatError, match="past the end"):
        parse_font(truncated)


def test_code_tagged_glyphs(font_factory):
    text = font_factory(
        height=2,
        tagged=[
            ("0x100  LATIN CAPITAL LETTER A WITH MACRON", ["A-", "--"]),
            ("0X1F600", [":)", "  "]),
            ("0101", ["oc", "tl"]),
            ("8364 EURO SIGN", ["C=", "C="]),
            ("0", ["??", "??"]),
        ],
    )
    font = parse_font(text)

    assert font.glyphs[0x100].rows == ("A-", "--")
    assert font.glyphs[0x1F600].rows == (":)", "  ")
    assert font.glyphs[8364].code == 8364
    assert font.glyphs[0].rows == ("??", "??")
    assert len(font.glyphs) == 106


def test_later_definition_wins(font_factory):
    # 0101 is octal for 65
    text = font_factory(height=2, tagged=[("0101", ["oc", "tl"])])
    font = parse_font(text)

    assert font.glyphs[65].rows == ("oc", "tl")
    assert len(font.glyphs) == 102


def test_code_tagged_block_size_must_match_height(font_factory):
    text = font_factory(height=2, tagged=[("256", ["ab", "cd"])]) + "stray line\n"

    with pytest.raises(FormatError, match="multiple of 3"):
        parse_font(text)


@pytest.mark.parametrize("code_line", ["zz", "-1 NEGATIVE", "09", "0xg1", "", "1e3"])
def test_bad_code_tag(font_factory, code_line):
    text = font_factory(height=2, tagged=[(code_line, ["ab", "cd"])])

    with pytest.raises(FormatError, match="code tag"):
        parse_font(text)


def test_build_font_table_directly():
    header = parse_header_line("flf2a$ 1 1 3 0 0")
    lines = [header.header_line, " $@", "!!@"]
    table = build_font_table(lines, header)

    assert sorted(table) == [32, 33]
    assert table[32].rows == ("  ",)
    assert table[33].rows == ("!!",)
