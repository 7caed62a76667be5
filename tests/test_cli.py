import pytest

from figfont import cli_main, load_standard_font, render


def test_renders_to_stdout(capsys):
    assert cli_main(["Hi"]) == 0

    out = capsys.readouterr().out
    assert out == render(load_standard_font().convert("Hi"))


def test_writes_output_file(tmp_path, capsys):
    output = tmp_path / "banner.txt"

    assert cli_main(["Hi", "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == render(load_standard_font().convert("Hi"))
    assert capsys.readouterr().out == ""


def test_custom_font_file(tmp_path, capsys, minimal_font_text):
    font_path = tmp_path / "tiny.flf"
    font_path.write_text(minimal_font_text, encoding="utf-8")

    assert cli_main(["AB", "--font", str(font_path)]) == 0
    assert capsys.readouterr().out == "/\\|)\n|||)\n"


def test_latin1_font_file(tmp_path, capsys, font_factory):
    font_path = tmp_path / "latin1.flf"
    text = font_factory(
        height=2,
        comments=["caf\xe9 font"],
        glyphs={65: ["/\\", "||"]},
        tagged=[("233  LATIN SMALL LETTER E WITH ACUTE", ["e'", "ee"])],
    )
    font_path.write_bytes(text.encode("latin-1"))

    assert cli_main(["A\xe9", "-f", str(font_path)]) == 0
    assert capsys.readouterr().out == "/\\e'\n||ee\n"

    assert cli_main(["--info", "-f", str(font_path)]) == 0
    assert "caf\xe9 font" in capsys.readouterr().out


def test_info(tmp_path, capsys, minimal_font_text):
    font_path = tmp_path / "tiny.flf"
    font_path.write_text(minimal_font_text, encoding="utf-8")

    assert cli_main(["--info", "-f", str(font_path)]) == 0

    out = capsys.readouterr().out
    assert "signature: flf2a" in out
    assert "height: 2" in out
    assert "codetag count: -" in out
    assert "glyphs: 102" in out
    assert out.rstrip().endswith("tiny test font\nsecond comment")


def test_missing_text_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main([])

    assert excinfo.value.code == 2
    assert "text" in capsys.readouterr().err


def test_nothing_to_render(caplog):
    assert cli_main(["☃☃"]) == 1
    assert "Nothing to render" in caplog.text


def test_missing_font_file(tmp_path, caplog):
    assert cli_main(["Hi", "-f", str(tmp_path / "absent.flf")]) == 1
    assert "I/O error" in caplog.text


def test_malformed_font_file(tmp_path, caplog):
    font_path = tmp_path / "broken.flf"
    font_path.write_text("flf2a$ 6 5\n", encoding="utf-8")

    assert cli_main(["Hi", "-f", str(font_path)]) == 1
    assert "Font format error" in caplog.text
