from __future__ import annotations

import pytest

from nuri.cli import (
    EXIT_BAD_IMAGE,
    EXIT_NOT_FOUND,
    EXIT_OK,
    EXIT_WRITE_FAILED,
    generate_palette,
    main,
    parse_cli_args,
)
from nuri.mode import ThemeMode

BANDS = [((16, 16, 16), 8), ((200, 40, 40), 3), ((40, 60, 200), 1)]


@pytest.fixture
def wallpaper(striped_image):
    return striped_image(BANDS, name="sunset.png")


def test_theme_goes_to_stdout(wallpaper, capsys):
    assert main([str(wallpaper)]) == EXIT_OK
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 22
    assert lines[0].startswith("background = #")
    assert "[error]" not in err


def test_multiple_targets_to_stdout(wallpaper, capsys):
    assert main([str(wallpaper), "--target", "ghostty,zellij"]) == EXIT_OK
    out, _err = capsys.readouterr()
    assert "palette = 15=" in out
    assert 'themes {\n    "sunset" {' in out


def test_missing_image_exits_2(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == EXIT_NOT_FOUND
    out, err = capsys.readouterr()
    assert out == ""
    assert "Check the path" in err


def test_corrupt_image_exits_3(tmp_path, capsys):
    bogus = tmp_path / "bogus.jpg"
    bogus.write_bytes(b"\x00\x01\x02 not a jpeg")
    assert main([str(bogus)]) == EXIT_BAD_IMAGE
    out, err = capsys.readouterr()
    assert out == ""
    assert "Check the file format" in err


def test_output_writes_file(wallpaper, tmp_path, capsys):
    dst = tmp_path / "out.kdl"
    assert main([str(wallpaper), "-t", "zellij", "-o", str(dst)]) == EXIT_OK
    out, _err = capsys.readouterr()
    assert out == ""
    assert dst.read_text(encoding="utf-8").startswith("themes {")


def test_output_requires_single_target(wallpaper, tmp_path):
    with pytest.raises(SystemExit) as info:
        parse_cli_args([str(wallpaper), "-t", "ghostty,zellij", "-o", str(tmp_path / "x")])
    assert info.value.code == 2


def test_unknown_target_is_a_usage_error(wallpaper):
    with pytest.raises(SystemExit):
        parse_cli_args([str(wallpaper), "-t", "kitty"])


def test_install_and_no_clobber(wallpaper, isolated_config_home, capsys):
    args = [str(wallpaper), "--install", "--name", "dusk", "-t", "ghostty,neovim"]
    assert main(args) == EXIT_OK
    assert (isolated_config_home / "ghostty" / "themes" / "dusk").is_file()
    assert (isolated_config_home / "nvim" / "colors" / "dusk.lua").is_file()

    assert main(args + ["--no-clobber"]) == EXIT_WRITE_FAILED
    _out, err = capsys.readouterr()
    assert "already exists" in err


def test_name_defaults_to_image_stem(wallpaper):
    assert parse_cli_args([str(wallpaper)]).name == "sunset"


def test_preview_goes_to_stderr_when_theme_is_on_stdout(wallpaper, capsys):
    assert main([str(wallpaper), "--preview"]) == EXIT_OK
    out, err = capsys.readouterr()
    assert "Foreground contrast" not in out
    assert "Foreground contrast" in err
    assert len(out.splitlines()) == 22


def test_debug_logs_to_stderr(wallpaper, capsys):
    assert main([str(wallpaper), "--debug", "-k", "3"]) == EXIT_OK
    out, err = capsys.readouterr()
    assert "[debug]" in err
    assert "[debug]" not in out


def test_bad_cluster_count_is_a_usage_error(wallpaper):
    with pytest.raises(SystemExit):
        parse_cli_args([str(wallpaper), "-k", "0"])


def test_generate_palette_modes(wallpaper):
    _palette, colors, mode = generate_palette(wallpaper, 4, None)
    assert mode is ThemeMode.DARK
    assert len(colors) == 3

    palette, _colors, mode = generate_palette(wallpaper, 4, "light")
    assert mode is ThemeMode.LIGHT
    assert palette.background.to_oklch()[0] > palette.foreground.to_oklch()[0]


def test_min_contrast_option(wallpaper, capsys):
    assert main([str(wallpaper), "--min-contrast", "4.5", "-m", "dark"]) == EXIT_OK
    out, _err = capsys.readouterr()
    assert len(out.splitlines()) == 22


def test_min_contrast_of_one_warns(wallpaper, capsys):
    assert main([str(wallpaper), "--min-contrast", "1"]) == EXIT_OK
    _out, err = capsys.readouterr()
    assert "[warn]" in err


def test_name_with_path_separator_is_a_usage_error(wallpaper, isolated_config_home):
    with pytest.raises(SystemExit) as info:
        main([str(wallpaper), "--install", "--name", "../../escape"])
    assert info.value.code == 2
    assert not (isolated_config_home.parent / "escape").exists()
