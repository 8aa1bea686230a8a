import pytest
from unittest.mock import patch
from isoprism.__main__ import main

CUBE = """
square: false
prism:
  - pos: [0, 0, 0]
    size: [1, 1, 1]
    color: "#ff0000"
"""


def test_prints_svg_to_stdout(scene_file, capsys):
    assert main([str(scene_file(CUBE))]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<svg")
    assert 'fill="#ff0000"' in out


def test_writes_output_file(scene_file, tmp_path):
    out = tmp_path / "cube.svg"
    assert main([str(scene_file(CUBE)), "-o", str(out)]) == 0
    assert out.read_text().startswith("<svg")


def test_unit_and_square_flags(scene_file, capsys):
    path = str(scene_file(CUBE.replace("square: false", "square: true")))
    main([path, "--unit", "10"])
    square = capsys.readouterr().out
    assert 'width="20" height="20"' in square

    main([path, "--unit", "10", "--no-square"])
    tight = capsys.readouterr().out
    assert 'height="20"' in tight
    assert 'width="20"' not in tight


def test_bad_scene_file_exits_with_error(scene_file, capsys):
    assert main([str(scene_file("prism: [{size: [1, 1, 1]}]"))]) == 1
    err = capsys.readouterr().err
    assert "ERROR" in err
    assert "missing 'pos'" in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_watch_requires_output(scene_file, capsys):
    assert main([str(scene_file(CUBE)), "--watch"]) == 1
    assert "--watch requires" in capsys.readouterr().err


def test_watch_starts_watcher(scene_file, tmp_path):
    out = tmp_path / "cube.png"
    with patch("isoprism.__main__.SceneWatcher") as watcher:
        assert main([str(scene_file(CUBE)), "-o", str(out), "--watch"]) == 0
    assert out.exists()
    watcher.assert_called_once()
    watcher.return_value.run.assert_called_once()


def test_missing_argument_exits():
    with pytest.raises(SystemExit):
        main([])
