from PIL import Image

from identicon.cli import main

def test_writes_png(tmp_path, capsys):
    out = tmp_path / "me.png"
    rc = main(["octocat", "--height", "3", "--width", "4", "--scale", "5",
               "--margin", "0", "--algorithm", "md5", "-o", str(out)])
    assert rc == 0
    with Image.open(out) as img:
        assert img.size == (20, 15)
    assert str(out) in capsys.readouterr().out

def test_rejects_bad_height(tmp_path, capsys):
    rc = main(["octocat", "--height", "0", "-o", str(tmp_path / "x.png")])
    assert rc == 1
    assert "ERROR: height is outside the specified range" in capsys.readouterr().err
    assert not (tmp_path / "x.png").exists()

def test_rejects_unknown_algorithm(tmp_path, capsys):
    rc = main(["octocat", "--algorithm", "crc32", "-o", str(tmp_path / "x.png")])
    assert rc == 1
    assert "crc32" in capsys.readouterr().err
