from identicon.kernel.color import Color, derive_color
from identicon.kernel.digest import digest
from identicon.kernel.raster import IconGeometry, logical_grid, mirror_row, rasterize

WHITE = b"\xff\xff\xff\xff"


def pixel(buf, x, y, pixel_width):
    i = (y * pixel_width + x) * 4
    return bytes(buf[i:i + 4])


def test_mirror_row():
    assert mirror_row(["a"], 1) == ["a"]
    assert mirror_row(["a"], 2) == ["a", "a"]
    assert mirror_row(["a", "b"], 3) == ["a", "b", "a"]
    assert mirror_row(["a", "b"], 4) == ["a", "b", "b", "a"]
    assert mirror_row(["a", "b", "c"], 5) == ["a", "b", "c", "b", "a"]

def test_grid_cursor_runs_across_rows():
    assert logical_grid("10" * 16, 3, 3) == [[True, False, True]] * 3
    assert logical_grid("1000" * 8, 3, 4) == [
        [True, False, False, True],
        [False, False, False, False],
        [True, False, False, True],
    ]

def test_grid_is_symmetric():
    for name in ["sun", "moon", "octocat"]:
        d = digest(name, "md5")
        for w in range(1, 12):
            for row in logical_grid(d, 7, w):
                assert len(row) == w
                assert row == row[::-1]

def test_geometry():
    geo = IconGeometry(height=2, width=3, scale=4)
    assert (geo.pixel_width, geo.pixel_height) == (12, 8)
    assert geo.buffer_size == 2 * 3 * 4 * 4 * 4

def test_buffer_sizes():
    d = digest("moon", "md5")
    assert len(rasterize(d, 3, 3, 1)) == 36
    assert len(rasterize(d, 1, 2, 5)) == 200
    assert len(rasterize(d, 50, 50, 3)) == 50 * 50 * 9 * 4

def test_all_on_and_all_off():
    assert rasterize("1" * 32, 1, 1, 2) == bytes([255, 255, 0, 255]) * 4
    assert rasterize("0" * 32, 2, 3, 2) == WHITE * 24

def test_scale_blocks_are_uniform():
    d = "10" * 16
    s = 4
    buf = rasterize(d, 3, 3, s)
    pw = 3 * s
    on = derive_color(d).to_rgba()
    for y in range(3 * s):
        for x in range(pw):
            assert pixel(buf, x, y, pw) == pixel(buf, (x // s) * s, (y // s) * s, pw)
    assert pixel(buf, 0, 0, pw) == on
    assert pixel(buf, s, 0, pw) == WHITE
    assert pixel(buf, 2 * s, 0, pw) == on

def test_width_one_has_no_mirror():
    buf = rasterize("10" * 16, 3, 1, 3)
    on = derive_color("10" * 16).to_rgba()
    rows = [pixel(buf, 0, y, 3) for y in range(0, 9, 3)]
    # cursor 0, 1, 2 -> '1', '0', '1'
    assert rows == [on, WHITE, on]
    for y in range(9):
        assert len({pixel(buf, x, y, 3) for x in range(3)}) == 1

def test_width_two_mirrors_once():
    # only the first cursor read is odd, so the right cell is on only if mirrored
    d = "1" + "0" * 31
    buf = rasterize(d, 1, 2, 5)
    assert len(buf) == 200
    on = bytes([128, 0, 0, 255])
    assert derive_color(d).to_rgba() == on
    for y in range(5):
        for x in range(10):
            assert pixel(buf, x, y, 10) == on
    assert rasterize(d, 1, 4, 1) == on + WHITE + WHITE + on

def test_color_and_off_overrides():
    red = Color(255, 0, 0, 255)
    black = Color(0, 0, 0, 255)
    buf = rasterize("10" * 16, 1, 3, 1, color=red, off=black)
    assert bytes(buf) == bytes([255, 0, 0, 255, 0, 0, 0, 255, 255, 0, 0, 255])

def test_deterministic():
    d = digest("forest", "md5")
    assert rasterize(d, 9, 7, 3) == rasterize(digest("forest", "md5"), 9, 7, 3)
