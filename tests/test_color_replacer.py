from pixel_recolor.models.match_criterion import MatchAll, MatchColor
from pixel_recolor.models.recolor_config import RecolorConfig
from pixel_recolor.pipeline.color_replacer import replace_color
from tests.helpers import BLUE, GREEN, RED, read_rgba


def test_replace_color_writes_copy_and_keeps_input(write_image, tmp_path):
    src = write_image([[(255, 0, 0), (0, 0, 255)]])
    original_bytes = src.read_bytes()

    out = replace_color(src, RecolorConfig(MatchColor(RED), GREEN))

    assert out == tmp_path / "img_copy.png"
    assert src.read_bytes() == original_bytes
    assert read_rgba(out) == [[[0, 255, 0, 255], [0, 0, 255, 255]]]


def test_no_match_output_equals_input(write_image):
    rows = [[(1, 2, 3, 4), (5, 6, 7, 8)], [(9, 10, 11, 12), (13, 14, 15, 16)]]
    src = write_image(rows)

    out = replace_color(src, RecolorConfig(MatchColor(BLUE), RED))

    assert read_rgba(out) == read_rgba(src)


def test_repeated_runs_never_overwrite(write_image, tmp_path):
    src = write_image([[(255, 0, 0)]])
    config = RecolorConfig(MatchAll(), GREEN)

    outputs = [replace_color(src, config) for _ in range(3)]

    assert outputs == [tmp_path / "img_copy.png",
                       tmp_path / "img_copy_1.png",
                       tmp_path / "img_copy_2.png"]
