from pixel_recolor.models.color import Color
from pixel_recolor.services.pixel_writer_service import PixelWriterService
from tests.helpers import GREEN, RED

write = PixelWriterService.compute_replacement


def test_without_preserve_alpha_uses_destination():
    assert write(RED.with_alpha(0x10).argb, GREEN, False, True) == GREEN.argb


def test_without_preserve_alpha_keeps_destination_alpha():
    dest = Color(0, 0, 255, 0x80)
    assert write(RED.argb, dest, False, True) == 0x800000FF


def test_preserve_alpha_keeps_pixel_alpha():
    assert write(RED.with_alpha(0x33).argb, GREEN, True, True) == 0x3300FF00


def test_preserve_alpha_ignores_destination_alpha():
    dest = Color(0, 255, 0, 0x80)
    assert write(RED.with_alpha(0x33).argb, dest, True, True) == 0x3300FF00


def test_preserve_alpha_without_alpha_channel_is_opaque():
    assert write(0x0000FF00 | 0x12000000, Color(1, 2, 3, 0), True, False) == 0xFF010203
