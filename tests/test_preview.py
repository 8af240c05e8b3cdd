"""Tests for preview: gradient rendering and PNG output."""

from PIL import Image

from color_set import build_color_set
from fast_remix import FAST_REMIX_TABLE
from gradients import GRADIENTS, Gradient
from preview import gradient_image, render_preview


def close(pixel, expected, tolerance=3):
    return all(abs(p - e) <= tolerance for p, e in zip(pixel, expected))


class TestGradientImage:
    def test_diagonal_runs_top_left_to_bottom_right(self):
        img = gradient_image(GRADIENTS[0], (120, 60))  # #98FB98 -> #32CD32

        assert img.size == (120, 60)
        assert close(img.getpixel((0, 0)), (0x98, 0xFB, 0x98))
        assert close(img.getpixel((119, 59)), (0x32, 0xCD, 0x32))

    def test_horizontal(self):
        img = gradient_image(Gradient('h', ('#000000', '#FFFFFF'), angle=90), (101, 10))

        assert close(img.getpixel((0, 5)), (0, 0, 0))
        assert close(img.getpixel((50, 5)), (128, 128, 128))
        assert close(img.getpixel((100, 5)), (255, 255, 255))


class TestRenderPreview:
    def test_writes_png(self, tmp_path):
        output = render_preview(FAST_REMIX_TABLE[0], tmp_path / 'preview.png', size=(300, 150))

        assert output.exists()
        with Image.open(output) as img:
            assert img.format == 'PNG'
            assert img.size == (300, 150)

    def test_cta_button_is_drawn(self, tmp_path):
        color_set = build_color_set(GRADIENTS[0], '#4169E1', '#000000', '#000000')
        output = render_preview(color_set, tmp_path / 'cta.png', size=(300, 150))

        with Image.open(output) as img:
            rgb = img.convert('RGB')
            # Just inside the button's bottom-left corner
            assert rgb.getpixel((12, 150 - 12)) == (0x41, 0x69, 0xE1)
