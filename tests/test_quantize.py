from PIL import Image

from ega_palette import EGA_PALETTE, colour_distance
from quantize import nearest_colour, quantize_image, quantize_pixels


def test_palette_colours_map_to_themselves():
  for i, (r, g, b) in enumerate(EGA_PALETTE):
    assert nearest_colour(r, g, b) == i


def test_palette_has_16_distinct_colours():
  assert len(EGA_PALETTE) == 16
  assert len(set(EGA_PALETTE)) == 16


def test_colour_distance():
  assert colour_distance((0, 0, 0), (0, 0, 0)) == 0
  assert colour_distance((1, 2, 3), (4, 6, 3)) == 9 + 16
  assert colour_distance((255, 255, 255), (0, 0, 0)) == 3 * 255 * 255


def test_nearest_colour_approximations():
  assert nearest_colour(0x50, 0x50, 0x50) == 8
  assert nearest_colour(0x10, 0x08, 0x00) == 0
  assert nearest_colour(0xF0, 0xF0, 0x60) == 14
  assert nearest_colour(0xA0, 0x50, 0x10) == 6


def test_tie_goes_to_lowest_index():
  palette = ((100, 0, 0), (0, 100, 0), (0, 0, 100))
  assert nearest_colour(0, 0, 0, palette=palette) == 0

  palette = ((0, 0, 100), (0, 100, 0), (100, 0, 0))
  assert nearest_colour(0, 0, 0, palette=palette) == 0

  palette = ((200, 200, 200), (10, 10, 10), (10, 10, 10))
  assert nearest_colour(10, 10, 10, palette=palette) == 1

  palette = ((255, 255, 255), (0, 0, 20), (0, 20, 0))
  assert nearest_colour(0, 10, 10, palette=palette) == 1


def test_quantize_pixels_row_major():
  pixels = [(0, 0, 0), (255, 255, 255), (0xAA, 0, 0), (0xFF, 0xFF, 0x55)]
  assert list(quantize_pixels(pixels)) == [0, 15, 4, 14]


def test_quantize_pixels_is_deterministic():
  pixels = [((i * 37) % 256, (i * 91) % 256, (i * 13) % 256) for i in range(500)]
  assert quantize_pixels(pixels) == quantize_pixels(pixels)


def test_quantize_image_ignores_alpha():
  img = Image.new("RGBA", (2, 1))
  img.putpixel((0, 0), (255, 255, 255, 0))
  img.putpixel((1, 0), (0, 0, 0xAA, 128))
  assert list(quantize_image(img)) == [15, 1]


def test_quantize_image_order():
  img = Image.new("RGB", (2, 2))
  img.putpixel((0, 0), (0, 0, 0))
  img.putpixel((1, 0), (0, 0xAA, 0))
  img.putpixel((0, 1), (0xAA, 0, 0))
  img.putpixel((1, 1), (0xFF, 0xFF, 0xFF))
  assert list(quantize_image(img)) == [0, 2, 4, 15]


def test_quantize_image_greyscale():
  img = Image.new("L", (3, 1))
  img.putpixel((0, 0), 0)
  img.putpixel((1, 0), 0xAA)
  img.putpixel((2, 0), 0xFF)
  assert list(quantize_image(img)) == [0, 7, 15]


def test_quantize_16_bit_greyscale_keeps_high_byte():
  img = Image.new("I;16", (4, 1))
  for x, value in enumerate([0x0000, 0x5555, 0xAAAA, 0xFFFF]):
    img.putpixel((x, 0), value)
  assert list(quantize_image(img)) == [0, 8, 7, 15]


def test_quantize_32_bit_greyscale_clamps():
  img = Image.new("I", (3, 1))
  for x, value in enumerate([-5, 0x55FF, 0x123456]):
    img.putpixel((x, 0), value)
  assert list(quantize_image(img)) == [0, 8, 15]
