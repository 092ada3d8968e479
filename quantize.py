from typing import Iterable

from PIL import Image

from ega_palette import EGA_PALETTE, Colour, colour_distance


def nearest_colour(r: int, g: int, b: int, palette: tuple[Colour, ...] = EGA_PALETTE) -> int:
  # Strict comparison, so on a tie the lowest index is kept.
  rgb = (r, g, b)
  best_idx = 0
  best_dist = None
  for i, entry in enumerate(palette):
    dist = colour_distance(rgb, entry)
    if best_dist is None or dist < best_dist:
      best_dist = dist
      best_idx = i
  return best_idx


def quantize_pixels(pixels: Iterable[Colour], palette: tuple[Colour, ...] = EGA_PALETTE) -> bytearray:
  indices = bytearray()
  cache: dict[Colour, int] = {}
  for pixel in pixels:
    rgb = (pixel[0], pixel[1], pixel[2])
    idx = cache.get(rgb)
    if idx is None:
      idx = cache[rgb] = nearest_colour(*rgb, palette=palette)
    indices.append(idx)
  return indices


def reduce_to_8_bits(img: Image.Image) -> Image.Image:
  # 16-bit greyscale keeps the high byte of every sample, the same way the PNG
  # decoder reduces 16-bit colour channels.
  width, height = img.size
  pixel_map = img.load()
  data = bytes(
    min(max(pixel_map[x, y], 0), 0xFFFF) >> 8 for y in range(height) for x in range(width)
  )
  return Image.frombytes("L", img.size, data)


def image_pixels(img: Image.Image) -> Iterable[Colour]:
  if img.mode == "I" or img.mode.startswith("I;16"):
    img = reduce_to_8_bits(img)
  # Converting to RGB drops the alpha channel without compositing it.
  data = img.convert("RGB").tobytes()
  return zip(data[0::3], data[1::3], data[2::3])


def quantize_image(img: Image.Image, palette: tuple[Colour, ...] = EGA_PALETTE) -> bytearray:
  return quantize_pixels(image_pixels(img), palette)
