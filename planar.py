# Layout of the EGA planar memory: four planes, each holding one bit of every
# pixel's colour number. Within a plane, pixels go row by row, eight pixels per
# byte, with the leftmost pixel in the most significant bit. The planes are
# stored back to back, plane 0 first.

from typing import Sequence

from ega_palette import PLANE_COUNT


class PlanarWidthError(ValueError):
  pass


def check_dimensions(width: int, height: int) -> None:
  if width <= 0 or height <= 0:
    raise PlanarWidthError(f"Invalid image dimensions {width}x{height}")
  if width % 8 != 0:
    raise PlanarWidthError("Width must be a multiple of 8 for planar conversion")


def plane_size(width: int, height: int) -> int:
  return width * height // 8


def pack_planes(indices: Sequence[int], width: int, height: int) -> bytes:
  check_dimensions(width, height)
  if len(indices) != width * height:
    raise ValueError(f"Expected {width * height} pixels, got {len(indices)}")

  size = plane_size(width, height)
  out = bytearray(size * PLANE_COUNT)
  for y in range(height):
    row_start = y * width
    for x in range(width):
      n = row_start + x
      pixel = indices[n] & 0x0F
      if pixel == 0:
        continue
      mask = 0x80 >> (x % 8)
      byte_offset = n // 8
      for plane in range(PLANE_COUNT):
        if (pixel >> plane) & 1:
          out[plane * size + byte_offset] |= mask
  return bytes(out)


def split_planes(data: bytes, width: int, height: int) -> list[bytes]:
  size = plane_size(width, height)
  if len(data) != size * PLANE_COUNT:
    raise ValueError(f"Expected {size * PLANE_COUNT} bytes of planar data, got {len(data)}")
  return [bytes(data[plane * size:(plane + 1) * size]) for plane in range(PLANE_COUNT)]


def unpack_planes(data: bytes, width: int, height: int) -> bytearray:
  check_dimensions(width, height)
  planes = split_planes(data, width, height)
  indices = bytearray(width * height)
  for y in range(height):
    row_start = y * width
    for x in range(width):
      n = row_start + x
      mask = 0x80 >> (x % 8)
      byte_offset = n // 8
      pixel = 0
      for plane, plane_data in enumerate(planes):
        if plane_data[byte_offset] & mask:
          pixel |= 1 << plane
      indices[n] = pixel
  return indices
