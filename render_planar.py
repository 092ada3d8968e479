# Renders raw EGA planar data back into a paletted PNG, to check the output of
# convert_image.py without having to run it on the target.
#
# Usage: render_planar.py <input_raw> <width> <output_png>

import sys
from pathlib import Path

from PIL import Image

from ega_palette import EGA_PALETTE, PLANE_COUNT, Colour, flat_palette
from planar import check_dimensions, unpack_planes


def planar_height(data_len: int, width: int) -> int:
  check_dimensions(width, 1)
  row_bytes = width // 8 * PLANE_COUNT
  if data_len == 0 or data_len % row_bytes != 0:
    raise ValueError(f"{data_len} bytes of planar data is not a whole number of {width} pixel rows")
  return data_len // row_bytes


def render_planar(data: bytes, width: int, palette: tuple[Colour, ...] = EGA_PALETTE) -> Image.Image:
  height = planar_height(len(data), width)
  indices = unpack_planes(data, width, height)
  img = Image.frombytes("P", (width, height), bytes(indices))
  img.putpalette(flat_palette(palette))
  return img


def main(argv: list[str]) -> int:
  if len(argv) < 4:
    print(f"Usage: {argv[0]} <input_raw> <width> <output_png>", file=sys.stderr)
    return 1
  input_path, output_path = Path(argv[1]), Path(argv[3])
  try:
    width = int(argv[2])
  except ValueError:
    print(f"Invalid width: {argv[2]}", file=sys.stderr)
    return 1

  try:
    data = input_path.read_bytes()
  except OSError as e:
    print(f"Error loading file {input_path}: {e.strerror or e}", file=sys.stderr)
    return 1

  try:
    img = render_planar(data, width)
  except ValueError as e:
    print(f"{input_path}: {e}", file=sys.stderr)
    return 1

  try:
    img.save(output_path, format="PNG")
  except OSError as e:
    print(f"Error writing output file {output_path}: {e}", file=sys.stderr)
    return 1

  print(f"Rendered {img.width}x{img.height} planar image to {output_path}")
  return 0


def run() -> None:
  sys.exit(main(sys.argv))


if __name__ == "__main__":
  run()
