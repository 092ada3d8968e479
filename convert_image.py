# Converts an image into 16-colour EGA planar data: every pixel is mapped to
# the nearest colour of the standard EGA palette and the resulting colour
# numbers are split into four bit planes, see planar.py for the layout. The raw
# output is meant to be compressed and put into the graphics archive by a
# separate tool.
#
# Usage: convert_image.py <input_image> <output_raw>

import contextlib
import os
import stat
import sys
import tempfile
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from planar import PlanarWidthError, check_dimensions, pack_planes
from quantize import quantize_image


class ImageDecodeError(Exception):
  pass


class OutputWriteError(Exception):
  pass


def load_image(path: Path) -> Image.Image:
  # Errors reading the file itself carry an errno and propagate as OSError.
  try:
    img = Image.open(path)
  except (UnidentifiedImageError, Image.DecompressionBombError) as e:
    raise ImageDecodeError(str(e)) from e
  except OSError as e:
    if e.errno is not None:
      raise
    raise ImageDecodeError(str(e)) from e
  try:
    img.load()
  except (OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
    raise ImageDecodeError(str(e)) from e
  return img


def convert(img: Image.Image) -> bytes:
  width, height = img.size
  check_dimensions(width, height)
  indices = quantize_image(img)
  return pack_planes(indices, width, height)


def new_file_mode(path: Path) -> int:
  try:
    return stat.S_IMODE(os.stat(path).st_mode)
  except FileNotFoundError:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_raw(path: Path, data: bytes) -> int:
  path = Path(path)
  try:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
  except OSError as e:
    raise OutputWriteError(f"Error opening output file {path}: {e.strerror or e}") from e

  replaced = False
  try:
    with os.fdopen(fd, "wb") as out:
      written = out.write(data)
      out.flush()
    os.chmod(tmp_name, new_file_mode(path))
    os.replace(tmp_name, path)
    replaced = True
  except OSError as e:
    raise OutputWriteError(f"Error writing output file {path}: {e.strerror or e}") from e
  finally:
    if not replaced:
      with contextlib.suppress(OSError):
        os.unlink(tmp_name)
  return written


def main(argv: list[str]) -> int:
  if len(argv) < 3:
    print(f"Usage: {argv[0]} <input_image> <output_raw>", file=sys.stderr)
    return 1
  input_path, output_path = Path(argv[1]), Path(argv[2])

  try:
    img = load_image(input_path)
  except ImageDecodeError as e:
    print(f"Error decoding image {input_path}: {e}", file=sys.stderr)
    return 1
  except OSError as e:
    print(f"Error loading file {input_path}: {e.strerror or e}", file=sys.stderr)
    return 1

  try:
    data = convert(img)
  except PlanarWidthError as e:
    print(f"{input_path}: {e}", file=sys.stderr)
    return 1
  except MemoryError:
    print("Failed to allocate planar buffer", file=sys.stderr)
    return 1

  try:
    written = write_raw(output_path, data)
  except OutputWriteError as e:
    print(e, file=sys.stderr)
    return 1

  width, height = img.size
  print(f"Wrote {written} bytes of planar EGA data to {output_path} (width={width} height={height})")
  return 0


def run() -> None:
  sys.exit(main(sys.argv))


if __name__ == "__main__":
  run()
