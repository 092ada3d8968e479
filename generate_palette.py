# Writes the EGA palette as C source for the engine, which has to program the
# DAC after switching into the 16-colour planar mode. The DAC takes 6-bit
# components, so every 8-bit value is shifted down by 2.
#
# Usage: generate_palette.py <output_path>  (writes <output_path>.h and .c)

import sys
from pathlib import Path

from ega_palette import EGA_PALETTE, Colour


def dac_palette(palette: tuple[Colour, ...] = EGA_PALETTE) -> list[int]:
  return [component >> 2 for colour in palette for component in colour]


def write_palette_source(output_path: Path, palette: tuple[Colour, ...] = EGA_PALETTE) -> None:
  output_path = Path(output_path)
  header_name = output_path.with_suffix(".h").name
  dac = dac_palette(palette)

  with open(output_path.with_suffix(".h"), "w") as file:
    print("// This file was generated by generate_palette.py", file=file)
    print("#pragma once", file=file)
    print("", file=file)
    print("#ifdef __cplusplus", file=file)
    print('extern "C" {', file=file)
    print("#endif", file=file)
    print("", file=file)
    print(f"#define EGA_PALETTE_COLOURS {len(palette)}", file=file)
    print("", file=file)
    print("extern const unsigned char EGA_PALETTE_DATA[];", file=file)
    print("", file=file)
    print("#ifdef __cplusplus", file=file)
    print("}", file=file)
    print("#endif", file=file)

  with open(output_path.with_suffix(".c"), "w") as file:
    print("// This file was generated by generate_palette.py", file=file)
    print(f'#include "{header_name}"', file=file)
    print("", file=file)
    print("const unsigned char EGA_PALETTE_DATA[] = {", file=file)
    for i in range(len(palette)):
      r, g, b = dac[i * 3:(i + 1) * 3]
      print("  0x{:02x}, 0x{:02x}, 0x{:02x}, /* {} */".format(r, g, b, i), file=file)
    print("};", file=file)


def main(argv: list[str]) -> int:
  if len(argv) < 2:
    print(f"Usage: {argv[0]} <output_path>", file=sys.stderr)
    return 1
  output_path = Path(argv[1])
  try:
    write_palette_source(output_path)
  except OSError as e:
    print(f"Error writing palette source {output_path}: {e.strerror or e}", file=sys.stderr)
    return 1
  print(f"Wrote {output_path.with_suffix('.h')} and {output_path.with_suffix('.c')}")
  return 0


def run() -> None:
  sys.exit(main(sys.argv))


if __name__ == "__main__":
  run()
