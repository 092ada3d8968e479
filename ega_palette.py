# The standard IBM EGA palette, in 8-bit intensities as the VGA DAC sees them
# after scaling. Indices here are the 4-bit colour numbers written into the
# bit planes.

Colour = tuple[int, int, int]

EGA_PALETTE: tuple[Colour, ...] = (
  (0x00, 0x00, 0x00),  # 0 black
  (0x00, 0x00, 0xAA),  # 1 blue
  (0x00, 0xAA, 0x00),  # 2 green
  (0x00, 0xAA, 0xAA),  # 3 cyan
  (0xAA, 0x00, 0x00),  # 4 red
  (0xAA, 0x00, 0xAA),  # 5 magenta
  (0xAA, 0x55, 0x00),  # 6 brown
  (0xAA, 0xAA, 0xAA),  # 7 light grey
  (0x55, 0x55, 0x55),  # 8 dark grey
  (0x55, 0x55, 0xFF),  # 9 bright blue
  (0x55, 0xFF, 0x55),  # 10 bright green
  (0x55, 0xFF, 0xFF),  # 11 bright cyan
  (0xFF, 0x55, 0x55),  # 12 bright red
  (0xFF, 0x55, 0xFF),  # 13 bright magenta
  (0xFF, 0xFF, 0x55),  # 14 yellow
  (0xFF, 0xFF, 0xFF),  # 15 white
)

PLANE_COUNT = 4


def colour_distance(a: Colour, b: Colour) -> int:
  dr = a[0] - b[0]
  dg = a[1] - b[1]
  db = a[2] - b[2]
  return dr * dr + dg * dg + db * db


def flat_palette(palette: tuple[Colour, ...] = EGA_PALETTE) -> list[int]:
  return [component for colour in palette for component in colour]
