# All palettes run darkest -> brightest (on a black background).
STANDARD = " .:-=+*#%@"

# Long ramp, reversed from the usual "@%#*+=-:. " ordering
DENSE = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Shade blocks: U+2591-U+2593 and full block U+2588
BLOCKS = " ░▒▓█"

BINARY = " #"

PRESETS = {
    "standard": STANDARD,
    "dense": DENSE,
    "blocks": BLOCKS,
    "binary": BINARY,
}
