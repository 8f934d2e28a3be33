# viz/renderer_colors.py
BG = (18, 18, 28)
HEADER = (35, 37, 49)
EMPTY = (28, 34, 41)
GRID = (41, 51, 64)
HEAD = (144, 238, 144)
BODY = (80, 200, 120)
FOOD = (235, 64, 52)
TEXT = (230, 238, 247)
TEXT_MUTED = (149, 164, 184)

STATUS = {
    "pending": TEXT_MUTED,
    "playing": TEXT,
    "stopped": FOOD,
    "full": HEAD,
}
