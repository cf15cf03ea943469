# viz/renderer_colors.py
BG = (243, 244, 246)        # board
PANEL = (255, 255, 255)     # HUD strip
GRID = (229, 231, 235)
FOOD = (239, 68, 68)
HEAD = (22, 163, 74)
BODY = (34, 197, 94)
TEXT = (31, 41, 55)
SCORE = (22, 163, 74)
HIGH = (37, 99, 235)
SHADE = (0, 0, 0, 178)      # game-over veil
OVERLAY_TEXT = (255, 255, 255)
