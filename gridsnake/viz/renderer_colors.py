# gridsnake/viz/renderer_colors.py
BG = (0, 0, 0)
EMPTY = (33, 33, 33)
GRID = (20, 20, 20)
BODY = (76, 175, 80)
HEAD = (129, 199, 132)
FOOD = (244, 67, 54)
TEXT = (230, 230, 230)
OVERLAY = (0, 0, 0, 170)
