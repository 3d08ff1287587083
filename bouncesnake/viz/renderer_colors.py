# bouncesnake/viz/renderer_colors.py
BG = (238, 238, 238)
SNAKE = (128, 0, 128)
APPLE = (255, 0, 0)
GAME_OVER = (128, 0, 128)
TEXT = (40, 40, 40)
