# pingpong_core/constants.py

APP_TITLE = "Ping Pong"
WIDTH, HEIGHT = 800, 600
FPS = 60

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (150, 150, 150)
DARK = (24, 24, 28)
BLUE = (70, 140, 255)
GREEN = (60, 200, 120)

OVERLAY_ALPHA = 178  # 0.7 * 255
