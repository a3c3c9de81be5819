"""Window, font and timing settings shared by the game modules."""

WIN_TITLE = "Don't Eat the Yellow Snow!"
WIN_ICON = "assets/images/yellow.png"
WIN_W = 800
WIN_H = 600

FONT_SIZE = 24

TARGET_FPS = 60