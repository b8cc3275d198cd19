# Frame rate
FPS = 30

# Window
WIN_W = 600
WIN_H = 720
TITLE = "Tic-Tac-Toe (click to play, 1=Two players, 2=Vs computer, R=Reset, Q=Quit)"

# Modes
HUMAN_VS_HUMAN = "HUMAN_VS_HUMAN"
HUMAN_VS_COMPUTER = "HUMAN_VS_COMPUTER"
DEFAULT_MODE = HUMAN_VS_HUMAN

# Symbols in vs-computer mode
HUMAN_SYMBOL = "X"
COMPUTER_SYMBOL = "O"

# Computer reply pacing
COMPUTER_MOVE_DELAY_SECONDS = 0.5

# Layout
BOARD_SIZE = 420
BOARD_TOP = 90
BUTTON_W = 170
BUTTON_H = 50
BUTTON_GAP = 15

# Colors
BG = (15, 15, 20)
GRID = (200, 200, 200)
TEXT = (240, 240, 240)
STATUS = (220, 220, 220)
X_COLOR = (255, 90, 90)
O_COLOR = (90, 200, 255)
WIN_FILL = (40, 90, 60)
BUTTON = (45, 45, 60)
BUTTON_ACTIVE = (80, 140, 255)

# Logging
LOG_LEVEL = "INFO"
