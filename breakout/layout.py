"""Default playfield dimensions, speeds and colors.

Distances are in playfield units (one unit per window pixel), speeds in
units per tick, angles in radians measured counter-clockwise from +x.
"""

# Playfield
WIDTH = 1200
HEIGHT = 800

# Bricks
BRICK_W = 60
BRICK_H = 20
SPACING = 10
BRICK_ROWS = 7
BRICK_X0 = 5
BRICK_Y0 = HEIGHT - 210 - SPACING  # lowest row; further rows stack upward

# Paddle
PADDLE_W = 60
PADDLE_H = 10
PADDLE_X = WIDTH / 2 - PADDLE_W / 2
PADDLE_Y = 100

# Ball
BALL_R = 8
BALL_X = WIDTH / 2
BALL_Y = 400
BALL_ANGLE = -2.3  # down and to the left
BALL_SPEED = 0.2
SPEED_INCREMENT = 0.005
MAX_SPEED = 1.0

# Colors (RGB)
BACKGROUND = (135, 206, 235)  # sky blue
BRICK_COLOR = (255, 0, 0)
PADDLE_COLOR = (0, 0, 0)
BALL_COLOR = (127, 255, 127)
