"""Game-wide constants: window geometry, physics, speeds and asset names."""

MENU_WINDOW_WIDTH = 1024
MENU_WINDOW_HEIGHT = 768
WINDOW_TITLE = "Turtix"
STATE_NUMBER = 9
BACKGROUND_DIR = "./assets/backgrounds/"
MENU_FONT_PATH = "./assets/fonts/Roboto-Medium.ttf"
SCORE_FONT_PATH = "font/arialbd.ttf"
PICTURES_DIR = "./pictures/"
MAP_PATH = "./map/map1.csv"
MAIN_MENU_OPTION_NUMBER = 3
NUM_OF_OPTION = 3

TOUCH_CEILING_FALL = 3
BLUE_ENEMY_LIVE_WITHOUT_SHIELD = 1
BLOCK_BOUND1 = 1
BLOCK_BOUND2 = 10
GAP = 10
FRAME_RATE = 60
BOUND_LEFT_WALL1 = 8
BOUND_LEFT_WALL2 = 21
BOUND_RIGHT_WALL1 = 7
STEP_SIZE = 6
PLAYER_SPEED = 7
BASE_ENEMY_SPEED = 2
TURTLE_SPEED = 3
WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 800
PORTAL_X = 3865
PORTAL_Y = 710
ENEMY_BECOME_GHOST_TIME = 3
CHANGE_FRAME_TIME = 50
SCORE_FONT_SIZE = 70
NUMBER_OF_HEARTS = 5
GRAVITY = 0.2
JUMP_FIRST_AMOUNT = -11.0
HIT_JUMP = -7.0
OBJECT_TYPE_PLACE = 0
SEPARATOR = ","
BLUE_ENEMY_LIVES = 2
ORANGE_ENEMY_LIVES = 1
X_VALUE = 0
Y_VALUE = 1
OBJECT_VALUE = 2

INITIAL_LIVES = 2
DEAD_SPRITE_OFFSET = 18
DEAD_FRAME_BASE = 5

PLAYER_IMAGES = (
    "player1", "player1", "player2", "player3", "player4", "player5", "player6",
    "player7", "player8", "player9", "player10", "player11", "player12",
    "player13", "player14", "player15", "player16", "player17", "player18",
)
BABY_TURTLE_IMAGES = (
    "turtle_in_bubble", "turtle1", "turtle2", "turtle3", "turtle4", "turtle5",
    "turtle6", "turtle7", "turtle8", "turtle9", "turtle10", "turtle11",
    "turtle12", "turtle13", "turtle14", "turtle15", "turtle16",
)
WEAK_ENEMY_IMAGES = (
    "weak_enemy1", "weak_enemy1", "weak_enemy2", "weak_enemy3", "weak_enemy4",
    "weak_enemy5", "weak_enemy6",
)
STRONG_ENEMY_IMAGES = (
    "strong_enemy1", "strong_enemy1", "strong_enemy2", "strong_enemy3",
    "strong_enemy4", "strong_enemy5", "strong_enemy6",
)

BACKGROUND_IMAGE = "./pictures/back1.jpg"
HEART_IMAGE = "./pictures/heart.png"
DEAD_HEART_IMAGE = "./pictures/dead_heart.png"
GEM_IMAGE = "./pictures/blue4.gif"
STAR_IMAGE = "./pictures/shining_star.gif"