"""Game-wide dimensions, layers, timings and tuning values."""

GRID_W = 28
GRID_H = 18
TILE = 32
SCENE_W = GRID_W * TILE
SCENE_H = GRID_H * TILE
RASTER = 4

Z_BG_COLOR = -100
Z_PLANETS = -50
Z_STARS = -20
Z_GRID = -10
Z_ENTITIES = 0
Z_POWERUPS = 3
Z_PLAYER = 5
Z_HUD = 1000

FPS = 60
TICK_MS = 1000 // FPS

PLAYER_Y = SCENE_H - 2 * TILE
PLAYER_COOLDOWN_MS = 150
PLAYER_MAX_HP = 100
PLAYER_LIVES = 3
PLAYER_INVULN_MS = 2000

POWERUP_RAPID_FIRE_DURATION_MS = 8000
POWERUP_SHIELD_DURATION_MS = 8000
MIN_POWERUP_SPAWN_MS = 8000

POWERUP_SPAWN_MS = 12000
POWERUP_SPEED = 2.0

BULLET_SPEED = 14.0
BULLET_W_CELLS = 1
BULLET_H_CELLS = 3

AST_MIN_SPEED = 0.5
AST_MAX_SPEED = 1.5
AST_LEAK_DMG_DEFAULT = 0
AST_SCORE_SMALL = 30
AST_SCORE_MED = 20
AST_SCORE_LARGE = 10

MINE_SPEED = 0.7
MINE_SINE_AMPL = 12.0
MINE_SINE_FREQ = 0.03

PLANET_SPEED_MIN = 0.1
PLANET_SPEED_MAX = 0.4
PLANET_SPAWN_CHANCE = 350

EXP_FRAMES = 14
EXP_DEBRIS = 12
SHAKE_MS = 100
SHAKE_INTENSITY = 6.0

INIT_AST_SPAWN_MS = 2800
INIT_MINE_SPAWN_MS = 6000

DIFF_STEP_PERIOD_MS = 15000