# --- Display ---
WIDTH = 1280                # virtual resolution; the window is scaled to fit
HEIGHT = 720
FPS = 60
WINDOW_W = 960              # initial window size (resizable)
WINDOW_H = 540

# --- Timing ---
MAX_DT = 1.0 / 30.0         # clamp stalls (tab switch, window drag, ...)
MIN_DT = 1e-4               # a zero wall-clock delta still advances the sim

# --- World / Physics ---
G_ABS = 1800.0              # gravity (px/s^2), +y is down

# --- Player ---
PLAYER_START_X = 160.0
PLAYER_START_Y = HEIGHT - 240.0
PLAYER_W = 46
PLAYER_H = 66
PLAYER_SPEED = 420.0        # horizontal speed (px/s)
JUMP_VY = -760.0            # jump impulse (px/s)
PLAYER_MAX_HEALTH = 100.0

# --- Weapon (minigun) ---
FIRE_RATE_S = 0.04          # seconds between bullets (~25/s)
FIRE_EPS = 1e-9             # float slack when the cooldown lands on zero
BULLET_SPEED = 1200.0
BULLET_RADIUS = 6.0
BULLET_LIFE_S = 1.8
BULLET_MARGIN = 50.0        # bullets are culled this far outside the world

# --- Zombies ---
ZOMBIE_W = 48
ZOMBIE_H = 64
ZOMBIE_SPEED_MIN = 20.0     # px/s, always walking left
ZOMBIE_SPEED_MAX = 90.0
ZOMBIE_HEALTH_BASE = 35
ZOMBIE_HEALTH_SPREAD = 30
TOUGH_CHANCE = 0.15         # probability of the tough-fast variant
TOUGH_SPEED_MUL = 1.4
TOUGH_HEALTH_MUL = 1.6
ZOMBIE_SNAP_TOL = 6.0       # downward band for resting on a platform top
ZOMBIE_SPAWN_OFFSET = 64.0  # spawn x = WIDTH + offset
ZOMBIE_DESPAWN_MARGIN = 120.0
HEALTH_BAR_FULL = 60.0      # health that fills a zombie's bar

# --- Combat ---
HIT_DAMAGE_MIN = 12.0       # bullet damage is uniform in [min, max)
HIT_DAMAGE_MAX = 20.0
SCORE_HIT = 1
SCORE_KILL = 5
CONTACT_DAMAGE = 12.0
KNOCKBACK_PX = 40.0
KNOCKBACK_DAMPING = 0.6

# --- Spawning ---
SPAWN_INTERVAL_MS = 1600.0
SPAWN_INTERVAL_FLOOR_MS = 550.0
SPAWN_INTERVAL_STEP_MS = 20.0
DIFFICULTY_SCORE_DIV = 60.0  # difficulty = 1 + score / DIV

# --- Level layout ---
GROUND_THICKNESS = 24
BANK_THICKNESS = 16
# (x, height above the bottom edge, width) of the floating banks
BANKS = (
    (140, 180, 260),
    (420, 280, 220),
    (720, 210, 260),
    (980, 330, 240),
    (560, 120, 200),
)
SEED_DEFAULT = 12345

# --- Debug ---
DEBUG_OVERLAY = False

# --- Colors (RGB) ---
COLOR_BG = (7, 20, 39)
COLOR_BG_BAND = (8, 32, 42)
COLOR_FG = (220, 232, 255)
COLOR_PLAT = (36, 78, 43)
COLOR_PLAT_LIP = (24, 53, 31)
COLOR_BULLET = (255, 216, 107)
COLOR_BULLET_GLOW = (255, 216, 107, 30)
COLOR_PLAYER = (79, 195, 247)
COLOR_PLAYER_HEAD = (255, 224, 178)
COLOR_BARREL = (34, 34, 34)
COLOR_MUZZLE = (153, 153, 153)
COLOR_ZOMBIE = (77, 122, 61)
COLOR_ZOMBIE_HEAD = (122, 155, 104)
COLOR_ZOMBIE_TOUGH = (110, 90, 50)
COLOR_HEALTH_BAR = (255, 107, 107)
COLOR_SHADOW = (0, 0, 0, 40)
COLOR_CROSSHAIR = (255, 255, 255, 40)
