"""Game configuration constants."""

# Grid dimensions
SECTOR_WIDTH = 8
SECTOR_HEIGHT = 8

# Mission clock
START_STARDATE = 1312
START_TURNS = 30

# Player ship
SHIP_NAME = "USS Enterprise"
START_ENERGY = 3000
START_SHIELDS = 1000
START_TORPEDOES = 10
START_POSITION = (4, 4)

# Enemy fleet
ENEMY_COUNT = 3
ENEMY_HULL_RANGE = (300, 550)  # [min, max) hull points

# Navigation
NAV_MIN_COST = 25
NAV_COST_PER_SECTOR = 80

# Weapons (base damage draws, [min, max))
TORPEDO_BASE_RANGE = (360, 620)
ENEMY_ATTACK_BASE_RANGE = (120, 340)

# Incoming damage multiplier while at red alert
RED_ALERT_MULTIPLIER = 0.9

# Views
CONSOLE_LOG_TAIL = 8
BROWSER_LOG_TAIL = 12
