# -----------------------------
# Reaction game defaults (override per game in manifest.yaml "options")
# -----------------------------

ROUND_COUNT = 5                 # taps needed to finish a session
RELOCATE_INTERVAL_MS = 3000     # target jumps on its own this often while playing

# Target placement, as a fraction of the play area on each axis
TARGET_MIN = 0.2
TARGET_MAX = 0.8
TARGET_START = (0.5, 0.5)       # before the first relocation
