# Player placeholders
BYE_NAME = "BYE"
PLACEHOLDER_NAME = ""

# Setup limits (mirrors the setup dialog's spin box)
MIN_PLAYERS = 2
MAX_PLAYERS = 256
DEFAULT_NUM_PLAYERS = 14

# Round-robin pairing
MAX_PAIRING_ATTEMPTS = 1000

# Elimination phase: two trees of eight
BRACKET_SIZE = 8
BRACKET_NAMES = ("A", "B")
ELIMINATION_FIELD_SIZE = BRACKET_SIZE * len(BRACKET_NAMES)

QUARTER_FINALS = 0
SEMI_FINALS = 1
FINAL = 2

STAGE_NAMES = {
    QUARTER_FINALS: "Quarter Finals",
    SEMI_FINALS: "Semi Finals",
    FINAL: "Final",
}

PHASE_ROUND_ROBIN = "round_robin"
PHASE_ELIMINATION = "elimination"
