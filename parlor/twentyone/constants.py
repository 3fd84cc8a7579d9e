"""21-specific constants."""

MAX_HAND_VALUE = 21
DEALER_HIT_UNTIL = 17

# Difference between an ace counted high (11) and low (1)
ACE_ADJUSTMENT = 10

HIT = "h"
STAY = "s"
