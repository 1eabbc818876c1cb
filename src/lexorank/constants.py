"""
Shared constants for lexorank.
"""

# Position alphabet: visible ASCII plus space, inclusive bounds
MIN_CHAR_CODE = 32   # ' '
MAX_CHAR_CODE = 126  # '~'

# Environment variable selecting the default ranking strategy
STRATEGY_ENV_VAR = "LEXORANK_STRATEGY"
