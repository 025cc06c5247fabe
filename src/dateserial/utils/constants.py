"""dateserial Constants and Default Values."""

# Largest value of a signed 64-bit integer
INT64_MAX: int = 9_223_372_036_854_775_807

# Decimal digits available to an encoded serial (len(str(INT64_MAX)))
MAX_DIGITS: int = 19

# Width the filler and serial are zero-padded to in fixed padding mode
PAD_WIDTH: int = 4

# Facade defaults
DEFAULT_FILLER: int = 1100
DEFAULT_MIN_SERIAL: int = 1
DEFAULT_MAX_SERIAL: int = 999

# Date portion widths
SHORT_YEAR_WIDTH: int = 2
FULL_YEAR_WIDTH: int = 4
