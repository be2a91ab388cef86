"""
Deterministic transformation rules.

This file exists to make the limits explicit and enforceable.
"""

FIELD_DELIMITER = "\t"
VALUE_DELIMITER = ":"

# Printable ASCII, both bounds inclusive. Tab is the only other permitted character.
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

# normalize
MAX_COLUMNS = 5
MAX_CELL_LENGTH = 10_000
MAX_VALUES_PER_CELL = 10

# group
GROUP_COLUMNS = 2
MAX_GROUP_ROWS = 1000
MAX_KEY_LENGTH = 100
MAX_VALUE_LENGTH = 100
MAX_VALUES_PER_KEY = 10
