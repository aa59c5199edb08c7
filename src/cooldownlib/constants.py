# Identifier rules
DEFAULT_NAMESPACE = "minecraft"
MAX_KEY_LENGTH = 256

# Namespace used by AbilityCooldownSystem when keying ability cooldowns.
DEFAULT_ABILITY_NAMESPACE = "ability"

# Signed 64-bit range of LONG values (epoch seconds for expiration records)
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

# JsonFileDataContainer output
JSON_INDENT = 2
