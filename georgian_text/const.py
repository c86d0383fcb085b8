"""Constants for Georgian text transcoding."""

# Unicode Georgian (Mkhedruli) letters handled by the legacy codepage
GEORGIAN_FIRST = 0x10D0
GEORGIAN_LAST = 0x10F5

# Whole Georgian block, used for detection and reporting
GEORGIAN_BLOCK_FIRST = 0x10A0
GEORGIAN_BLOCK_LAST = 0x10FF

NUMERO_SIGN = 0x2116
NUMERO_SIGN_REPLACEMENT = 0x23  # "#"

# Legacy byte range occupied by Georgian letters
LEGACY_FIRST = 0xC0
LEGACY_LAST = 0xE5

# Distance between the first Georgian letter and the first legacy byte
LEGACY_DELTA = GEORGIAN_FIRST - LEGACY_FIRST

# Additional letters that do not follow the banded layout
IRREGULAR_TO_LEGACY: dict[int, int] = {
    0x10F1: 0xC7,  # GEORGIAN LETTER HE
    0x10F2: 0xCE,  # GEORGIAN LETTER HIE
    0x10F3: 0xD5,  # GEORGIAN LETTER WE
    0x10F4: 0xE2,  # GEORGIAN LETTER HAR
    0x10F5: 0xE5,  # GEORGIAN LETTER HOE
}
LEGACY_TO_IRREGULAR: dict[int, int] = {v: k for k, v in IRREGULAR_TO_LEGACY.items()}

# (first codepoint, last codepoint, offset) for codepoint -> byte
ENCODE_BANDS: tuple[tuple[int, int, int], ...] = (
    (0x10D0, 0x10D6, 4112),
    (0x10D7, 0x10DC, 4111),
    (0x10DD, 0x10E2, 4110),
    (0x10E3, 0x10EE, 4109),
    (0x10EF, 0x10F0, 4108),
)

# (first byte, last byte, skipped slots) for byte -> codepoint
DECODE_BANDS: tuple[tuple[int, int, int], ...] = (
    (0xC0, 0xC6, 0),
    (0xC8, 0xCD, 1),
    (0xCF, 0xD4, 2),
    (0xD6, 0xE1, 3),
    (0xE3, 0xE4, 4),
)

MAX_CODE_UNIT = 0xFFFF

# Codec registry names
CODEC_NAME = "georgian_ascii"
CODEC_ALIASES: tuple[str, ...] = ("georgian-ascii", "ka_ascii", "ka-ascii")

# convert() targets
TARGET_LEGACY = "legacy"
TARGET_UNICODE = "unicode"
TARGET_LATIN = "latin"
TARGET_CHOICES: list[str] = [TARGET_LEGACY, TARGET_UNICODE, TARGET_LATIN]

# convert() options
CONF_CAPITALIZE_FIRST = "capitalize_first"
CONF_MAX_LENGTH = "max_length"

# Default values
DEFAULT_CAPITALIZE_FIRST = True
