# echotext/constants.py
# Defaults shared by the encoder and decoder of every codec generation

DEFAULT_TEXT: str = ""
DEFAULT_COLOR: str = "#000000"
DEFAULT_FONT_SIZE: int = 36
DEFAULT_FONT_FAMILY: str = "var(--font-custom), Arial, sans-serif"
DEFAULT_SPACING: int = 1
DEFAULT_REPEAT: int = 1

# Compact format flag bits
FLAG_BOLD: int = 1
FLAG_ITALIC: int = 2
FLAG_STRIKETHROUGH: int = 4

# Leading tuple positions every compact token carries
COMPACT_MIN_FIELDS: int = 4

# Upper bound on an inflated payload, guards against deflate bombs
MAX_INFLATED_BYTES: int = 64 * 1024

SHARE_PATH_PREFIX: str = "/s/"
