"""Fixed letter set and default word length."""

import string

WORD_LENGTH = 5
ALPHABET = string.ascii_uppercase
