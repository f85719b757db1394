from .alphabet import ALPHABET, WORD_LENGTH
from .rules import LetterRequirement, LetterRule, does_letter_match_rule, rule_comparator, sort_rules
from .scoring import pattern_to_rules, score
from .validation import validate_guess
from .word_guess import WordGuessAndResult, WordGuessAndScore
from .word_list import WordList

__all__ = [
    "ALPHABET", "WORD_LENGTH",
    "LetterRequirement", "LetterRule", "does_letter_match_rule", "rule_comparator", "sort_rules",
    "score", "pattern_to_rules", "validate_guess",
    "WordGuessAndResult", "WordGuessAndScore", "WordList",
]
