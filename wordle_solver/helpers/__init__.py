from .alphabet import generate_alphabet_of_length, generate_alphabet_words

__all__ = ["generate_alphabet_of_length", "generate_alphabet_words"]
