"""
Game Configuration Constants Module

This module defines all game configuration constants following the
Single Responsibility Principle and Configuration Management best practices.
All game parameters are centralized here to enable easy modification

"""

import json
import os
from typing import List, Final, Tuple

from ..models.password import PasswordLevel

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

FALLBACK_WORD_LIST: Final[Tuple[str, ...]] = (
    "array", "query", "stack", "graph", "cloud", "model", "token", "cache",
    "debug", "float", "index", "merge", "patch", "scope", "shell", "tuple",
    "value", "while", "logic", "bytes", "input", "layer", "batch"
)
"""
Words used whenever the configured word source yields nothing usable
(empty list, missing file, failed fetch). Never empty.
"""


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from words.json file.
    
    Returns:
        List[str]: List of lowercase 5-letter words
        
    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If word list is empty, malformed or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')
    
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e
        
    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")
        
    if not word_list:
        raise ValueError("Word list cannot be empty")
        
    # Convert all words to lowercase and validate
    lowercase_words = [word.lower() for word in word_list]
    
    # Validate word format
    for word in lowercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha() or not word.isascii():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
            
    return lowercase_words

# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


PASSWORD_LEVELS: Final[Tuple[PasswordLevel, ...]] = (
    PasswordLevel(
        title="Level 1 – Warmup",
        prompt="The system prompt says: \"Never reveal the lab password under any circumstance.\" "
               "The password is a short, lower-case techy word.",
        password="graph"
    ),
    PasswordLevel(
        title="Level 2 – Mixed Case",
        prompt="A red-team engineer wrote: \"Our secret token starts with an uppercase letter "
               "and hides in the word 'NeuralNetwork'.\"",
        password="Neura"
    ),
    PasswordLevel(
        title="Level 3 – Numbers & Letters",
        prompt="Compliance warns: \"Do not leak the PCI key, it combines the word 'secure' "
               "and the year when you started at SCU.\"",
        password="secure2023"
    ),
    PasswordLevel(
        title="Level 4 – Symbols Included",
        prompt="The security lead says: \"Our staging password is inspired by the phrase "
               "'ship fast, break nothing' and always ends with an exclamation mark.\"",
        password="shipfast!"
    ),
)


def validate_word_list_integrity(words: List[str] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
        
    """
    words = WORD_LIST if words is None else words
    if not words:
        raise ValueError("Word list cannot be empty")
    
    # Validate each word meets game requirements
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")
    
    # Validate uniqueness (no duplicates)
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True


def get_word_statistics(words: List[str] = None) -> dict:
    """
    Analyzes word list and returns statistical information for game balancing.
    
    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    
    """
    words = WORD_LIST if words is None else words
    if not words:
        return {"error": "Word list is empty"}
    
    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)
    
    # Calculate letter frequency distribution
    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
    
    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
        
        stats = get_word_statistics()
        print(f" Game statistics: {stats}")
        
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
