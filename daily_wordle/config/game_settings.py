"""
Game Configuration Constants Module

This module defines the puzzle constants and the loader for the raw
vocabulary source. Validation of the loaded entries is done by
``WordList.load`` so that every source goes through the same filter.
"""

import json
import os
from typing import Any, Final, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every puzzle word and every accepted guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily session.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORD_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_source(path: Optional[str] = None) -> List[Any]:
    """
    Load the raw vocabulary from a JSON file.

    Args:
        path: Path to a JSON array of words. Defaults to the bundled words.json.

    Returns:
        List[Any]: The raw entries, unvalidated

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed or not a JSON array
    """
    json_file_path = path or DEFAULT_WORD_FILE

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_words = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(raw_words, list):
        raise ValueError("JSON file must contain an array of words")

    return raw_words
