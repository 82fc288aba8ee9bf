"""Case-insensitive dictionary trie with substring containment checks."""

from wordtrie.errors import (DuplicateEntryError, EmptyInputError,
                             NotFoundError, NotTerminalError, TrieError,
                             WordListError)
from wordtrie.loader import load_file, parse_word_list, read_word_list
from wordtrie.standard_trie import Trie, TrieNode

__all__ = [
    "DuplicateEntryError",
    "EmptyInputError",
    "NotFoundError",
    "NotTerminalError",
    "Trie",
    "TrieError",
    "TrieNode",
    "WordListError",
    "load_file",
    "parse_word_list",
    "read_word_list",
]
