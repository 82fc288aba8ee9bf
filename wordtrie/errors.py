"""Exceptions raised by the trie core and the word-list loader."""


class TrieError(Exception):
  """Base class for errors raised by `Trie` operations."""


class EmptyInputError(TrieError, ValueError):
  """`Trie.load` was handed zero entries."""

  def __init__(self, message="cannot load an empty sequence of strings"):
    super().__init__(message)


class NotFoundError(TrieError, LookupError):
  """The path for a string diverges from the tree before it is exhausted."""

  def __init__(self, word):
    self.word = word
    super().__init__(f"could not find {word!r} in the trie")


class NotTerminalError(NotFoundError):
  """Strict mode: the path exists but does not end on a stored entry."""

  def __init__(self, word):
    super().__init__(word)
    self.args = (f"{word!r} is a prefix in the trie, not a stored entry",)


class DuplicateEntryError(TrieError, ValueError):
  """Strict mode: the entry is already stored."""

  def __init__(self, word):
    self.word = word
    super().__init__(f"{word!r} is already present in the trie")


class WordListError(Exception):
  """A word list could not be read or decoded into a list of strings."""
