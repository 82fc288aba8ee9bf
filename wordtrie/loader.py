"""Read word lists from disk and hand them to a `Trie`."""

import json
import logging
import os

from wordtrie.errors import WordListError

log = logging.getLogger("wordtrie")


def parse_word_list(raw, name):
  """Decode the text of a word list named `name` into a list of strings.

  A name ending in `.json` must hold a JSON array of strings. Anything else
  is newline-delimited text: lines are stripped and blank lines skipped.

  Raises
  ------
  WordListError
      If `raw` does not decode into a list of strings.
  """
  if os.path.splitext(name)[1].lower() != ".json":
    words = [w.strip() for w in raw.splitlines() if w.strip()]
    if not words:
      log.warning("Word list %s has no entries", name)
    return words

  try:
    data = json.loads(raw)
  except json.JSONDecodeError as e:
    raise WordListError(f"cannot unmarshal json in {name} into a list of strings: {e}") from e

  if not isinstance(data, list):
    raise WordListError(f"expected a json array in {name}, got {type(data).__name__}")
  for i, w in enumerate(data):
    if not isinstance(w, str):
      raise WordListError(f"entry {i} in {name} is {type(w).__name__}, not a string")
  return data


def read_word_list(path):
  """Return the ordered list of strings stored at `path`.

  See `parse_word_list` for the accepted formats.

  Raises
  ------
  WordListError
      If the file cannot be read or does not decode into a list of strings.
  """
  try:
    with open(path, "r", encoding="utf-8") as f:
      raw = f.read()
  except (OSError, UnicodeDecodeError) as e:
    raise WordListError(f"cannot read word list file {path}: {e}") from e
  return parse_word_list(raw, os.fspath(path))


def load_file(trie, path):
  """Read the word list at `path` into `trie`; return the number of entries.

  Decoding failures raise `WordListError`. Errors from `trie.load`
  (e.g. `EmptyInputError`) propagate unchanged.
  """
  words = read_word_list(path)
  trie.load(words)
  log.info("Loaded %s words from %s", f"{len(words):,}", path)
  return len(words)
