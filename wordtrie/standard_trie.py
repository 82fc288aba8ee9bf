"""
Standard Trie (character-per-edge) with substring containment checks.

This module provides the case-insensitive dictionary trie used for fast
membership and containment tests against a word list (denylists, term lists).
Per-query cost stays near O(len(query)) regardless of dictionary size.
Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts (`children=None`
  until the first child is added).
- **Normalization at the boundary:** every string handed to a `Trie` is passed
  through the trie's `normalize` callable first (default: `str.lower`). Storage
  and matching both operate on the normalized text.
- **Iterative traversals:** All traversals are iterative (no recursion), avoiding
  Python recursion limits and extra call overhead.
- **Literal bookkeeping by default:** `count()` is a counter maintained by `add` and
  `delete`, not recomputed from the tree. See "Modes" below.


Classes
-------
TrieNode
    Minimal node holding `children` (dict[str, TrieNode] or None) and `is_terminal`.
Trie
    Public API for add, load, find, is_contained, delete, count and structural stats.


Complexity (typical)
--------------------
- add / find / delete: O(L)
- is_contained: O(n * d) where d is the deepest walk from any offset; O(n^2) worst case
- enumerate prefix: O(L + K * avg_suffix_length), where K is number of results yielded


Modes
-----
- **Default (literal):** `add` always increments the count, even for an entry that is
  already stored. `delete` clears the terminal flag of whatever node the walk reaches
  and always decrements the count, even when that node was only a prefix. Nodes are
  never removed, so cleared leaves stay allocated as dead weight.
- **strict=True:** `add` raises `DuplicateEntryError` for a stored entry and `delete`
  raises `NotTerminalError` for a non-entry prefix; the count is left unchanged in
  both cases, so `count() == count_terminals()` always holds.
- **prune=True:** after a successful delete, nodes that are neither terminal nor
  have children are removed upward along the walked path.
    """

import logging

from wordtrie.errors import (DuplicateEntryError, EmptyInputError,
                             NotFoundError, NotTerminalError)

log = logging.getLogger("wordtrie")


class TrieNode:
  __slots__ = ("children", "is_terminal")

  def __init__(self):
    self.children = None
    self.is_terminal = False

  def child(self, ch):
    children = self.children
    return None if children is None else children.get(ch)


class Trie:
  __slots__ = ("root", "normalize", "strict", "prune", "_count")

  def __init__(self, normalize=str.lower, strict=False, prune=False):
    self.root = TrieNode()
    self.normalize = normalize
    self.strict = strict
    self.prune = prune
    self._count = 0

  def _walk(self, chars):
    """Return the node at the end of `chars` (already normalized), or None."""
    node = self.root
    for ch in chars:
      node = node.child(ch)
      if node is None:
        return None
    return node


  def add(self, word):
    """Insert a single word into the trie.

    Parameters
    ----------
    word : str
        Word to insert. It is normalized before insertion.

    Raises
    ------
    DuplicateEntryError
        In strict mode, when `word` is already a stored entry.

    Notes
    -----
    - Lazily creates the `children` dict only when a node gets its first child.
    - Marks the final node's `is_terminal=True`, whether or not that node
      already has children from a longer word. Insertion order therefore
      never changes the resulting tree.
    - Adding "" marks the root terminal; `find("")` is still False.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    chars = self.normalize(word)
    node = self.root

    for ch in chars:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
            node.children = {ch: nxt}
        else:
            children[ch] = nxt
      node = nxt

    if self.strict and node.is_terminal:
      raise DuplicateEntryError(chars)
    node.is_terminal = True
    self._count += 1


  def load(self, words):
    """Add every string of `words`, in order.

    Parameters
    ----------
    words : Iterable[str]
        Entries to add. Consumed once.

    Raises
    ------
    EmptyInputError
        If `words` yields nothing. Nothing is added.
    TrieError
        The first error raised by `add`; entries before it stay added.
    TypeError
        If `words` is a single str rather than a sequence of them.
    """
    if isinstance(words, str):
      raise TypeError("load expects a sequence of strings, not a single str")
    words = list(words)
    if not words:
      raise EmptyInputError()

    for w in words:
      self.add(w)
    log.debug("Loaded %d entries, count is now %d", len(words), self._count)


  def find(self, s):
    """Return True iff `s` (normalized) is a stored entry.

    An empty input has nothing to consume and is never found.
    """
    chars = self.normalize(s)
    if not chars:
      return False
    node = self._walk(chars)
    return node is not None and node.is_terminal


  def is_contained(self, s, min_depth=0):
    """Check whether any stored entry occurs as a substring of `s`.

    Parameters
    ----------
    s : str
        Text to scan. It is normalized before scanning.
    min_depth : int, default=0
        Number of characters consumed from each start offset before the
        terminal check starts firing. The first check happens on the node
        reached after `min_depth + 1` characters, so entries shorter than
        that are never reported. 0 checks after every character.

    Returns
    -------
    tuple[bool, str]
        `(True, entry)` for the first hit, where `entry` is the normalized
        matched text; `(False, "")` otherwise.

    Notes
    -----
    Start offsets are scanned left to right and each walk returns on the
    first terminal node it is allowed to check. The left-most match wins,
    and among matches at the same offset the shortest one wins.
    """
    if min_depth < 0:
      raise ValueError(f"min_depth must be >= 0, got {min_depth}")

    chars = self.normalize(s)
    n = len(chars)
    root = self.root

    for i in range(n):
      node = root
      depth = min_depth
      for j in range(i, n):
        node = node.child(chars[j])
        if node is None:
          break
        if depth == 0:
          if node.is_terminal:
            return True, chars[i:j + 1]
        else:
          depth -= 1
    return False, ""


  def delete(self, s):
    """Delete a single entry from the trie.

    Parameters
    ----------
    s : str
        Entry to delete. It is normalized first.

    Raises
    ------
    NotFoundError
        When the walk falls off the tree before `s` is exhausted. The count
        is left unchanged.
    NotTerminalError
        In strict mode, when the walk completes on a node that is not a
        stored entry.

    Notes
    -----
    Outside strict mode, reaching the end of the walk always counts as a
    success: the terminal flag is cleared (even if already clear) and the
    count is decremented. With `prune=True` the now-empty nodes along the
    path are removed until reaching a terminal node or a node with
    remaining children.
    """
    chars = self.normalize(s)

    path_nodes = [self.root]
    node = self.root
    for ch in chars:
      node = node.child(ch)
      if node is None:
        log.debug("delete miss for %r", chars)
        raise NotFoundError(chars)
      path_nodes.append(node)

    if self.strict and not node.is_terminal:
      raise NotTerminalError(chars)

    node.is_terminal = False
    self._count -= 1

    if self.prune:
      self._prune_path(path_nodes, chars)


  def _prune_path(self, path_nodes, chars):
    idx = len(path_nodes) - 1
    while idx > 0:
      cur = path_nodes[idx]
      if cur.is_terminal:
        break
      if cur.children:
        break

      parent = path_nodes[idx - 1]
      parent.children.pop(chars[idx - 1], None)
      if len(parent.children) == 0:
        parent.children = None
      idx -= 1


  def count(self):
    """Return the bookkeeping counter maintained by `add` and `delete`."""
    return self._count


  def prefix_search(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing.

    Parameters
    ----------
    prefix : str
        Prefix to locate. It is normalized first.

    Returns
    -------
    TrieNode | None
        Node corresponding to the full prefix (may be terminal or not), else None.
    """
    return self._walk(self.normalize(prefix))


  def enumerate_prefix(self, prefix, k=None):
    """Yield stored entries that start with `prefix` using an iterative DFS.

    Parameters
    ----------
    prefix : str
        The prefix to enumerate from. Use "" to export the entire trie.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.

    Yields
    ------
    str
        Entries found under the prefix (normalized form), in child insertion order.
    """
    start = self.normalize(prefix)
    node = self._walk(start)
    if node is None or (k is not None and k <= 0):
      return

    remaining = k
    # each entry carries the full text of its path; children pushed reversed
    # so they pop in insertion order
    pending = [(start, node)]
    while pending:
      text, cur = pending.pop()
      if cur.is_terminal:
        yield text
        if remaining is not None:
          remaining -= 1
          if remaining == 0:
            return
      if cur.children:
        pending.extend((text + ch, child) for ch, child in reversed(list(cur.children.items())))


  def count_terminals(self):
    """Return the number of terminal nodes actually present in the tree.

    Unlike `count()`, this is recomputed from the tree on every call.

    Complexity
    ----------
    O(#nodes) time, O(depth) extra space.
    """
    total = 0
    stack = [self.root]
    while stack:
      node = stack.pop()
      if node.is_terminal:
        total += 1
      if node.children:
        stack.extend(node.children.values())
    return total


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only:
        `sum(len(children)) / (# internal nodes)`.

    Returns
    -------
    int | float
        Total nodes (int) or average branching factor (float).
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
