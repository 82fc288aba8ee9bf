#!/usr/bin/env python3
import random
import string


### ================= Workload Config ================= ###

DEFAULT_ALPHABET = string.ascii_lowercase
DEFAULT_MIN_LEN = 3
DEFAULT_MAX_LEN = 10
MAX_WORDS = 1_000_000

# Filler for haystacks; holds no letters, so misses never match an alphabetic dictionary
FILLER_ALPHABET = string.digits + "&@#$-_ "


class WorkLoad:
  """Seeded generator for dictionaries and query strings.

  The same seed always produces the same sequence of calls' results.
  """

  def __init__(self, seed=None):
    self.seed = seed
    self.rng = random.Random(seed)

  def words(self,
            num_words,
            min_len=DEFAULT_MIN_LEN,
            max_len=DEFAULT_MAX_LEN,
            alphabet=DEFAULT_ALPHABET,
            unique=False):
    """Return `num_words` random words with lengths in [min_len, max_len].

    - unique=False: duplicates allowed
    - unique=True: every word distinct (requires enough distinct strings)
    """
    if num_words < 1 or num_words > MAX_WORDS:
      raise ValueError(f"num_words must be between 1 and {MAX_WORDS}")
    if min_len < 1 or max_len < min_len:
      raise ValueError(f"invalid length range [{min_len}, {max_len}]")
    if not alphabet:
      raise ValueError("alphabet must not be empty")
    if unique:
      capacity = sum(len(alphabet) ** L for L in range(min_len, max_len + 1))
      if num_words > capacity:
        raise ValueError(f"only {capacity} distinct words of length {min_len}-{max_len} exist")

    rng = self.rng
    out = []
    seen = set()
    while len(out) < num_words:
      L = rng.randint(min_len, max_len)
      w = "".join(rng.choice(alphabet) for _ in range(L))
      if unique:
        if w in seen:
          continue
        seen.add(w)
      out.append(w)
    return out

  def haystacks(self, num, length, dictionary, hit_rate=0.5):
    """Return `num` query strings of `length` characters.

    Roughly `hit_rate` of them carry a word from `dictionary` planted at a
    random offset; the rest are random filler. A planted word longer than
    `length` is truncated to fit.
    """
    if num < 0:
      raise ValueError("num must be >= 0")
    if length < 1:
      raise ValueError("length must be >= 1")
    if not 0.0 <= hit_rate <= 1.0:
      raise ValueError("hit_rate must be between 0 and 1")
    dictionary = list(dictionary)
    if hit_rate > 0 and not dictionary:
      raise ValueError("dictionary must not be empty when hit_rate > 0")

    rng = self.rng
    out = []
    for _ in range(num):
      chars = [rng.choice(FILLER_ALPHABET) for _ in range(length)]
      if rng.random() < hit_rate:
        word = rng.choice(dictionary)[:length]
        start = rng.randint(0, length - len(word))
        chars[start:start + len(word)] = word
      out.append("".join(chars))
    return out
