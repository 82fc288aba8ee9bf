import time

import numpy as np
import pandas as pd


OPERATIONS = ("find", "is_contained")


def time_calls(fn, queries):
  """Call `fn(q)` for every query; return per-call wall time in nanoseconds."""
  clock = time.perf_counter_ns
  out = np.empty(len(queries), dtype=np.int64)
  for i, q in enumerate(queries):
    t0 = clock()
    fn(q)
    out[i] = clock() - t0
  return out


def run_benchmark(trie, queries, min_depth=0):
  """Time `find` and `is_contained` over `queries`.

  Returns
  -------
  pandas.DataFrame
      One row per (operation, query) with columns
      `operation, query, query_len, ns, hit`.
  """
  queries = list(queries)
  hits = {
    "find": [trie.find(q) for q in queries],
    "is_contained": [trie.is_contained(q, min_depth)[0] for q in queries],
  }
  timings = {
    "find": time_calls(trie.find, queries),
    "is_contained": time_calls(lambda q: trie.is_contained(q, min_depth), queries),
  }

  frames = []
  for op in OPERATIONS:
    frames.append(pd.DataFrame({
      "operation": op,
      "query": queries,
      "query_len": [len(q) for q in queries],
      "ns": timings[op],
      "hit": hits[op],
    }))
  return pd.concat(frames, ignore_index=True)


def summarize(frame):
  """Per-operation summary: calls, hits, mean/p50/p95/max nanoseconds."""
  rows = []
  for op, group in frame.groupby("operation", sort=False):
    ns = group["ns"].to_numpy()
    rows.append({
      "operation": op,
      "calls": len(group),
      "hits": int(group["hit"].sum()),
      "mean_ns": float(ns.mean()) if len(ns) else 0.0,
      "p50_ns": float(np.percentile(ns, 50)) if len(ns) else 0.0,
      "p95_ns": float(np.percentile(ns, 95)) if len(ns) else 0.0,
      "max_ns": int(ns.max()) if len(ns) else 0,
    })
  return pd.DataFrame(rows, columns=["operation", "calls", "hits", "mean_ns", "p50_ns", "p95_ns", "max_ns"])
