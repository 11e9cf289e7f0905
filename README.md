# olysolve

A library of solvers for olympiad-style algorithmic problems. Each problem
lives in its own module and offers two entry points:

* `solve(...)` takes the problem's data as ordinary Python values and returns
  the answer as Python values.
* `run(text)` takes the complete problem input as one string and returns the
  complete output as a string.

Some modules also expose reusable building blocks:

* `olysolve.maxflow.MaxFlow`: a Dinic maximum-flow network with `add_edge`,
  `add_bidirectional_edge`, `copy` and `dinic(s, t)`. After `dinic` returns,
  `level` holds the BFS levels of the final residual graph; vertices at level
  `-1` lie on the sink side of a minimum cut.
* `olysolve.mst_queries.LinkCutTree`: a dynamic forest with path maxima
  (`set_value`, `link`, `cut`, `path_max`, `connected`).
* `olysolve.mst_queries.PersistentSegmentTree`: point assignment into new
  versions, with prefix sums (`change`, `prefix_sum`).
* `olysolve.tree_matching.max_matching(graph)`: maximum matching in a general
  graph given as adjacency lists; returns the matching size and, per vertex,
  whether some maximum matching leaves it unmatched.

Invalid input (out-of-range vertices, malformed lines, cycles where an order
is required) raises `ValueError` or `IndexError`.

## Installation

The package needs Python 3.10 or later and depends on `sortedcontainers`.
Install it into your environment as you would any other local project; the
`test` extra pulls in `pytest`.

## Example

```python
from olysolve.maxflow import MaxFlow
from olysolve import java_expr

network = MaxFlow(4)
network.add_edge(0, 1, 3)
network.add_edge(0, 2, 2)
network.add_edge(1, 3, 2)
network.add_edge(2, 3, 3)
print(network.dinic(0, 3))  # 4

print(java_expr.run("0\n"))  # ? / ? / ?
```

## Modules

| Module | Problem |
| --- | --- |
| `edge_threshold` | component statistics of the edges at or above a threshold |
| `grid_paths_mod` | corner value of a linear grid recurrence modulo 1000003 |
| `segment_circles` | circles on a grid touched by query segments |
| `maxflow` | Dinic maximum flow |
| `gomory_hu` | sum of pairwise minimum cuts, built from randomly chosen splits |
| `tree_matching` | extra edges usable on a tree, via general matching |
| `power_merge` | placing power-of-two tiles left or right so they merge |
| `interval_removal` | minimum cost to clear weighted intervals |
| `mst_queries` | minimum spanning forest weight over weight ranges, online |
| `flip_grid` | sorting a numbered grid with row and column reversals |
| `fib_product` | coefficients folded against Fibonacci-root polynomials |
| `equal_values` | fewest distinct values after 0..n replacements |
| `loop_orders` | dependency classes of loop variables and valid-order fraction |
| `walk_pattern` | a stretch of a grid walk whose visited cells match a shape |
| `gangsters` | busy branches and spare leaves in a rooted tree |
| `lattice_polygon` | diagonals splitting a lattice polygon into integer areas |
| `java_expr` | a straight-line program building a constant from `?` |
| `fygon` | closed form in `n` for how often a loop program reaches `lag` |
| `toposort_edges` | topological order pushed larger with at most k added edges |
| `insider` | line arrangement putting triple middles inside |
| `kebab` | counting cooking schedules modulo 10^9+7 |
| `curiosity` | shortest `s/A/B/g` substitution turning one line into another |
| `heavy_chains` | minimum cover of chains by prefix and suffix classes |
| `polynomial_expr` | right-to-left polynomial expressions modulo 10^9 |
| `lonely_area` | integral of the product of two height profiles |

## What the package does not do

There is no command-line program: nothing is installed as a command, and no
module reads standard input or writes files on its own. Pass the input text to
a module's `run` function and print what it returns.