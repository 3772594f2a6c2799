# contestlib

Algorithms and data structures of the kind used in programming contests,
written in plain Python with no third-party dependencies.

## Modules

| Module | What it holds |
| --- | --- |
| `contestlib.number_theory` | `sieve`, `smallest_prime_factors`, `extended_euclid`, `mod`, `modmul`, `modpow`, `mod_inverse`, `chinese_remainder_theorem`, `linear_diophantine`, `modular_linear_equation_solver`, `is_prime` (deterministic Miller-Rabin below 2**64), `pollard_rho`, `factorize`, `partition_count` |
| `contestlib.simplex` | two-phase simplex for *maximize c.x subject to A x <= b, x >= 0*: `LPSolver`, `solve_lp`; raises `InfeasibleError` or `UnboundedError` |
| `contestlib.transforms` | recursive complex `fft`, number-theoretic `ntt` modulo `NTT_MODULUS`, `multiply_polynomials` |
| `contestlib.dates` | `date_to_int`, `int_to_date`, `int_to_day` on Julian day numbers |
| `contestlib.kmp` | `KMP` with `advance`, `find_all` (end indices of matches) and `min_factor` |
| `contestlib.z_function` | `z_function` |
| `contestlib.suffix_automaton` | `SuffixAutomaton` with `extend`, `contains`, `distinct_substrings` |
| `contestlib.ukkonen` | `SlidingSuffixTree`: a suffix tree over a window that grows with `extend` and shrinks with `trim`; `distinct_substrings` counts the window's substrings |
| `contestlib.geometry` | `Point` and plane routines: `dot`, `cross`, rotations, projections, `segments_intersect`, `compute_line_intersection`, `compute_circle_center`, `point_in_polygon`, `point_on_polygon`, circle intersections, `compute_area`, `compute_centroid`, `is_simple` |
| `contestlib.line_container` | `MaximumHull`: upper envelope of lines with `insert_line` and `evaluate` |
| `contestlib.kd_tree` | `KDTree`: largest weight of a point inside a box via `max_in_box` |
| `contestlib.hash_table` | `CountingHashTable`: linear-probing counter of unsigned 64-bit keys |
| `contestlib.union_find` | `UnionFind` with `find` and `merge` |
| `contestlib.reversible_sequence` | `ReversibleSequence`: the sequence 1..n with range `reverse`, indexing and `to_list` |
| `contestlib.link_cut_tree` | `LinkCutTree`: `link`, `cut`, `connected`, `find_root`, `set_value`, path-sum `query` |
| `contestlib.ordered_set` | `OrderedSet` with `find_by_order` and `order_of_key` |
| `contestlib.heavy_light` | `HeavyLightDecomposition` with `query_path` and `path_sum` |
| `contestlib.centroid` | `decompose` into a list of `Split` records |
| `contestlib.virtual_tree` | `VirtualTreeBuilder` with `lca` and `build` |
| `contestlib.graph_order` | `topological_sort`, `eulerian_circuit`, `strongly_connected_components`, `biconnected_components` |
| `contestlib.matching` | `hopcroft_karp`, `kuhn_munkres` (maximum-weight assignment), `stoer_wagner` (global minimum cut) |
| `contestlib.combinatorics` | `next_permutation`, `all_permutations`, `all_subsets` |

Errors are raised as exceptions (`ValueError`, `IndexError` and the
simplex-specific errors) rather than returned as special values.

## Examples

```python
from contestlib.number_theory import chinese_remainder_theorem, is_prime
from contestlib.simplex import solve_lp
from contestlib.dates import date_to_int, int_to_date, int_to_day
from contestlib.kmp import KMP

chinese_remainder_theorem(6, 5, 10, 1)   # (11, 30)
is_prime(1_000_000_007)                  # True

value, x = solve_lp(
    [[6, -1, 0], [-1, -5, 0], [1, 5, 1], [-1, -5, -1]],
    [10, -4, 5, -5],
    [1, -1, 0],
)                                        # value ~ 1.29032

jd = date_to_int(3, 24, 2004)            # 2453089
int_to_date(jd)                          # (3, 24, 2004)
int_to_day(jd)                           # "Wed"

KMP("aba").find_all("ababa")             # [2, 4]
```

## What is not included

The package has no multi-pattern (Aho-Corasick) matcher, no suffix-array or
LCP-array construction, no order-statistics splay tree or treap with range
sums, and no maximum-flow or minimum-cost-flow solvers. For bipartite
matching use `contestlib.matching`; for substring questions use
`SuffixAutomaton`, `SlidingSuffixTree` or `z_function`.

The package is a library only; it installs no command-line programs.

## Running the tests

```
pip install -e ".[test]"
pytest
```