# dpgraphs

A small collection of classic dynamic-programming and graph-search routines.
It needs nothing outside the standard library.

## Sequences (`dpgraphs.sequences`)

- `longest_increasing_subsequence(values)`: the length of the longest strictly increasing subsequence. An empty input gives 0.
- `longest_common_subsequence(a, b)`: the length of the longest common subsequence. It fills the table bottom-up, one row at a time.
- `longest_common_subsequence_diagonal(a, b)`: the same result. It fills the table one anti-diagonal at a time.
- `max_subset_sum(weights, capacity)`: the largest sum of weights that does not exceed `capacity`. It returns a `SubsetSelection` with `total` and the chosen `indices`. An item is taken only when taking it gives a strictly larger total, so when totals are equal the later items are preferred. A negative capacity or a negative weight raises `ValueError`.

```python
from dpgraphs.sequences import longest_common_subsequence, max_subset_sum

longest_common_subsequence("abcde", "ace")   # 3
selection = max_subset_sum([1, 2, 3, 4, 5], 7)
selection.total                              # 7
selection.indices                            # (2, 3)
```

## Grids (`dpgraphs.grids`)

Each function takes a grid given as a sequence of equal-length rows of integers. Ragged rows raise `ValueError`.

- `max_path_sum(grid)`: the best sum of a path that ends at the bottom-right cell and moves only right or down. The path may start on any cell of the top row or of the left column.
- `max_cross_span(grid)`: the largest `k` for which some cell starts a run of `k` ones both downward and to the right.
- `largest_square(grid)`: the side length of the largest square made only of non-zero cells.

## Graphs

### `dpgraphs.components`

- `adjacency_list(node_count, edges, directed=False)` builds neighbour lists for nodes `0..node_count`. Neighbours are kept in the order their edges were given. A node outside that range raises `ValueError`.
- `components_bfs(node_count, edges)` and `components_dfs(node_count, edges)` split the undirected graph on nodes `1..node_count` into connected components. Components appear in discovery order, and each lists its nodes in the order they were visited.
- `bfs_levels(node_count, edges)` finds the breadth-first components and also records, in `levels`, each node's depth below the node where its component started.
- All three return a `ComponentReport`, which has `components`, `levels`, `count` and `sizes`.
- `format_report(report)` renders a report as text.

### `dpgraphs.cycles`

`find_directed_cycle(node_count, edges)` runs a depth-first search on the directed graph with nodes `1..node_count`. It returns a `CycleSearch` with these members:

- `cycle`: the first cycle found. It starts at the node that the closing back edge points to. If the graph has no cycle, `cycle` is empty.
- `parents`: the DFS parent of each node.
- `has_cycle`: whether a cycle was found.

### `dpgraphs.maze`

Mazes are sequences of equal-length strings in which `#` marks a wall.

- `parse_grid(lines)` turns text lines into rows. It drops whitespace and blank lines.
- `neighbours(grid, cell)` lists the open cells next to `cell`, in the order down, left, up, right.
- `search_maze(grid)` runs a breadth-first search from the `S` cell towards the `F` cell. It returns a `MazeSearch` with these members:
  - `distances`: the distance to each cell, or `-1` for cells the search never reached.
  - `visited`: which cells the search reached.
  - `ways`: the accumulated neighbour counts.
  - `parents`: the parent of each reached cell.
  - `reachable`: whether the finish can be reached.
  - `distance`: the length of the shortest route.
  - `path()`: the cells of a shortest route. It raises `ValueError` when the finish cannot be reached.
- `escape_monsters(grid)` spreads the person `A` and every monster `M` through the maze at the same time. It then looks for a border cell that the person reaches first. It returns an `Escape` with these members:
  - `escaped`.
  - `distance`.
  - `path`: the moves, spelled with `U`, `D`, `L` and `R`.

## Command line

```
dpgraphs hello
dpgraphs square [--input FILE]
```

- `hello` prints a greeting.
- `square` reads `n` followed by `n * n` integers from `FILE`, or from standard input if no file is given. It prints the side of the largest square of non-zero cells and the time the computation took, in microseconds.

## Limitations

The command line exposes only the largest-square computation. All the other routines are available only as library functions, and they take their input as Python values rather than reading files.