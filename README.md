# algokit

A collection of classic algorithms and data-structure routines, written as
plain Python functions with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                    | Contents |
|---------------------------|----------|
| `algokit.sorting`         | `bubble_sort`, `exchange_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `selection_sort`, `counting_sort`, `cycle_sort`, `count_inversions` |
| `algokit.searching`       | `linear_search`, `binary_search`, `contains_sorted`, `lps_table`, `kmp_search`, `two_sum`, `three_sum` |
| `algokit.text`            | `reverse_words`, `reverse_string`, `is_anagram`, `is_balanced`, `is_valid_brackets`, `minimum_ternary_string` |
| `algokit.number_theory`   | `binary_to_decimal`, `decimal_to_binary`, `is_palindrome_number`, `is_perfect_number`, `prime_factors`, `fibonacci`, `fibonacci_series`, `reverse_digits`, `quotient_remainder`, `cyclic_swap`, `calculate` |
| `algokit.checksum`        | `ones_complement_sum`, `checksum`, and the `main` entry point of `algokit-checksum` |
| `algokit.matrix`          | `transpose`, `to_sparse`, `is_valid_placement`, `solve_sudoku`, `build_quad_tree`, `QuadNode` |
| `algokit.arrays`          | `min_jumps`, `knapsack`, `min_platforms`, `stock_spans`, `avoid_flood`, `furthest_building`, `trapped_water` |
| `algokit.patterns`        | `triangle`, `reverse_triangle`, and the `main` entry point of `algokit-patterns` |
| `algokit.linked_list`     | `ListNode`, `from_iterable`, `to_list`, `push`, `delete_value`, `merge_sorted`, `insertion_sort_list`, `rotate_right` |
| `algokit.stack_sort`      | `sorted_insert`, `sort_stack` |
| `algokit.trees`           | `TreeNode`, `max_depth`, `is_balanced` |
| `algokit.graphs`          | `kruskal_mst_weight`, `transpose_graph` |

The sorting functions accept any iterable and return a new ascending list;
they never modify their input. Search functions that look for a single item
raise `ValueError` when it is absent.

## Examples

```python
from algokit.number_theory import binary_to_decimal, decimal_to_binary
from algokit.arrays import knapsack, min_platforms, stock_spans, trapped_water
from algokit.searching import kmp_search
from algokit.checksum import checksum
from algokit.linked_list import from_iterable, rotate_right, to_list

decimal_to_binary(244)          # "11110100"
binary_to_decimal(10101001)     # 169

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
min_platforms([900, 940, 950, 1100, 1500, 1800],
              [910, 1200, 1120, 1130, 1900, 2000])   # 3
stock_spans([10, 4, 5, 90, 120, 80])         # [1, 1, 2, 4, 5, 1]
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6

kmp_search("ABABCABAB", "ABABDABACDABABCABAB")  # [10]

checksum(["0001", "0010"])      # [1, 1, 0, 0]

head = from_iterable([1, 2, 3, 4, 5])
to_list(rotate_right(head, 2))  # [4, 5, 1, 2, 3]
```

## Command-line tools

Two commands are installed with the package.

### algokit-checksum

Reads whitespace-separated bits from standard input, splits them into
equal-width words, and prints their one's-complement sum (under
"the final result") followed by its complement (under "compliment"):

```
echo "1 0 0 1 1 0 0 1  1 1 1 0 0 0 1 0  0 0 1 0 0 1 0 0  1 0 0 0 0 1 0 0" | algokit-checksum
```

Options:

- `--words N` — number of words (default 4)
- `--width N` — bits per word (default 8)
- `-o FILE`, `--output FILE` — write the report to a file instead of standard output

Exactly `words × width` bits must be given, each 0 or 1.

### algokit-patterns

Prompts for a number of lines and a shape (0 for an upright triangle,
1 for a reversed one), prints the star triangle, and asks whether to go on;
entering 0 ends the session:

```
algokit-patterns
```