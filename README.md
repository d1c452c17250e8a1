# algokata

A library of worked solutions to classic algorithm exercises. Each exercise is a plain Python
function: it takes ordinary Python values (integers, lists, tuples, strings) and returns the
answer as a value instead of printing it.

## Installation

```
pip install algokata
```

The only runtime dependency is `sortedcontainers`. Install `algokata[test]` to get pytest for
running the test suite.

## Contents

| Module | Functions and classes |
| --- | --- |
| `algokata.introductory` | `weird_algorithm`, `missing_number`, `repetitions`, `increasing_array`, `permutation`, `number_spiral`, `two_knights`, `two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles`, `palindrome_reorder`, `digit_query` |
| `algokata.search` | `creating_strings`, `apple_division`, `chessboard_and_queens`, `grid_paths`, `gray_code`, `tower_of_hanoi` |
| `algokata.sorting` | `distinct_numbers`, `apartments`, `ferris_wheel`, `concert_tickets`, `restaurant_customers`, `movie_festival`, `sum_of_two_values`, `maximum_subarray_sum`, `stick_lengths`, `missing_coin_sum`, `collecting_numbers`, `collecting_numbers_ii`, `playlist`, `towers`, `traffic_lights` |
| `algokata.josephus` | `josephus_i`, `josephus_ii` and `OrderStatisticTree` (a balanced tree with `insert`, `remove`, `find_by_order`, `len()`, `in` and sorted iteration) |
| `algokata.scheduling` | `array_division`, `factory_machines`, `movie_festival_ii`, `room_allocation`, `reading_books`, `tasks_and_deadlines` |
| `algokata.subarrays` | `maximum_subarray_sum_ii`, `nearest_smaller_values`, `sliding_median`, `sliding_cost`, `subarray_divisibility`, `subarray_sums_i`, `subarray_sums_ii`, `sum_of_three_values`, `sum_of_four_values` |
| `algokata.counting_dp` | `dice_combinations`, `coin_combinations_i`, `coin_combinations_ii`, `minimizing_coins`, `removing_digits`, `grid_paths`, `book_shop`, `money_sums`, `array_description` |
| `algokata.optimization_dp` | `counting_towers`, `edit_distance`, `elevator_rides`, `increasing_subsequence`, `projects`, `rectangle_cutting`, `removal_game`, `two_sets_ii` |
| `algokata.grids` | `counting_rooms`, `labyrinth`, `monsters` |
| `algokata.traversal` | `building_roads`, `message_route`, `building_teams`, `round_trip`, `round_trip_ii` |
| `algokata.shortest_paths` | `shortest_routes_i`, `shortest_routes_ii`, `high_score`, `flight_discount`, `cycle_finding`, `flight_routes`, `investigation` |
| `algokata.dags` | `course_schedule`, `longest_flight_route`, `game_routes` |
| `algokata.tours` | `knights_tour`, `hamiltonian_flights`, `de_bruijn_sequence` |
| `algokata.spanning` | `DisjointSet` (`find`, `union`, `components`, `largest`), `road_reparation`, `road_construction` |
| `algokata.components` | `strongly_connected_components`, `flight_routes_check`, `planets_and_kingdoms`, `giant_pizza`, `coin_collector` |
| `algokata.functional_graphs` | `planets_queries_i`, `planets_queries_ii`, `planets_cycles` |
| `algokata.flows` | `download_speed`, `police_chase` |
| `algokata.euler` | `mail_delivery`, `teleporters_path` |

## Example

```python
from algokata.introductory import weird_algorithm
from algokata.optimization_dp import edit_distance
from algokata.josephus import josephus_i
from algokata.traversal import message_route

weird_algorithm(3)                        # [3, 10, 5, 16, 8, 4, 2, 1]
edit_distance("LOVE", "MOVIE")            # 2
josephus_i(7)                             # [2, 4, 6, 1, 5, 3, 7]
message_route(3, [(1, 2), (2, 3)])        # [1, 2, 3]
```

## Conventions

- Graph functions take the number of vertices `n` and the edges as tuples, and number vertices,
  cities, rooms and planets from 1.
- Counts that grow large are returned modulo 10**9 + 7.
- Where an exercise has no solution, most functions return `None` (for instance
  `minimizing_coins`, `labyrinth`, `round_trip`, `course_schedule`). Unreachable targets in
  `shortest_routes_i` and `shortest_routes_ii` come back as `None` entries.
- `high_score` returns `None` when the score can grow without bound and raises `ValueError`
  when the last room cannot be reached.
- Malformed input, such as an edge outside `1..n` or a non-square grid, raises `ValueError`.

## What it does not do

The package is a library only. It has no command-line program and does not read exercise
input from standard input or write formatted output; callers pass Python values in and get
Python values back.