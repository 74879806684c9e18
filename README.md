# drillbook

Solutions to well-known practice problems, written as ordinary Python
functions: pass in the problem's data as Python values and get the answer
back.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `drillbook.bronze`

- `geometry` — the `Rect` dataclass (`x1, y1, x2, y2`, with `area()`),
  `overlap_area`, `blocked_billboard`, `blocked_billboard_ii`,
  `square_pasture`, `white_sheet_visible`, `fence_painting`, `two_tables`.
- `search` — `apple_division`, `count_eight_queens`, `kayaking`,
  `maximum_distance`, `bovine_genomics`, `string_permutations` (a
  generator), `cow_tipping`.
- `simulation` — `milk_mixing`, `shell_game`, `speeding_ticket`,
  `bubble_sort`, `mad_scientist`, `block_game`, `tic_tac_toe`.
- `adhoc` — `even_more_odd`, `sleepy_cow_herding`, `sleepy_cow_sorting`,
  `associative_array`, `distinct_numbers`, `sum_of_two_values`.
- `graphs` — `grass_planting`, `milk_factory`, `great_revegetation`.

### `drillbook.silver`

- `prefix_sums` — `breed_counting`, `forest_queries`, `max_subarray_sum`,
  `painting_the_barn`, `subsequence_summing_sevens`, `static_range_queries`.
- `two_pointers` — `books`, `cellular_network`, `subarray_sum`,
  `sum_of_three`, `they_are_everywhere`.
- `sorting` — `concert_tickets`, `counting_haybales`, `movie_festival`,
  `restaurant_customers`, `room_allocation`, `stick_lengths`,
  `traffic_lights`, `lifeguards`, `cow_dance_show`, `rental_service`.
- `graphs` — `cover_it`, `fence_planning`, `flight_route_check`, `moocast`.
- `grids` — `rectangular_pasture`, `the_lazy_cow`.

Where a problem may have no answer (for example `sum_of_two_values`,
`sum_of_three`, `milk_factory`, `two_tables`, `flight_route_check`), the
function returns `None`. Malformed input, such as an empty list where data
is required or a node number out of range, raises `ValueError`.

## Examples

```python
from drillbook.bronze.search import apple_division, string_permutations
from drillbook.bronze.geometry import Rect, square_pasture
from drillbook.silver.prefix_sums import max_subarray_sum
from drillbook.silver.sorting import stick_lengths, traffic_lights

apple_division([3, 2, 7, 4, 1])                     # 1
list(string_permutations("aab"))                    # ['aab', 'aba', 'baa']
square_pasture(Rect(6, 6, 8, 8), Rect(1, 8, 4, 9))  # 49
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])       # 9
stick_lengths([2, 3, 1, 5, 2])                      # 5
traffic_lights(8, [3, 6, 2])                        # [5, 3, 3]
```

## What it does not do

The package is a library only. It has no command-line program and does
not read problem input from standard input or files, nor print answers;
parsing input into the arguments each function takes is left to the
caller.