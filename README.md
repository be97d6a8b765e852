# volray

Building blocks for a volume ray tracer that works in fixed-point numbers. The package uses only the standard library.

## Modules

- `volray.types`
  - Struct format codes for the scalar types of scenes and ray sets: `POS_T`, `DIR_T`, `DIFF_T`, `IORLOG_T`, `IOR_T`, `BRIGHTNESS_T`, `TRANSLUCENCY_T`, `SIZE_T` and `FLOAT_T`.
  - `ValueFormat` describes how a stored number maps to a real value. Its `to_double` method divides by `unit_value` in double precision. Its `to_float` method does the same in single precision.
  - Ready-made formats: `IOR_FIXED` (unit `0x10000`), `DIR_FIXED` (unit `0x100`), and the float formats `IOR_FLOAT`, `DIR_FLOAT` and `POS_FLOAT`.
  - `Options` is a dataclass of run settings. Its fields and defaults are `loglevel=0`, `minimum_gpu=0x80`, `write_instance=False` and `max_cpu=256`.
- `volray.serialize`: a binary format for values, lists and strings.
  - `write_scalar` / `read_scalar` write or read one value in a `struct` format. The format is little-endian unless it starts with its own byte-order character.
  - `write_values` / `read_values` handle lists. A list is stored as a 64-bit unsigned length prefix followed by its values. `read_values` reads exactly `count` values when `count` is given; with `count=None` it reads the prefix first.
  - `write_string` / `read_string` store a string as length-prefixed UTF-8.
  - A truncated stream, a stream that fails, a bad format or a value that does not fit raises `SerializationError`.
- `volray.harmonic`
  - `solve_harmonic(values, derivative_divisor, is_fixed, bounds, max_iterations, max_error)` relaxes the free cells of an n-dimensional grid towards a weighted harmonic function. The grid is flat, with its first dimension varying fastest.
  - Fixed cells keep their values. The input is not modified.
  - A `ValueError` is raised when the list lengths do not match the grid size.
- `volray.vector`
  - `Vec` is an immutable vector of 1, 2, 3, 4 or 8 numbers.
    - Components are read as `x y z w s t u v`.
    - It supports element-wise `+ - * /` with vectors or scalars. Integer division truncates toward zero.
    - It supports `>>` by an integer.
    - `<` is true when every component is smaller.
    - Methods: `resize`, `prod`, `dot`, `extract_low` / `extract_high`, `round_to_int` (halves go away from zero) and `format`.
  - `mulhi` gives the high 32 bits of a 32×32-bit product, for a number or for every component of a `Vec`.
  - `add_weighted`, `blend` and `add_fixed` combine two vectors.
- `volray.intmath`: integer helpers.
  - `sign`, `mulshift` (a 128-bit product shifted and truncated to 64 bits), `plus_clamp`, `divide_round_up`, `clamp` and `get_next_pow`.
  - Bounds: `sqrt_lower_bound` / `sqrt_upper_bound` and `log2_lower_bound` / `log2_upper_bound`.
  - `rand_mark` returns a copy of a list of flags with `num` distinct, seeded random positions set.
  - `PairIdInjection` numbers the unordered pairs of `n` elements. It provides `id_of`, `pair` and `row`.
- `volray.sequences`: list and permutation helpers.
  - Pairwise tests: `all_of_pairs`, `find_if_pairs` and `any_of_pairs`.
  - Copying and filtering: `transpose`, `copy_elements`, `remove_if_index`, `copy_if_index` and `assign_elements`.
  - Permutations: `permutate_to_indices`, `permutate_from_indices`, `permutate_inverse`, `is_permutation`, `are_inverse`, `permutate_from_iter` and `permutate_cycle`.
  - Pair walks: `for_each_pair` and `for_each_pair_unordered`.
  - Other: `compose`, `starts_with`, `ends_with` and `vector_less`.
  - `OperationTimeout` is an exception for operations that run out of time.

## Example

```python
import io

from volray.harmonic import solve_harmonic
from volray.serialize import read_values, write_values
from volray.vector import Vec

values = solve_harmonic(
    [0.0, 0.0, 0.0, 1.0],
    [0.0, 0.0, 0.0, 0.0],
    [True, False, False, True],
    [4],
    1000,
    1e-12,
)

buf = io.BytesIO()
write_values(buf, values, "d")
buf.seek(0)
assert read_values(buf, "d", None) == values

print(Vec(1, 2, 3).dot(Vec(4, 5, 6)))  # 32
```

## What it does not do

This package holds the numeric and data-handling pieces only. It does not:

- trace rays through a volume;
- read or write images;
- define a scene or ray-set file layout beyond the primitive values, lists and strings above;
- provide a command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```