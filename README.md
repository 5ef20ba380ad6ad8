# scratchpad

A collection of small, self-contained programs for learning and experimenting.
Each module can be imported as a library and also has a command. No third-party
libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What's inside

| Module | What it does | Command |
| --- | --- | --- |
| `scratchpad.sorting` | `merge_sort`, `quicksort`, `parallel_merge_sort`, `top_down_merge_sort`, and `insertion_sort`, `selection_sort`, `bubble_sort` (each with `descending=`); all return a sorted copy. `benchmark` times the top-down merge sort | `scratchpad-sort` |
| `scratchpad.subsetsum` | `solve` finds a subset with a given sum by brute force; `parse_cases` reads the problem format; `generate_input` writes random problems | `scratchpad-subset-sum`, `scratchpad-subset-sum-gen` |
| `scratchpad.subsequence` | `is_subsequence(text, pattern)` | `scratchpad-subsequence` |
| `scratchpad.tree` | `Node`, `level_order`, `invert_tree`, `build_sample_tree` | `scratchpad-tree` |
| `scratchpad.raytrace` | `Vec3`, `Ray`, `Sphere`, `lerp`, `render` and `write_ppm`: renders a sphere over a sky gradient as a plain-text PPM image | `scratchpad-raytrace` |
| `scratchpad.tga` | `TgaHeader`, `TgaImage`, `make_header`, `solid_image`: writes uncompressed 24-bit TGA images | `scratchpad-tga` |
| `scratchpad.bits` | `set_bit`, `clear_bit`, `toggle_bit` on 64-bit fields, and `flip_float_sign` on a single-precision float | `scratchpad-bits` |
| `scratchpad.option` | `non_negative` truncates a number toward zero and returns it, or `None` if it is negative | `scratchpad-option` |
| `scratchpad.dispatch` | `Animal`, `Cat`, `Dog` with `speak()`, and `serialize_cstring`, `serialize_number`, `serialize_animal` | `scratchpad-dispatch` |
| `scratchpad.repl` | `read_lines`, `evaluate`, `run`: a prompt loop that runs an external command once for every line read | `scratchpad-repl` |
| `scratchpad.search` | `search(values, key)` returns the index of the first match, or `None` | `scratchpad-search` |

## Using the library

```python
from scratchpad.sorting import merge_sort, quicksort, insertion_sort
from scratchpad.subsequence import is_subsequence
from scratchpad.subsetsum import solve
from scratchpad.tree import build_sample_tree, invert_tree, level_order

is_subsequence("abcde", "ace")   # True
is_subsequence("abcde", "aec")   # False

merge_sort([5, 3, 9, 1])                       # [1, 3, 5, 9]
quicksort([5, 3, 9, 1])                        # [1, 3, 5, 9]
insertion_sort([5, 3, 9, 1], descending=True)  # [9, 5, 3, 1]

solve([3, 34, 4, 12, 5, 2], 9)   # [4, 5]
solve([1, 2], 10)                # None

root = build_sample_tree()
level_order(root)   # [99, 1, 2, 3, 4, 5, 6]
invert_tree(root)
level_order(root)   # [99, 2, 1, 4, 3, 6, 5]
```

`solve` tries subsets in bitmask order (bit `j` selects the `j`-th value) and
returns the first whose sum matches, with the elements in their original order.
`invert_tree` swaps values between siblings wherever a node has both children;
the shape of the tree stays the same.

Rendering an image and saving it:

```python
import sys
from scratchpad.raytrace import render, write_ppm

pixels = render(640, 480)
write_ppm(pixels, 640, 480, sys.stdout)
```

Writing a TGA file:

```python
from scratchpad.tga import solid_image

with open("red.tga", "wb") as handle:
    solid_image(64, 32, (255, 0, 0)).write(handle)
```

## Using the commands

Render the scene as a PPM image (progress goes to standard error;
`--width` and `--height` default to 640 and 480):

```
scratchpad-raytrace > sphere.ppm
```

Generate random subset-sum cases and solve them. Each case prints the subset
as `[ a b ]`, or `Not possible`; `--seed` makes the generator repeatable:

```
scratchpad-subset-sum-gen --seed 1 > cases.txt
scratchpad-subset-sum cases.txt
```

Show the sample tree in level order before and after inversion:

```
scratchpad-tree
```

Write a solid green TGA image (`--output`, default `testfile.tga`; `--width`
and `--height`, default 400):

```
scratchpad-tga
```

Time the merge sort on random, already sorted and reversed input of each size,
print the timings and write them to `--output` (default `mergeSort.dat`). The
default sizes go up to 2,000,000, which takes a while; pass smaller ones with
`--sizes`:

```
scratchpad-sort --sizes 10000 20000 --seed 1
```

Other commands:

```
scratchpad-bits 1.5          # flip the float sign bit; default value -234.1
scratchpad-option 3.7        # prints 3.000000; negative input prints an error message
scratchpad-subsequence       # checks a fixed set of sample strings
scratchpad-dispatch          # a cat and a dog speak, then an animal is serialised
scratchpad-search --key 4    # searches seeded random values in [0, 100]
scratchpad-repl echo hi      # runs "echo hi" for every line typed
```

`scratchpad-repl` runs `/usr/bin/nvim repl.c` for each line when no command is
given, so pass a command unless that editor and file are what you want.

## What it does not do

- The benchmark measures elapsed time only; it reads no hardware counters.
- The ray caster renders one fixed scene; there is no scene description input.
- TGA support is for writing only; images cannot be read back.