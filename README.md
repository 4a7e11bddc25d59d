# coursekit

A small collection of classic teaching exercises: a plain Python library and
three command-line tools. It has no dependencies outside the standard library.

## Modules

- `coursekit.euclidean_vector`
  - `EuclideanVector(dimensions=1, magnitude=0.0)` creates a vector with
    `dimensions` entries, all set to `magnitude`.
    `EuclideanVector.from_iterable(values)` builds one from a sequence of
    numbers.
  - Element access: `v[i]` and `v[i] = x` raise `IndexError` when the index is
    out of range. `v.at(i)` and `v.set_at(i, x)` raise `EuclideanVectorError`
    with the message `Index i is not valid for this EuclideanVector object`.
  - `v.dimensions` and `len(v)` give the number of dimensions. `iter(v)` and
    `v.to_list()` give the magnitudes.
  - Arithmetic: `a + b`, `a - b`, `a += b` and `a -= b` work element by
    element. `a * b` between two vectors is the dot product. `v * n`, `n * v`
    and `v *= n` scale by a number. `v / n` and `v /= n` divide by a number.
    When the dimensions differ, these raise `EuclideanVectorError`
    (`Dimensions of LHS(3) and RHS(2) do not match`). Dividing by zero raises
    `Invalid vector division by 0`.
  - `v.norm()` is the Euclidean norm. `v.unit_vector()` returns the vector
    divided by its norm. Both raise `EuclideanVectorError` for a vector with no
    dimensions. `unit_vector()` also raises it when the norm is 0.
  - `v.copy()` returns an independent copy. `v.move()` hands the contents to a
    new vector and leaves `v` with 0 dimensions.
  - `==` compares dimensions and magnitudes. `str(v)` looks like `[1 2 3]`.
- `coursekit.lexicon`: `load_lexicon(path)` reads a UTF-8 file of
  whitespace-separated words into a set. It raises `LexiconError` when the file
  cannot be opened or read.
- `coursekit.word_ladder`
  - `find_ladders(start, end, lexicon)` returns every shortest ladder from
    `start` to `end`, sorted. Each step changes one letter, and every word after
    the start comes from `lexicon`. An empty list means there is no ladder.
  - `words_of_length(lexicon, length)` and `build_adjacency(words, length)` are
    the helpers `find_ladders` uses.
  - `format_path(path)` joins a ladder with spaces.
- `coursekit.factorial`: `factorial(number)` returns `number!`. Any number of
  1 or less gives 1.
- `coursekit.bookstore`
  - `BookSale(name, units_sold, price)` is a dataclass. `revenue()` returns
    units × price and caches the result. `combine(other)` adds the other sale's
    units in place and keeps this sale's price. `a + b` returns a combined copy.
    `str(sale)` looks like `3*title@$2.5 = $7.5`.
  - `read_sales(stream)` yields sales from `name units price` token triples. It
    stops at the first incomplete or malformed triple.
  - `summarize(sales)` merges each run of consecutive sales of the same title.
- `coursekit.intarray`: `IntArray(size)` is a zero-filled integer array of
  fixed size. It supports `len`, iteration and checked indexing (`IndexError`).
  `copy()` and `move()` behave as they do for vectors.
- `coursekit.stack`: `Stack` provides `push`, `pop`, `top`, `empty` and `len`.
  `pop` and `top` raise `IndexError` on an empty stack. `str(stack)` lists the
  items from bottom to top, each followed by a space.
- `coursekit.int_stack`: `IntStack` is a linked stack of integers. It provides
  `push`, `pop`, `top` and `set_top`. Iteration runs from the top down, and `in`
  tests membership.

## Example

```python
from coursekit.euclidean_vector import EuclideanVector

a = EuclideanVector.from_iterable([1, 2, 3])
b = EuclideanVector.from_iterable([2, 3, 4])
print(a + b)        # [3 5 7]
print(a * b)        # 20.0
print(a / 2)        # [0.5 1 1.5]
```

```python
from coursekit.word_ladder import find_ladders, format_path

words = {"cat", "cot", "cog", "dog"}
for ladder in find_ladders("cat", "dog", words):
    print(format_path(ladder))    # cat cot cog dog
```

## Command-line tools

- `coursekit-ladder [LEXICON]` prompts for a start word and a destination word.
  Pressing RETURN at either prompt quits. It then prints every shortest ladder,
  using the word list at `LEXICON` (default: `words.txt` in the current
  directory). If the file cannot be read, it prints the error and exits with
  status 1.
- `coursekit-factorial` prompts for a whole number and prints its factorial.
- `coursekit-bookstore` reads `title units price` triples from standard input.
  It prints one revenue line for each run of the same title, or `No data?!` on
  standard error when there is no input.

## What it does not include

No word list comes with the package. The ladder tool and `find_ladders` only
know the words you give them.

## Tests

```
pip install .[test]
pytest
```