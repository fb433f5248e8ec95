# algokit

A small library of classic algorithms and data structures: array and string
utilities, lexicographic-order helpers, and three purpose-built containers.
It has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Arrays: `algokit.arrays`

```python
from algokit.arrays import (
    two_sum, contains_duplicate, product_except_self,
    top_k_frequent, construct_2d_array, can_arrange,
)

two_sum([2, 7, 11, 15], 9)              # (0, 1)
two_sum([1, 2], 10)                     # None
contains_duplicate([1, 2, 3, 1])        # True
product_except_self([1, 2, 3, 4])       # [24, 12, 8, 6]
top_k_frequent([1, 1, 1, 2, 2, 3], 2)   # [1, 2]
construct_2d_array([1, 2, 3, 4], 2, 2)  # [[1, 2], [3, 4]]
construct_2d_array([1, 2, 3], 2, 2)     # []
can_arrange([1, 2, 3, 4, 5, 10, 6, 7, 8, 9], 5)  # True
```

- `two_sum` returns a tuple of two indices, or `None` when no pair adds up
  to the target.
- `top_k_frequent` gathers whole frequency groups, highest first, until it
  has at least `k` elements, so ties in the last group can give more than
  `k` elements. A `k` of zero or less gives an empty list.
- `construct_2d_array` returns an empty list when `len(original) != m * n`.
- `can_arrange` raises `ValueError` when `k` is not positive; negative
  numbers are paired by their non-negative remainder.

## Strings: `algokit.strings`

```python
from algokit.strings import group_anagrams, is_anagram, encode, decode, min_extra_chars

group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
# [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]
is_anagram("anagram", "naaragm")                 # True
encode(["lint", "code"])                         # "4#lint4#code"
decode(encode(["lint", "code", "love", "you"]))  # ["lint", "code", "love", "you"]
min_extra_chars("leetscode", ["leet", "code", "leetcode"])  # 1
```

`group_anagrams` keeps groups in the order their first word appears, and
words within a group in input order. `encode` writes each string as its
length, a `#`, then the string itself, so any text, including `#`, survives
the round trip. `decode` raises `ValueError` when a length prefix is missing,
not a number, or negative.

## Lexical order: `algokit.lexical`

```python
from algokit.lexical import lexical_order, kth_lexical_number, longest_common_prefix

lexical_order(13)             # [1, 10, 11, 12, 13, 2, 3, 4, 5, 6, 7, 8, 9]
kth_lexical_number(13, 2)     # 10
longest_common_prefix([1, 10, 100], [1000])  # 3
```

`kth_lexical_number` raises `ValueError` when `k` is outside `1..n`.
`longest_common_prefix` gives the number of leading digits shared by the best
pair of numbers, one from each input, and raises `ValueError` for negative
numbers.

## Data structures

### `algokit.allone.AllOne`

Counts string keys and reports a key with the highest or lowest count in
constant time:

```python
from algokit.allone import AllOne

counter = AllOne()
counter.inc("hello")
counter.inc("hello")
counter.inc("leet")
counter.max_key()    # "hello"
counter.min_key()    # "leet"
len(counter)         # 2
"leet" in counter    # True
counter.dec("leet")  # the key is dropped once its count reaches zero
```

`max_key` and `min_key` return `""` when nothing is counted; when several keys
share a count, the one that most recently reached it is returned. `dec`
raises `KeyError` for a key that is not present.

### `algokit.circular_deque.CircularDeque`

A deque of integers with a fixed capacity:

```python
from algokit.circular_deque import CircularDeque

dq = CircularDeque(3)
dq.insert_last(1)       # True
dq.insert_front(2)      # True
dq.front(), dq.rear()   # (2, 1)
dq.is_full()            # False
list(dq)                # [2, 1]
```

Inserting into a full deque or deleting from an empty one returns `False`
and changes nothing. `front()` and `rear()` return `-1` when the deque is
empty. `capacity` and `len()` report its size limit and current size; a
negative capacity raises `ValueError`.

### `algokit.custom_stack.CustomStack`

A bounded stack that can add a value to its bottom `k` elements in constant
time:

```python
from algokit.custom_stack import CustomStack

stack = CustomStack(3)
stack.push(1)
stack.push(2)
stack.increment(5, 100)
stack.pop()  # 102
stack.pop()  # 101
stack.pop()  # -1
```

Pushing onto a full stack is ignored, and `pop()` returns `-1` when the stack
is empty. `max_size` and `len()` report its limit and current size; a
negative `max_size` raises `ValueError`.

## What this package does not do

algokit is a library only: it installs no command-line program, and it does
not read input or print results by itself. Call its functions and classes
from your own code.