# dsakit

Classic data structures and algorithms, plus a few small systems of the kind
found in embedded software. These are a timer list, a timing wheel, a memory
pool, a ring buffer, a priority scheduler and a fan-control group. The code is
plain Python and needs no third-party libraries.

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

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `heapify` |
| `dsakit.conversions` | `parse_int`, `format_int`, `find_substring`, `swap_endianness` |
| `dsakit.bits` | `BitArray` |
| `dsakit.bst` | `BSTNode`, `BinarySearchTree` |
| `dsakit.heap` | `MaxHeap`, `HeapFullError`, `HeapEmptyError`, `parent`, `left_child`, `right_child` |
| `dsakit.stack` | `Stack`, `StackEmptyError` |
| `dsakit.linked_queue` | `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.hashtable` | `OpenAddressingTable`, `ChainedHashTable`, `DataItem`, `DuplicateKeyError` |
| `dsakit.ringbuffer` | `RingBuffer`, `BoundedStackBuffer`, `run_producer_consumer`, `run_parallel` |
| `dsakit.memmove` | `move_bytes`, `copy_between`, `CopyDirection` |
| `dsakit.pool` | `Pool`, `PoolSlot` |
| `dsakit.atm` | `State`, `Event`, `next_state`, `AtmMachine` |
| `dsakit.timers` | `TimerList`, `Timer`, `TimerType`, `CallbackResult`, `TimerPoolExhausted` |
| `dsakit.timer_wheel` | `TimingWheel`, `DeadlineTooFarError` |
| `dsakit.deck` | `deal_round`, `is_original_order`, `rounds_to_restore` |
| `dsakit.fan` | `FanHardware`, `Message`, `MessageType`, `default_fans`, `is_number`, `temperature_to_duty` |
| `dsakit.fan_server` | `FanGroup`, `Module`, `parse_module_count` |
| `dsakit.fan_client` | `FanClient`, `message_priority`, `parse_module_id` |
| `dsakit.miros` | `Scheduler`, `OSThread` |

## Examples

Each sort rearranges the list in place and also returns it:

```python
from dsakit.sorting import merge_sort

data = [10, 7, 8, 9, 1, 5]
merge_sort(data)          # data is now [1, 5, 7, 8, 9, 10]
```

Number conversions:

```python
from dsakit.conversions import parse_int, format_int, find_substring, swap_endianness

parse_int("1a", 16)       # 26; letters are digits only in base 16
format_int(-10, 10)       # "-10"; only base 10 shows a minus sign
find_substring("Coding made easy", "made")   # "made easy"
swap_endianness(0x12345678)                  # 0x78563412
```

A binary search tree. It keeps duplicate values:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([5, 7, 2, 3, 4, 1, 6, 8, 9])
tree.insert(17)
9 in tree                 # True
tree.delete(tree.search(1))
tree.min_value(), tree.max_value()
list(tree)                # values in ascending order
```

Bounded containers raise an error when they are full or empty. They do not
return a sentinel value:

```python
from dsakit.heap import MaxHeap, HeapEmptyError

heap = MaxHeap(10)
for value in (1, 5, 3, 2, 4, 6):
    heap.push(value)
heap.pop()                # 6

try:
    MaxHeap(1).pop()
except HeapEmptyError:
    pass
```

A memory pool can be used as a context manager. Leaving the block closes it:

```python
from dsakit.pool import Pool

with Pool(element_size=16, block_size=8) as pool:
    slot = pool.allocate()
    pool.free(slot)
```

A timing wheel:

```python
from dsakit.timer_wheel import TimingWheel

wheel = TimingWheel(granularity=1, slots=10)
wheel.install(4, lambda: print("fired"))
for _ in range(5):
    wheel.tick()
```

## Command-line tools

Pass the values 1 to N from a writer thread to a reader thread through a ring
buffer, and print each value read:

```
dsakit-ringbuffer 100
```

With `--threads K`, the tool starts K writers and K readers over a blocking
last-in first-out buffer instead.

Drive the ATM state machine by typing event numbers (0 to 4), one per line.
The tool stops at the end of input:

```
dsakit-atm
```

Count how many deal-and-gather rounds restore a deck to its original order.
Each round uses 3, 4, then 5 piles, and the pattern repeats. Add `--verbose`
to print the deck after every round:

```
dsakit-deck 52
```

## What it does not do

- The fan controller and fan client do not talk to each other over message
  queues, and they do not run as processes. `FanGroup.handle_message` takes
  `Message` objects, and `FanClient` returns the messages a module would
  send. Delivering them is up to the caller. `FanHardware` writes to no real
  register. It only remembers the PWM count it was last given.
- Nothing runs on a real clock. `TimerList.tick`, `TimingWheel.tick` and
  `Scheduler.tick` advance only when you call them.
- `Scheduler` keeps only the ready and delayed bookkeeping for prioritised
  threads. It does not run any thread's code and does not switch contexts.