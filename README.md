# purrmart

Building blocks for Purrmart, a console shop game. The package holds the
containers that the game keeps its state in, readers that take commands
from a text stream and from save files, and the ASCII banners and menus
that the game shows.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `purrmart.art`: banners, menus and help screens. Functions such as
  `welcome_message()`, `main_menu_list()` and `work_challenge_list()` write
  to standard output. Some of them clear the screen first with an ANSI
  escape sequence. `display(text, clear, file)` writes any block of text
  to a stream, standard output by default. `clear_terminal(file)` clears
  the screen.
- `purrmart.stack`: `Stack`, a LIFO with a fixed capacity (100 by default).
  `push`, `pop` and `peek` raise `StackError` when the stack is full or
  empty. `reverse()` moves every item onto a new stack. `PurchaseRecord`
  holds the `price` and `name` of one purchase.
- `purrmart.linkedlist`: `LinkedList`, an ordered list of strings. You can
  insert and delete at either end, and `remove(value)` deletes a value.
  `at(index)` returns `None` past the end. `render()` returns the values as
  numbered lines.
- `purrmart.dynarray`: `DynamicArray`, an array of strings whose reported
  capacity starts at 10 and doubles when the array fills. `search` and `in`
  ignore case. `render()` gives `[a, b, c]`.
- `purrmart.items`: `Item` (a `name` and a `price`) and `ItemList`, the
  store catalogue. Its capacity grows in steps of 10. If no item has the
  name, `index_of(name)` returns the length of the list.
- `purrmart.cartset`: `WordSet`, a set of at most 100 words that keeps the
  order in which they were added.
- `purrmart.charmachine`: `CharReader` walks a text stream one character
  at a time, and reads the end of the stream as a newline.
  `open_save(filename, base_dir)` reads a file under `saves/`.
  `SaveWriter` writes one there and is a context manager. `save_path`
  builds the path.
- `purrmart.wordmachine`: `read_line`, `split_words`, `word_to_int`,
  `is_contained`, and `read_save_lines`, which reads a save file up to its
  first empty line. `scan(fmt, stream)` reads one line as `fmt` describes
  and returns a `ScanResult`. In `fmt`, `%c` is a word, `%d` a number and
  `%s` the whole line.
- `purrmart.requestqueue`: `RequestQueue`, a FIFO of store requests with a
  fixed capacity. `enqueue`, `dequeue`, `head` and `tail` raise
  `QueueError` when they cannot be done.
- `purrmart.users`: `User`, which has a name, a password, money, a
  `Stack` history and a `LinkedList` wishlist, and `UserList`, a list of
  up to 100 users. `UserList` raises `UserListError` when it is full or
  empty.

## Example

```python
import io

from purrmart.linkedlist import LinkedList
from purrmart.requestqueue import RequestQueue
from purrmart.wordmachine import scan

wishlist = LinkedList(["Test", "Test2"])
wishlist.insert_first("Test3")
print(list(wishlist))          # ['Test3', 'Test', 'Test2']

requests = RequestQueue(100)
requests.enqueue("halohead")
requests.enqueue("halotail")
print(requests.dequeue())      # halohead

command = scan("%c %c", io.StringIO("STORE LIST\n"))
print(command.first_word, command.second_word)   # STORE LIST
```

## What this package does not do

This package is not a playable game. It has no command to run, no game loop,
no login or registration flow, and no work challenges or mini-games. It does
not define a save-file layout either. It supplies the pieces that such a
program would be built from.