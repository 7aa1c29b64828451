# drillkit

A small toolbox of everyday helpers, with no third-party dependencies.

- **`drillkit.matrix`**: build matrices of random numbers (`random_matrix`, `random_number`)
  or ordered numbers (`ordered_matrix`). It can also:
  - sum rows, columns or the whole matrix (`row_sums`, `column_sums`, `matrix_sum`);
  - transpose a matrix (`transpose`) and multiply two matrices cell by cell
    (`multiply_elementwise`);
  - take the middle row or column (`middle_row`, `middle_column`);
  - render a matrix or a list of sums as text (`format_matrix`, `format_sums`).
- **`drillkit.matrix_checks`**: check and query matrices. It can:
  - compare element totals (`sums_equal`) and test two matrices for equality (`are_identical`);
  - test for identity, scalar, sparse and palindrome matrices (`is_identity`, `is_scalar`,
    `is_sparse`, `is_palindrome`);
  - count and find values (`count_value`, `contains`) and list the values two matrices share
    (`intersection`);
  - give the smallest and largest element (`matrix_min`, `matrix_max`).
- **`drillkit.sequences`**: `fibonacci(limit)` returns the first `limit` Fibonacci numbers,
  starting 1, 1, 2.
- **`drillkit.text`**: string helpers for:
  - first letters and case: `first_letters`, `upper_first_letters`, `lower_first_letters`,
    `invert_case`;
  - counting: `count_upper`, `count_lower`, `count_char` (optionally ignoring case),
    `is_vowel`, `vowels`, `count_vowels`;
  - words: `split_words` (empty pieces dropped), `count_words`, `join_words` (optionally in
    reverse), `reverse_words`;
  - trimming spaces: `ltrim`, `rtrim`, `trim`;
  - replacing: `replace_all` replaces substrings, and `replace_words` replaces whole words,
    with or without matching case;
  - `remove_punctuation`, which drops ASCII punctuation.
- **`drillkit.clients`**: the `Client` record (account number, pin code, name, phone,
  balance). Each record is stored as one delimited line. The module can:
  - load clients (`load_clients`; a missing file gives an empty list);
  - save them (`save_clients`) or append one (`append_client`);
  - look one up (`find_client`);
  - render one record as a card (`format_client_card`) or all records as a table
    (`format_client_table`).
- **`drillkit.cli`**: the `drillkit` command, plus `delete_client` and `update_client`. These two
  return a new list of clients and raise `LookupError` for an unknown account number.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library examples

```python
from drillkit.matrix import ordered_matrix, transpose, row_sums, format_matrix
from drillkit.matrix_checks import is_identity, is_palindrome
from drillkit.sequences import fibonacci
from drillkit.text import split_words, join_words, reverse_words, trim

m = ordered_matrix(3, 3)            # [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
print(format_matrix(transpose(m)))
print(row_sums(m))                  # [6, 15, 24]
print(is_identity([[1, 0, 0], [0, 1, 0], [0, 0, 1]]))   # True
print(is_palindrome([[1, 0, 1], [0, 1, 0], [0, 0, 0]]))  # True

print(fibonacci(10))                # [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]

print(split_words("  hi   there  ", " "))      # ['hi', 'there']
print(join_words(["Hi", "there"], " "))         # 'Hi there'
print(reverse_words("one two three", " "))      # 'three two one'
print(trim("   padded   ") + "|")               # 'padded|'
```

Client records:

```python
from drillkit.clients import Client, load_clients, find_client, format_client_card

client = Client.from_line("ACC-001#//#0000#//#Jane Doe#//#unlisted#//#500.4", "#//#")
print(client.to_line("#//#"))   # ACC-001#//#0000#//#Jane Doe#//#unlisted#//#500.400000

clients = load_clients("Clients_Data.txt", "#//#")
found = find_client(clients, "ACC-001")
if found is not None:
    print(format_client_card(found))
```

## Command line

The `drillkit` command manages a client file in which the fields of each record are separated
by `#//#`. By default the file is `Clients_Data.txt` in the current directory. Use `--file` to
choose another file. The command reads its input from prompts on standard input.

```
drillkit --help
drillkit --file clients.txt list
```

The command has these actions:

- `add`: asks for an account number, pin code, name and phone. It appends the client with a
  balance of 0, then asks whether to add another.
- `list`: prints every client as a table.
- `find`: asks for an account number and prints that client's card.
- `delete`: asks for an account number, shows the client's card and asks you to confirm with `y`.
  If you confirm, it removes the client from the file.
- `update`: asks for an account number, shows the client's card and asks you to confirm with `y`.
  If you confirm, it asks for a new pin code, name, phone and balance. The account number stays
  the same.

When the account number is unknown, `find`, `delete` and `update` print
`Oops , Client is not here` and exit with status 1. `update` also exits with status 1 if the new
balance is not a number.

## What it does not do

Clients are kept only in the flat text file. There is no database and no locking for concurrent
use. The command cannot deposit or withdraw; a balance changes only when you set it with `update`.