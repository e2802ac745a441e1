# recordfiles

A small set of file utilities in two halves. The first half works on plain
text files. The second half keeps records in fixed-size binary files: books,
bank accounts and employees. There are no dependencies beyond the standard
library.

## Installing

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Text files

`recordfiles.textfiles` has these functions:

- `create_file(path)` creates an empty file, or empties one that already
  exists, and returns its `Path`.
- `count_chars(path)` returns the number of bytes stored in a file.
- `append_text(path, data)` adds text (UTF-8) to the end of a file. The file is
  created if it does not exist.
- `swap_ascii_case(text)` swaps upper and lower case for the ASCII letters
  `A`–`Z` and `a`–`z`, for either `str` or `bytes`. Every other character is
  left as it is.
- `copy_swapping_case(source, destination)` copies a file and swaps the case
  of each ASCII letter on the way.
- `merge_files(first, second, merged)` writes the first file, then a single
  space, then the second file into a new file. The merged file is filled with
  the first file before the second is opened, so if the second is missing the
  first part is already written.
- `text_stats(path)` returns a `TextStats` value with `chars`, `words` and
  `lines`. `chars` is the byte count; `lines` is one for a non-empty file plus
  one per newline; `words` counts whitespace-separated words starting from the
  second byte of the file.

```python
from recordfiles.textfiles import append_text, merge_files, swap_ascii_case

append_text("output.txt", "Cpp Programming")
merge_files("file1.txt", "file2.txt", "merged_file.txt")
print(swap_ascii_case("Hello, World"))   # hELLO, wORLD
```

If a file cannot be opened, the functions raise the usual `OSError`
subclasses, such as `FileNotFoundError`.

## Record stores

Each kind of record can turn itself into a fixed-size block of bytes with
`pack()` and be rebuilt from one with the class method `unpack()`, which
raises `ValueError` if the block has the wrong size. Each record gives a
readable summary of itself with `describe()`. Text fields are cut to their
maximum length in UTF-8 bytes.

Each store is tied to one file. `add()` appends a record to the end of that
file, creating it if needed, and iterating over the store gives the records
back in order. A trailing partial record is ignored.

### Books

`recordfiles.books` has `Book(book_id, title, price)` and
`BookStore(path="books_data.dat")`.

- A negative `book_id` is made positive; an id above 4294967295 raises
  `ValueError`. Titles are limited to 30 bytes.
- `BookStore.add(book)` refuses a book whose price is `-1` with `ValueError`.
- `BookStore.find(book_id)` returns the first book with that id, or `None`.

```python
from recordfiles.books import Book, BookStore

store = BookStore("books_data.dat")
store.add(Book(7, "A Made-Up Title", 199.5))
for book in store:
    print(book.describe())

match = store.find(7)
print(match.describe() if match else "There is no book with that id")
```

### Bank accounts

`recordfiles.bank` has `BankAccount(name, account_number, balance=0.0)`,
`AccountStore(path="bank_data.dat")` and the exception
`InsufficientBalance`, a subclass of `ValueError`. Names are limited to 30
bytes and account numbers to 5.

- `BankAccount.deposit(amount)` raises `ValueError` for a negative amount and
  returns the new balance.
- `BankAccount.withdraw(amount)` raises `ValueError` for a negative amount and
  `InsufficientBalance` for an amount larger than the balance; it returns the
  new balance.
- `AccountStore.add(account)` refuses an account with an empty name.
- `AccountStore.richer_than(limit)` yields the stored accounts whose balance
  is strictly greater than `limit`.

### Employees

`recordfiles.employees` has `Department`, `Employee` and
`EmployeeStore(path="emp.dat")`.

`Department` has four members, `ADMIN`, `SALES`, `PRODUCTION` and `DESIGN`,
whose `file_name` is `adm.dat`, `sal.dat`, `pro.dat` and `des.data`.

`Employee(employee_id, name, age, phone_number, address, department)` makes a
negative id or age positive and lowercases the ASCII letters of the
department, which may be a `Department` or a string.

- `EmployeeStore.add(employee)` refuses a record whose id or age is
  4294967295.
- `EmployeeStore.split_by_department(directory=".")` rewrites the four
  department files in `directory` from the store and returns a dict from
  `Department` to each file's path. Employees with an unknown department go
  to the admin file.
- `EmployeeStore.of_department(department, directory=".")` returns a list of
  the employees of one department, matched without regard to ASCII case. It
  reads the department's own file when it can be opened, and otherwise
  searches the main file. A department name longer than 30 bytes raises
  `ValueError`.

## Commands

Installing the package adds four interactive commands.

- `recordfiles-text` runs the text-file utilities through the subcommands
  `create`, `count`, `append` (with `--data`), `copy`, `merge` and `stats`.
  Each takes its file names as optional arguments, with defaults such as
  `read.txt` and `newfile.txt` in the current directory.
- `recordfiles-books` asks for book records, stores them, lists them, and then
  searches for one by id. `--file` picks the data file.
- `recordfiles-bank` asks for bank accounts, stores them, lists them, and then
  shows the accounts with a balance above a limit you give. `--file` picks the
  data file.
- `recordfiles-employees` asks for employee records, stores them, lists them,
  splits them by department, and then shows the employees of one department.
  `--file` picks the main data file and `--directory` where the department
  files go.

The stores only ever append: there is no way to edit or delete a stored
record other than rewriting the file.