# symhashkit

A toolbox for recovering symbol names whose only trace in an executable is a
32-bit hash. It bundles the hash function those names were stored with, its
inverse, a demangler that reproduces the quirks of the one the target builds
used, and a few attacks for finding strings that match two hashes at once.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `symhashkit`, with these subcommands:

```
symhashkit hash TEXT [--seed HEX]
```
Prints the hash of `TEXT` in hex (seed `0x1505` unless `--seed` is given).

```
symhashkit inverse HASH TEXT
```
Undoes the characters of `TEXT` from the end of the hex value `HASH` and
prints the earlier state.

```
symhashkit demangle [SYMBOL ...]
```
Demangles each symbol given, or each line of standard input if none are.

```
symhashkit xor HASHES [CHARS]
```
XORs hex values (separated by `_`, space or comma) together with the known
characters `CHARS` and lists the class-name lengths below 100 whose digits
cancel the low five bits.

```
symhashkit kmp [--prefix1 P] [--suffix1 S] [--prefix2 P] [--suffix2 S]
```
Prints a `(...)prefix<unknown>suffix` line for each of the two symbols.

```
symhashkit dictionary --wordlist FILE --hash1 HEX --hash2 HEX
                      [--prefix1 P] [--suffix1 S] [--prefix2 P] [--suffix2 S] [--custom]
```
Runs the dictionary attack described below. Symbol 2 is the demangled form of
symbol 1 unless `--custom` is given, in which case it is built from
`--prefix2`, the found middle part and `--suffix2`. Prints one match per line,
or `No collisions found.`

```
symhashkit symbols --base-url URL
symhashkit submit NAME --base-url URL
```
`symbols` fetches `URL/symbols` and prints the list as a tab-separated table.
`submit` requests `URL/submit_symbol?sym=NAME`; a reply of `ok` means the
symbol was accepted, anything else is reported as the reason it was not.

Commands that fail (unreadable word list, network errors, rejected
submissions) print the error to standard error and exit with status 1.

## Library use

### Hashing

Symbol names are hashed with a djb2-style function (`hash = 33 * hash ^ c`,
modulo 2**32, seeded with `0x1505`). Characters are taken as signed bytes, so
codes 0x80–0xFF are sign-extended; characters beyond Latin-1 count as zero.
Characters can also be peeled off the end of a hash again:

```python
from symhashkit.hashing import hash_string, inverse_hash, xor_string

h = hash_string("foo__3BarFi", 0x1505)
inverse_hash(h, "Fi") == hash_string("foo__3Bar", 0x1505)   # True
xor_string("abc")  # XOR of all character codes
```

### Demangling

```python
from symhashkit.demangler import demangle, demangle_lines

demangle("foo__3BarFi")            # 'Bar::foo( int )'
demangle_lines("a__3BarFv\nb__3BarFi")  # each result followed by a newline
```

The demangler deliberately keeps the quirks of the one the hashes were made
with: it knows only the basic types `v b c s i l f d w` (no `long long`),
handles a single template parameter, ignores the order of `P` and `R`
modifiers and renders function pointers as `( ... )`. This matters, because
the demangled form is what the second hash in the executable was computed
from. Names without a `__` followed by `C`, `F`, `Q` or a digit are returned
unchanged.

### Attacks and helpers

- `symhashkit.dictionary` – `load_word_list(path)` reads one word per line
  (UTF-8) and appends the empty word. `DictionaryAttack(word_list, goal_h1,
  goal_h2, prefix1, suffix1, prefix2, suffix2, use_demangler)` is a
  meet-in-the-middle search for a middle part of up to four words that gives
  `goal_h1` for symbol 1 and `goal_h2` for symbol 2; `run(progress=None)`
  returns the full names of symbol 1 without duplicates, calling `progress`
  with a percentage as it goes. `format_results` turns the results into the
  text report.
- `symhashkit.xortrick` – `analyze_xor(hashes, xor_chars)` returns an
  `XorAnalysis` with the folded value, its `low_bits` and the candidate
  lengths; `xor_report` does this for each pair of lines.
- `symhashkit.tools` – `parse_hex` (invalid input gives 0),
  `inverse_hash_report` for undoing known suffixes line by line, and
  `kmp_summary` for showing a prefix/suffix pattern.
- `symhashkit.symbols` – `SymbolInfo`, `SymbolTable` (`load_csv`, `header`,
  `cell`, `row_count`, `column_count`) and `parse_symbol_csv` for reading a
  symbol list in CSV form; `fetch_symbol_list(base_url)` and
  `submit_symbol(base_url, name)` talk to a symbol database server, with
  `SubmissionError` raised when a submission fails or is rejected.

## What it does not do

- There is no graphical interface; everything is the library and the
  `symhashkit` command.
- No word list is bundled: the dictionary attack needs one given with
  `--wordlist` or `load_word_list`.
- There is no solver-based search for middle parts of a given length; only
  the dictionary, XOR and inverse-hash tools are provided.
- No symbol server address is built in; `symbols` and `submit` need
  `--base-url`.