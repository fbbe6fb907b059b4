# shtools

A collection of small command-line helpers meant to be glued together in
shell scripts. Most of them take their input from positional arguments or,
when none are given, from standard input, one record per line. Many accept
`-z` / `-0` to use NUL instead of newline as the record delimiter, and `-h`
prints a short help text (`stest` uses `--help`).

The package needs only the standard library and runs on POSIX systems; the
terminal helpers use `fcntl` and `termios`.

## Installation

```sh
pip install .
```

To run the test suite:

```sh
pip install .[test]
pytest
```

## Text and search

- `afgrep [OPTION]... FIXEDSTR [FILE]...` searches for a fixed string with
  alignment: `-a` at the beginning of the line, `-e` at the end, `-x` the
  whole line, `-b COUNT` to require an offset from the beginning or end.
  It also takes `-i` (ignore ASCII case), `-v` (invert), `-o` (print only
  the match), `-q` (quiet) and `-m COUNT` (stop after COUNT lines). It exits
  0 if any line was selected and 1 otherwise.

  ```sh
  printf 'foobar\nbarfoo\n' | afgrep -a foo      # prints: foobar
  ```

- `fmaps [-d DEF] [-e END] [-s SEP] [KEY=VAL]...` maps each line of
  standard input through the given mappings. Unmapped lines print DEF, or
  themselves when there is no default. `DEF`, `END` and `SEP` may also come
  from environment variables of the same name.

  ```sh
  printf 'yes\nno\n' | fmaps yes=1 no=0
  ```

- `getsep [FILE]...` prints `\0` if the input contains a NUL byte,
  otherwise `\n`.
- `char2dec`, `char2hex`, `char2oct` print the code of each non-whitespace
  byte on standard input; `int2char` turns whitespace-separated integers
  back into bytes, one per line.

## Paths and files

- `expandpath [PATH]...` expands a leading `~` or `~user` and squeezes
  repeated slashes.
- `unexpandpath [-s] [PATH]...` replaces a home directory prefix with
  `~user` (or a bare `~` for the current user with `-s`).
- `slash [PATH]...` squeezes repeated slashes and adds a trailing slash to
  directories.
- `stest [OPTION]... [PATH]...` filters paths by their properties, in the
  spirit of `test`: `-d` directories, `-f` regular files, `-r`/`-w`/`-x`
  permissions, `-a` hidden, `-n FILE`/`-o FILE` newer/older, `-s` non-empty,
  and more. Repeating a test option inverts that test; `-v` inverts all of
  them; `-A` makes partial success exit 1. The `-m TYPE` and `-M SUBTYPE`
  tests guess MIME types from the file kind, name and content rather than
  from a magic database.

  ```sh
  ls -a | stest -d        # only directories
  ```

- `mkfile PATH...` creates files together with their parent directories.
- `mkparent PATH...` creates only the parent directories of each path.
- `getpath -f|-d [OPTION]... KEYCODE...` looks up paths by keycode in the
  file and directory databases under `$GETPATH_CONFIG_HOME`,
  `$XDG_CONFIG_HOME` or `~/.config` (in
  `scripts/pathfinding/files-container/` and
  `scripts/pathfinding/directories-container/`). `-n` (default) creates the
  parents of the path, `-s` the whole path, `-u` nothing. With `-e` the
  output is an assignment a POSIX shell can `eval`:
  `getpath -e -f KEYCODE VARNAME [EXITCODE] [ERRMSG]`.

## Numbers

- `numsh -f FUNC [-o ARG]... [NUMBER]...` runs numbers through a math
  function such as `sqrt`, `pow` (`-o` gives the exponent), `sum`, `min` or
  `max`. `numsh -L` lists them all.

  ```sh
  numsh -f sum 1 2 3.5     # 6.5
  ```

- `factorise [-g] NUMBER...` prints the prime factorisation as
  `N: PRIME EXPONENT` lines; `-g` prints GNU `factor` style output instead.
- `gcd A B [A B]...` prints the greatest common divisor of each pair. A
  pair with a zero first number and a non-zero second one is an error.
- `sumbase [-i] [-d] [NUMBER]...` sums decimal integers; `-i` ignores
  invalid ones, `-d` omits the trailing delimiter unless writing to a
  terminal.
- `fizzbuzz NUMBER...` maps each number to Fizz, Buzz, Wizz, Triss,
  Yennefer, Mario, Claire and Peach for divisors 3, 5, 7, 9, 11, 13, 15
  and 17.
- `rand [-n COUNT] [-s]` prints cryptographically secure 64-bit random
  numbers, unsigned unless `-s` is given.
- `shufr [-l COUNT] [-n COUNT] [FILE]...` endlessly repeats a random
  permutation of the input lines, keeping the last COUNT picks distinct
  (`-n`) and stopping after COUNT lines (`-l`). Not for cryptographic use.

## Shell helpers

- `contains TEXT NEEDLE...`, `containsall TEXT NEEDLE...`,
  `equals TEXT CANDIDATE...`, `prefixes TEXT PREFIX...`,
  `suffixes TEXT SUFFIX...` exit with status 0 on a match, 1 otherwise.

  ```sh
  if suffixes "$file" .tar.gz .tgz; then echo archive; fi
  ```

- `rawname PATH...` and `rawextension PATH...` print the part before or
  after the last dot.
- `argn BEGIN END STEP ARG...` picks arguments by position and prints them
  NUL-terminated.
- `argc ARG...` prints how many arguments were given.
- `assertroot [MESSAGE]...`, `assertnonroot [MESSAGE]...` fail unless (or
  if) running as root, printing the message or a default one.
- `evalverbose` prints `set -x` when `SHELL_VERBOSE` is a positive integer.

## Output and terminal helpers

- `puts WORD...` prints each argument on its own line; `fputs WORD...`
  prints them joined by spaces with no newline. `putsn [STR] COUNT` and
  `fputsn STR COUNT` repeat a string COUNT times, with or without newlines.
- `repeatline`, `repeatnull`, `repeatstr` repeat the arguments forever,
  ending each round with a newline, a NUL, or nothing.
- `one` writes an endless stream of `0xff` bytes.
- `flushline`, `flushstdin` discard one line, or all, of standard input.
- `color NAME [LINE]...` wraps the lines, or standard input, in an ANSI
  colour.
- `fillline WORD...`, `fillterm WORD...` repeat the words until as many
  have been printed as the terminal has columns, or cells.
- `flushterm` discards pending terminal input and output.
- `fionread` prints the number of bytes waiting on standard input.
- `scrolls [-k] [-l LEN] [-p LEN] [-s SEC] [-S NSEC]` scrolls the latest
  line of standard input like a marquee until interrupted.

## Library use

The helpers behind the commands can be imported too, for example
`shtools.afgrep.AlignedSearch`, `shtools.tilde.expand_tilde`,
`shtools.factorise.factorise`, `shtools.numsh.find_function` and
`shtools.numparse.parse_unsigned`.