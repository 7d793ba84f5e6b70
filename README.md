# microsh

A tiny command runner that takes a whole command line as its arguments.
It splits them on `|` and `;`, runs each command by its path, connects
piped commands, and has a built-in `cd`. The package also has small
helpers for characters, byte buffers, strings and a singly linked list.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

Each word of the command line is a separate argument. `|` pipes one
command's output into the input of what follows, and `;` ends a command.
Empty commands (two separators in a row) are skipped.

```
microsh /bin/ls -l "|" /usr/bin/grep py ";" /bin/echo done
microsh cd /tmp ";" /bin/pwd
```

Programs are run by path. A name without a `/` is looked for in the
current directory; `PATH` is never searched. Commands run one after
another, each waited for before the next starts. A program that cannot
be started gives `error: cannot execute <name>` on standard error.

`cd` needs exactly one argument. Any other number gives
`error: cd: bad arguments`; a directory that cannot be entered gives
`error: cd: cannot change directory to <path>`. A `cd` whose output feeds
a pipe reports its status but does not change the directory.

The exit status is 1 if the last command failed (a non-zero exit code, or
a `cd` error) and 0 otherwise. With no arguments, `microsh` exits with 0.

## Library use

```python
from microsh.shell import Segment, parse_segments, run, run_segments

segments = parse_segments(["/bin/echo", "hi", "|", "/usr/bin/wc", "-c"])
# [Segment(args=['/bin/echo', 'hi'], piped=True),
#  Segment(args=['/usr/bin/wc', '-c'], piped=False)]

status = run(["/bin/echo", "hi", ";", "/bin/true"])
status = run_segments(segments, env={"HOME": "/tmp"}, trace=True)
```

`run` and `run_segments` take an optional `env` mapping for the started
programs (the current environment when omitted) and a `trace` flag that
prints `current command : <name>` before each command.
`change_directory(args)` is the `cd` built-in; `args` includes `"cd"`
itself, and it returns 0 or 1.

## Helper modules

- `microsh.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. ASCII only; each takes a one-character string or an
  integer code, and the case converters return the same kind they got.
- `microsh.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc` on `bytearray` and bytes-like buffers. A byte count
  larger than a buffer raises `ValueError`; `memmove` works with offsets
  inside one buffer; `memchr` returns an index or `None`.
- `microsh.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to a raw file descriptor.
- `microsh.textscan`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `atoi`, `itoa`. Searches return indices or `None`;
  `strlcpy` and `strlcat` return the resulting text together with the
  length they tried to create.
- `microsh.textbuild`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri` (in place over a mutable sequence of characters).
- `microsh.linked`: `LinkedList` with `push_front`, `push_back`, `last`,
  `clear`, `for_each`, `map`, `len()` and iteration.

## What it does not do

`microsh` is not an interactive shell. It has no prompt and reads no
script; the command line comes only from its arguments. There is no
quoting, variable expansion, redirection, `PATH` lookup or job control,
and no built-in other than `cd`.