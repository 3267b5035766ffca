# pipex

`pipex` runs two commands connected by a pipe. The first command reads
from an input file, its output feeds the second command, and the second
command's output goes to an output file. It does the same job as the
shell line

    < file1 cmd1 | cmd2 > file2

but starts both programs directly, without a shell.

## Installation

    pip install .

## Command line

    pipex file1 "cmd1 args" "cmd2 args" file2

Exactly four arguments are required. Each command is split on spaces
into its words and its program is looked up in the directories listed
in `PATH`; the first entry that exists and is executable is used.
The input file is opened first; the output file is then created with
mode `0644`, or truncated, before either command is looked up or run.

Example:

    pipex /etc/passwd "grep root" "wc -l" count.txt

On success the exit status is that of the second command.

If something goes wrong, such as a wrong number of arguments, a
missing `PATH`, an input file that cannot be opened, an output file
that cannot be opened, or a command that is empty, cannot be found or
cannot be started, a coloured `Error` report is written to standard
error and the program exits with status 1.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.pipeline import run_pipex

status = run_pipex("input.txt", "grep foo", "wc -l", "output.txt", os.environ)
```

`run_pipex` returns the exit status of the second command. When `env`
is left out, the current process environment is used. Failures raise
`pipex.errors.PipexError`; its `kind` attribute holds an `ErrorKind`
member, `detail` may hold extra text, and `report()` returns the text
the command line writes to standard error. `format_error(kind, color)`
builds the same report for any `ErrorKind`, with or without ANSI colours.

Other modules:

- `pipex.paths`: `get_cmd_paths` (the `PATH` directories, each ending in
  a slash), `parse_command`, `find_executable` and `resolve_command`,
  which returns a `Command` holding the program's `path` and its `argv`.
- `pipex.lines`: `read_lines`, a generator over the lines of a text or
  binary stream, without their newlines.
- `pipex.strutil`: small string and number helpers: `atoi`, `atof`,
  `itoa`, `itoa_base`, `split_words`, `strtrim`, `substr` and `strnstr`.

## What it does not do

Only two commands are joined; there is no support for longer chains or
for here-documents. Commands are split on spaces alone, so shell
quoting, escapes, globbing and variable expansion are not understood,
and a command name is always looked up through `PATH`.

## Running the tests

    pip install .[test]
    pytest