# pitishell

pitishell is a set of Python building blocks for a small POSIX-style shell.
It covers the shell's state and environment, its syntax checks, variable
expansion, the builtin commands, and the lookup of programs in `PATH`.

## Installation

```
pip install .
```

## Modules

- `pitishell.environment`: `Environment` is an ordered store of variables.
  A variable may exist without a value, as after `export NAME`. It has
  `set`, `get`, `unset`, `items` and `to_envp`. `to_envp` returns
  `KEY=VALUE` strings.
- `pitishell.context`: `ShellContext` holds the environment, the current
  commands and the last exit code. Calling `exit()` raises `ShellExit`.
  The module also defines `Command`, `Redirect` and `RedirType`.
  `format_message` and `report` prefix error messages with `pitishell: `;
  `report` writes the message to standard error.
- `pitishell.syntax` holds the line checks: `quotes_balanced`,
  `pipes_valid` and `redirections_valid`. `is_syntax_valid` runs all three.
  On an error it reports the problem, sets the exit code to 2 and returns
  `False`.
- `pitishell.textutils` has three split functions:
  - `split` splits on any delimiter character.
  - `split_first` splits at the first delimiter only.
  - `split_quoted` splits on delimiters that are not inside quotes.

  `update_quote_state` is also in this module.
- `pitishell.expand`: `expand_line` replaces `$NAME` and `$?`. It works in
  two modes: `ExpandMode.CMD` for command lines and `ExpandMode.HD` for
  here-document lines.
  - Text in single quotes is left as it is.
  - In command mode, a delimiter after `<<` is not expanded.
- `pitishell.builtins` holds the builtins: `echo`, `cd`, `pwd`, `export`,
  `unset`, `print_env` (the `env` command) and `exit_builtin`.
  - `run_builtin` runs one of them by name and stores its exit status in
    the context.
  - `is_builtin` tells whether a name is a builtin.
  - `parse_exit_code` parses the argument of `exit`. It accepts values in
    the signed 64-bit range.
- `pitishell.cmdpath`: `find_command_path` resolves a command name.
  - A name that contains `/` is checked as a path. So is any name when
    `PATH` is unset.
  - Other names are searched in `PATH`.
  - If the name is not found in `PATH`, it returns `None` and sets the
    exit code to 127.

## Example

```python
from pitishell.context import ShellContext
from pitishell.expand import ExpandMode, expand_line
from pitishell.syntax import is_syntax_valid
from pitishell.textutils import split_quoted

ctx = ShellContext()
ctx.env.set("NAME", "world")

line = "echo $NAME '$NAME' | wc"
if is_syntax_valid(ctx, line):
    line = expand_line(line, ctx, ExpandMode.CMD)
    print(line)                      # echo world '$NAME' | wc
    print(split_quoted(line, "|"))   # ["echo world '$NAME' ", ' wc']

print(is_syntax_valid(ctx, "ls |"), ctx.exit_code)  # False 2
```

## What it does not do

The package has no interactive command and no prompt loop. It also lacks
several parts a full shell needs:

- splitting a line into commands and redirections
- here-documents
- signal handling
- running programs, pipelines or redirections

You can combine the modules above to check, expand and split a line. The
`ShellContext` fields for commands and pipe descriptors exist, but nothing
in the package fills or uses them to run commands.

## Running the tests

```
pip install ".[test]"
pytest
```