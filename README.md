# sanjiquest

A short choose-your-path text adventure in Portuguese. Sanji, the cook of the
Straw Hat Pirates, lands on a new island looking for rare ingredients. Four
two-way choices stand between him and a successful culinary mission; a wrong
turn ends the adventure early.

The package also holds a minimal command-line skeleton with help, version and
verbosity options.

## Installing

```
pip install .
```

## Playing

```
sanjiquest
```

Each question offers two numbered options; type `1` or `2` and press Enter.
Only the leading whole number of a line is read. An answer that is not the
right number for a question — including input with no number at all — takes
the other branch of the story. Command-line arguments are ignored.

## Using it from code

The game is driven through three callables, so it can run anywhere, not only
in a terminal:

```python
import sys
from sanjiquest.adventure import Adventure

answers = iter(["1", "1", "1", "2"])
game = Adventure(
    read_line=lambda: next(answers),
    write=sys.stdout.write,
    pause=lambda seconds: None,
)
ending = game.play()
print(ending)  # Ending.SUCCESS
```

- `Adventure.play()` runs the story from the start and returns an `Ending`:
  `EXPLOSIVE_FRUIT`, `MARINE_TRAP`, `POISONOUS_SPIDERS`, `BROKEN_PAN` or
  `SUCCESS`. After a run, `correct_answers` holds how many good choices were
  made.
- `Adventure.ask(prompt, options)` shows a prompt with numbered options and
  returns the player's number, or `None` if the line held no number.
- `parse_choice(text)` reads a leading integer (optional sign, leading
  whitespace allowed) and returns it, or `None`.

## The command-line skeleton

```
sanjiquest-template -h      # show help
sanjiquest-template -V      # show version information
sanjiquest-template -v -v   # raise the verbose level (cumulative, also -vv)
```

`-h` and `-V` print their message and exit with status 1; with `-V`, a verbose
level above 3 is also reported. An unknown option prints a hint to use `-h`
and exits with status 1. Otherwise the verbose level is reported if set and
the program exits with status 0.

Its pieces live in `sanjiquest.template`:

- `parse_options(argv)` returns an `Options` (`verbose`, `show_help`,
  `show_version`) and raises `ValueError` for an unknown option.
- `help_text(program)` and `version_text(program, verbose)` return the
  messages.
- `initialize()` sets up and returns the module's debug logger, writing to
  standard error.

## What it does not do

The adventure has one fixed story: no saving, no score beyond the count of
good choices, and no language other than Portuguese. The skeleton recognises
only the short options `-h`, `-V` and `-v`; long options such as `--help` are
rejected as unknown, and after setup it does no further work.

## Running the tests

```
pip install ".[test]"
pytest
```