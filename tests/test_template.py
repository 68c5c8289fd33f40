import logging

import pytest

from sanjiquest.template import (
    VERSION,
    Options,
    help_text,
    initialize,
    main,
    parse_options,
    version_text,
)


def test_no_arguments():
    assert parse_options([]) == Options(verbose=0, show_help=False, show_version=False)


def test_verbose_is_cumulative():
    assert parse_options(["-vvv"]).verbose == 3
    assert parse_options(["-v", "-v"]).verbose == 2


def test_help_stops_parsing():
    options = parse_options(["-v", "-h", "-x"])
    assert options.show_help is True
    assert options.verbose == 1


def test_version_in_cluster():
    options = parse_options(["-vvV"])
    assert options.show_version is True
    assert options.verbose == 2


def test_unknown_option_raises():
    with pytest.raises(ValueError, match="-x"):
        parse_options(["-x"])


def test_non_options_are_skipped_and_double_dash_ends():
    assert parse_options(["file", "-v"]).verbose == 1
    assert parse_options(["--", "-x"]).verbose == 0


def test_help_text_contents():
    text = help_text("exN")
    assert text.startswith("exN - Brief description\n")
    assert "Usage: exN [-h|-v]" in text


def test_version_text_verbosity():
    assert VERSION in version_text("exN", 0)
    assert "Verbose: 4" in version_text("exN", 4)
    assert "Verbose" not in version_text("exN", 3)


def test_initialize_is_idempotent():
    first = initialize()
    second = initialize()
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING


def test_main_help_exits_with_failure(capsys):
    assert main(["-h"]) == 1
    assert "Usage: exN" in capsys.readouterr().out


def test_main_version(capsys):
    assert main(["-V"]) == 1
    assert VERSION in capsys.readouterr().out


def test_main_unknown_option(capsys):
    assert main(["-q"]) == 1
    assert "$exN -h" in capsys.readouterr().out


def test_main_verbose(capsys):
    assert main(["-vv"]) == 0
    assert "Verbose level set at: 2" in capsys.readouterr().out


def test_main_quiet(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""