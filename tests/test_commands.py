"""
Tests for command parsing and validation.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from txdb import (
    Begin,
    Commit,
    End,
    Get,
    NumEqualTo,
    Rollback,
    Set,
    Unset,
    parse_command,
)
from txdb.commands import tokenize
from txdb.exceptions import (
    ArityError,
    CommandError,
    InvalidValueError,
    UnknownCommandError,
)


class TestParseValidCommands:
    """Test every verb parses into its command."""
    
    @pytest.mark.parametrize("line,expected", [
        ("SET a 10", Set("a", 10)),
        ("GET a", Get("a")),
        ("UNSET a", Unset("a")),
        ("NUMEQUALTO 10", NumEqualTo(10)),
        ("BEGIN", Begin()),
        ("ROLLBACK", Rollback()),
        ("COMMIT", Commit()),
        ("END", End()),
    ])
    def test_each_verb(self, line, expected):
        """Test a well-formed line for each verb."""
        assert parse_command(line) == expected
    
    def test_extra_whitespace_is_ignored(self):
        """Test tokens may be separated by any run of whitespace."""
        assert parse_command("  SET \t a    -7  \n") == Set("a", -7)
    
    def test_signed_values(self):
        """Test explicit signs are accepted."""
        assert parse_command("SET a +5") == Set("a", 5)
        assert parse_command("NUMEQUALTO -5") == NumEqualTo(-5)
    
    def test_int32_bounds_accepted(self):
        """Test the extremes of the 32-bit range."""
        assert parse_command("SET a 2147483647").value == 2 ** 31 - 1
        assert parse_command("SET a -2147483648").value == -2 ** 31
    
    def test_keys_may_look_like_numbers(self):
        """Test keys are arbitrary words."""
        assert parse_command("GET 42") == Get("42")
    
    def test_commands_are_immutable(self):
        """Test commands cannot be modified after parsing."""
        command = parse_command("SET a 1")
        with pytest.raises(AttributeError):
            command.value = 2
    
    def test_verb_attribute(self):
        """Test each command class knows its wire verb."""
        assert Set.verb == "SET"
        assert NumEqualTo.verb == "NUMEQUALTO"
        assert parse_command("END").verb == "END"


class TestParseInvalidCommands:
    """Test validation errors and their messages."""
    
    @pytest.mark.parametrize("line,verb", [
        ("SET a", "SET"),
        ("SET a 1 2", "SET"),
        ("GET", "GET"),
        ("GET a b", "GET"),
        ("UNSET", "UNSET"),
        ("NUMEQUALTO", "NUMEQUALTO"),
        ("NUMEQUALTO 1 2", "NUMEQUALTO"),
        ("BEGIN now", "BEGIN"),
        ("ROLLBACK 1", "ROLLBACK"),
        ("COMMIT 1", "COMMIT"),
        ("END 0", "END"),
    ])
    def test_wrong_arity(self, line, verb):
        """Test wrong token counts name the verb."""
        with pytest.raises(ArityError) as exc_info:
            parse_command(line)
        assert exc_info.value.message == f"Incorrect number of arguments for {verb} command"
        assert exc_info.value.verb == verb
    
    @pytest.mark.parametrize("line,verb", [
        ("SET a ten", "SET"),
        ("SET a 1.5", "SET"),
        ("SET a 1_000", "SET"),
        ("SET a 2147483648", "SET"),
        ("SET a -2147483649", "SET"),
        ("NUMEQUALTO x", "NUMEQUALTO"),
        ("NUMEQUALTO --1", "NUMEQUALTO"),
        ("NUMEQUALTO 99999999999", "NUMEQUALTO"),
    ])
    def test_invalid_value(self, line, verb):
        """Test non-integer and out-of-range values are rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            parse_command(line)
        assert exc_info.value.message == f"Invalid value supplied to {verb}"
    
    def test_arity_checked_before_value(self):
        """Test a bad value with the wrong arity reports the arity."""
        with pytest.raises(ArityError):
            parse_command("SET a x y")
    
    @pytest.mark.parametrize("line", ["FOO", "set a 1", "Get a", "DELETE a", ""])
    def test_unknown_verb(self, line):
        """Test unknown or lower-case verbs are invalid commands."""
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_command(line)
        assert exc_info.value.message == "INVALID COMMAND"
    
    def test_errors_share_base_class(self):
        """Test every validation error is a CommandError."""
        for line in ["GET", "SET a b", "NOPE"]:
            with pytest.raises(CommandError):
                parse_command(line)


class TestTokenize:
    """Test line splitting."""
    
    def test_splits_on_whitespace(self):
        """Test runs of whitespace separate words."""
        assert tokenize("SET  a\t1") == ["SET", "a", "1"]
    
    def test_blank_line(self):
        """Test a blank line has no words."""
        assert tokenize("   ") == []
