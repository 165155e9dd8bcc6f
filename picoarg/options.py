import sys
import logging
import dataclasses as dt

from enum import Enum
from typing import Optional, TextIO

from . import const, utils

_logger = logging.getLogger(__name__)

# --- Tokens ----------------------------------------------------------------- #


def isOption(token: str) -> bool:
    """Checks whether a token looks like a short option (e.g. "-v" or "-ffoo")."""
    return len(token) > 1 and token.startswith(const.OPTION_PREFIX)


def parseKey(token: str) -> str:
    """Returns the option key of a token, the character following the dash."""
    return token[1]


def parseInlineValue(token: str) -> str:
    """Returns everything after the key, or an empty string if there is nothing."""
    return token[2:]


# --- Errors ----------------------------------------------------------------- #


class ParseError(ValueError):
    """
    Base class for every error raised while matching the argument list.

    Attributes:
        token: The offending token.
        key: The option key, when the token carried one.
    """

    token: str
    key: Optional[str]

    def __init__(self, message: str, token: str, key: Optional[str] = None):
        super().__init__(message)
        self.token = token
        self.key = key


class MalformedToken(ParseError):
    def __init__(self, token: str):
        super().__init__(f"Expected an option, found {token}", token)


class UnknownOption(ParseError):
    def __init__(self, token: str, key: str):
        super().__init__(f"Unknown option {const.OPTION_PREFIX}{key}", token, key)


class MissingValue(ParseError):
    def __init__(self, token: str, key: str):
        super().__init__(f"Option '{key}' expects a value", token, key)


class UnexpectedValue(ParseError):
    def __init__(self, token: str, key: str):
        super().__init__(f"Option '{key}' doesn't expect a value", token, key)


# --- Options ---------------------------------------------------------------- #


class ValuePolicy(Enum):
    """
    How a value-expecting option receives its value.

    INLINE only accepts values glued to the key ("-ffoo.txt").
    NEXT_TOKEN also takes the following token when the option stands alone
    ("-f foo.txt"), as long as that token does not start with a dash.
    """

    INLINE = 0
    NEXT_TOKEN = 1


@dt.dataclass(frozen=True)
class Declaration:
    """An option registered with `OptionParser.add`."""

    key: str
    expectsValue: bool = False


@dt.dataclass(frozen=True)
class ParsedOption:
    """
    A matched occurrence of a declared option.

    Attributes:
        key: The option key.
        value: The value found in the argument list, empty if none.
        expectsValue: Copied from the matching declaration.
    """

    key: str
    value: str = ""
    expectsValue: bool = False


class OptionParser:
    """
    Matches an argument list against a set of declared short options.

    Declarations are single-use: a successful parse clears them, so a second
    parse needs the options to be added again. Parsed options accumulate
    across calls until they are popped.
    """

    policy: ValuePolicy
    error: Optional[ParseError]

    _out: Optional[TextIO]
    _quiet: bool
    _declared: list[Declaration]
    _parsed: list[ParsedOption]

    def __init__(
        self,
        policy: ValuePolicy = ValuePolicy.INLINE,
        out: Optional[TextIO] = None,
        quiet: bool = False,
    ):
        """
        Initializes a new `OptionParser`.

        Args:
            policy: How values are attached to options.
            out: Where diagnostics are written, standard output if None.
            quiet: Don't write diagnostics at all, rely on `error` instead.
        """
        self.policy = policy
        self.error = None
        self._out = out
        self._quiet = quiet
        self._declared = []
        self._parsed = []

    def add(self, key: str, expectsValue: bool = False) -> "OptionParser":
        """
        Declares an option.

        Args:
            key: The option character (e.g. "f" for "-f").
            expectsValue: Whether the option requires a value.
        """
        self._declared.append(Declaration(key, expectsValue))
        return self

    def declared(self) -> list[Declaration]:
        return self._declared[:]

    def parsed(self) -> list[ParsedOption]:
        return self._parsed[:]

    def _lookup(self, token: str) -> Declaration:
        key = parseKey(token)
        decl = utils.first(self._declared, lambda d: d.key == key)
        if decl is None:
            raise UnknownOption(token, key)
        return decl

    def _scan(self, args: list[str]):
        stack = args[:]
        while len(stack) > 0:
            token = stack.pop(0)

            if not isOption(token):
                raise MalformedToken(token)

            decl = self._lookup(token)
            _logger.debug(f"Found option '{decl.key}'")

            value = parseInlineValue(token)
            if (
                self.policy == ValuePolicy.NEXT_TOKEN
                and value == ""
                and len(stack) > 0
                and not stack[0].startswith(const.OPTION_PREFIX)
            ):
                value = stack.pop(0)

            if value:
                _logger.debug(f"Found value '{value}'")

            if value != "" and not decl.expectsValue:
                raise UnexpectedValue(token, decl.key)

            if value == "" and decl.expectsValue:
                raise MissingValue(token, decl.key)

            self._parsed.append(ParsedOption(decl.key, value, decl.expectsValue))

    def expect(self, args: list[str]):
        """
        Parses an argument list, raising on the first bad token.

        Options matched before the failure stay in the parsed list and the
        declarations are only cleared when the whole list was consumed.

        Args:
            args: The arguments, without the program name.

        Raises:
            ParseError: One of `MalformedToken`, `UnknownOption`,
                `MissingValue` or `UnexpectedValue`.
        """
        self.error = None
        try:
            self._scan(args)
        except ParseError as e:
            self.error = e
            _logger.info(f"Parsing failed at '{e.token}': {e}")
            raise

        _logger.info(f"Parsed {len(args)} argument(s), {len(self._parsed)} option(s) pending")
        self._declared.clear()

    def parse(self, args: list[str]) -> bool:
        """
        Parses an argument list, reporting failures instead of raising.

        On failure a one-line diagnostic is written out and the exception is
        kept in `error`.

        Args:
            args: The arguments, without the program name.

        Returns:
            True if every argument matched a declared option.
        """
        try:
            self.expect(args)
            return True
        except ParseError as e:
            self._report(e)
            return False

    def parseArgv(self, argv: Optional[list[str]] = None) -> bool:
        """Parses a full process argument vector, skipping the program name."""
        if argv is None:
            argv = sys.argv
        return self.parse(argv[1:])

    def _report(self, e: ParseError):
        if self._quiet:
            return
        print(str(e), file=self._out or sys.stdout)

    def has(self, key: str) -> bool:
        """Checks whether an option is still present in the parsed list."""
        return utils.firstIndex(self._parsed, lambda o: o.key == key) >= 0

    def popValue(self, key: str) -> str:
        """
        Removes the first occurrence of an option and returns its value.

        Returns:
            The value, or an empty string if the option isn't present (or
            doesn't take a value). Use `has` to tell these apart.
        """
        i = utils.firstIndex(self._parsed, lambda o: o.key == key)
        if i < 0:
            return ""

        option = self._parsed.pop(i)
        return option.value

    popArgument = popValue

    def popValues(self, key: str) -> list[str]:
        """Drains every occurrence of an option, in argument order."""
        result: list[str] = []
        while self.has(key):
            result.append(self.popValue(key))
        return result
