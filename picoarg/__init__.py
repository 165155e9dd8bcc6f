from . import demo
from .options import (  # noqa: F401 re-exported
    Declaration,
    MalformedToken,
    MissingValue,
    OptionParser,
    ParsedOption,
    ParseError,
    UnexpectedValue,
    UnknownOption,
    ValuePolicy,
)


def main() -> int:
    try:
        return demo.run()

    except KeyboardInterrupt:
        print()
        return 1
