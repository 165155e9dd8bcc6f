import logging
from typing import Optional

from . import const, logger, options, vt100

_logger = logging.getLogger(__name__)

USAGE = [
    ("-h", "show this help"),
    ("-v", "show version information"),
    ("-d", "enable debug logging"),
    ("-f<file>", "process <file>"),
]


def usage():
    print(f"Usage: {const.ARGV0} [OPTION]")
    print()
    vt100.subtitle("Options")
    for flag, description in USAGE:
        print(vt100.indent(f"{flag:<10}{description}", 2))
    print()


def run(argv: Optional[list[str]] = None) -> int:
    parser = options.OptionParser()
    parser.add("h")
    parser.add("v")
    parser.add("d")
    parser.add("f", True)

    if not parser.parseArgv(argv):
        return -1

    logger.setup(parser.has("d"))
    _logger.debug(f"Parsed options: {parser.parsed()}")

    if parser.has("h"):
        usage()
        return 0

    if parser.has("v"):
        print(f"version {const.VERSION_STR}")

    while parser.has("f"):
        filename = parser.popValue("f")
        _logger.info(f"Processing {filename}")
        print(f"processing '{filename}'")

    return 0
