VERSION = (0, 0, 1)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "picoarg"
DESCRIPTION = "A minimal short-option command-line parser"

OPTION_PREFIX = "-"
