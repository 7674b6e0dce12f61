"""Start-up argument scanning.

Arguments are read pairwise: a token of the form ``--name`` is a flag whose
value is the token that follows it.
"""

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

PREFIX = "--"
_FLAG_RE = re.compile(rf"^{PREFIX}\S+$")


def parse_args(argv: Sequence[str]) -> Mapping[str, str | None]:
    """Scan ``argv`` (program name excluded) and return a read-only flag map."""
    found: dict[str, str | None] = {}
    for index in range(0, len(argv), 2):
        token = argv[index]
        if _FLAG_RE.match(token):
            value = argv[index + 1] if index + 1 < len(argv) else None
            found[token[len(PREFIX):]] = value
    return MappingProxyType(found)


def get_arg(args: Mapping[str, str | None], name: str) -> str | None:
    return args.get(name)
