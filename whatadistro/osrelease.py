# whatadistro/osrelease.py

import logging
import re
from pathlib import Path

from whatadistro.identity import Identity
from whatadistro.utils.errors import FileNotFound, handle_errors

logger = logging.getLogger(__name__)

OS_RELEASE_PATHS = (Path("/etc/os-release"), Path("/usr/lib/os-release"))

RE_LINE = re.compile(r'^([A-Za-z_][A-Za-z0-9_]*)=(.*)$')
RE_ESCAPE = re.compile(r'\\(["\\`$])')
RE_BARE_ESCAPE = re.compile(r'\\(.)')


def _unquote(raw: str):
    """Strip matching quotes and shell escapes; None if a quote is left open."""
    value = raw.strip()
    if value[:1] in ('"', "'"):
        quote = value[0]
        if len(value) < 2 or value[-1] != quote:
            return None
        value = value[1:-1]
        if quote == '"':
            value = RE_ESCAPE.sub(r"\1", value)
        return value
    return RE_BARE_ESCAPE.sub(r"\1", value)


def parse_os_release(text: str) -> dict:
    """
    Parse KEY=VALUE lines into a dict. Comments, blank lines and
    malformed lines are skipped; a repeated key keeps its last value.
    """
    fields = {}
    # only "\n" ends a line; splitlines() would also break on \x0b, \x85, U+2028...
    for lineno, line in enumerate(text.split("\n"), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        m = RE_LINE.match(line)
        value = _unquote(m.group(2)) if m else None
        if value is None:
            logger.debug("skipping malformed line %d: %r", lineno, line)
            continue
        fields[m.group(1)] = value
    return fields


@handle_errors
def read_os_release(path) -> str:
    # a stray bad byte only spoils its own line
    return Path(path).read_text(encoding="utf-8", errors="replace")


def identify(paths=None) -> Identity:
    """
    Identify the running distro from the first os-release file that exists.
    Raises FileNotFound, FileUnreadable or NoUsableName.
    """
    candidates = tuple(OS_RELEASE_PATHS if paths is None else paths)
    for path in candidates:
        try:
            text = read_os_release(path)
        except FileNotFoundError:
            logger.debug("%s not present, trying next", path)
            continue
        logger.debug("parsing %s", path)
        return Identity.from_fields(parse_os_release(text), source=path)
    raise FileNotFound(candidates)
