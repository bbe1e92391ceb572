import functools
import logging

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Base class for every failure raised by identify()."""


class FileNotFound(ParseError):
    def __init__(self, paths):
        self.paths = tuple(str(p) for p in paths)
        looked = ", ".join(self.paths) or "<no paths>"
        super().__init__(f"no os-release file found (looked in {looked})")


class FileUnreadable(ParseError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class NoUsableName(ParseError):
    def __init__(self, source=None):
        self.source = str(source) if source is not None else None
        where = f" in {self.source}" if self.source else ""
        super().__init__(f"none of NAME, PRETTY_NAME or ID is set{where}")


def handle_errors(func):
    """
    Wrap a reader taking the path as its first argument.
    FileNotFoundError passes through so callers can try the next path;
    any other OSError becomes FileUnreadable.
    """
    @functools.wraps(func)
    def wrapper(path, *args, **kwargs):
        try:
            return func(path, *args, **kwargs)
        except FileNotFoundError:
            raise
        except OSError as e:
            logger.debug(f"{func.__name__} ▶ {path}: {e}")
            raise FileUnreadable(path, e) from e

    return wrapper
