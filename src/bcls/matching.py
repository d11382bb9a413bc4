import re
from enum import Enum
from fnmatch import fnmatchcase
from typing import Callable, Iterable, List, TypeVar

from bcls.err import InvalidPattern

T = TypeVar('T')


class MatchingStrategy(str, Enum):
    """
    How a search pattern is compared with an instance name.
    All strategies are case-sensitive unless `ignore_case` is used when creating the matcher.
    """
    PARTIAL = 'partial'
    EXACT = 'exact'
    FN_MATCH = 'fn_match'
    REGEX = 'regex'

    def matcher(self, pattern: str, *, ignore_case: bool = False) -> Callable[[str], bool]:
        if self is MatchingStrategy.REGEX:
            try:
                compiled = re.compile(pattern, re.IGNORECASE if ignore_case else 0)
            except re.error as e:
                raise InvalidPattern(pattern, str(e)) from e
            return lambda name: compiled.search(name) is not None

        if ignore_case:
            pattern = pattern.casefold()
            normalize = str.casefold
        else:
            normalize = str

        if self is MatchingStrategy.PARTIAL:
            return lambda name: pattern in normalize(name)
        if self is MatchingStrategy.EXACT:
            return lambda name: pattern == normalize(name)
        if self is MatchingStrategy.FN_MATCH:
            return lambda name: fnmatchcase(normalize(name), pattern)

        raise AssertionError(f"Unsupported strategy: {self}")


def filter_by_name(items: Iterable[T], matches: Callable[[str], bool], *,
                   name_fnc: Callable[[T], str] = lambda i: i.name) -> List[T]:
    """
    Keep items whose name is accepted by the matcher, preserving their order.
    """
    return [item for item in items if matches(name_fnc(item))]
