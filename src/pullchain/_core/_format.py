import itertools
from collections.abc import Iterable


def iter_repr(v: Iterable[object], max_items: int = 20) -> str:
    shown = tuple(itertools.islice(v, max_items + 1))
    suffix = ", ..." if len(shown) > max_items else ""
    return ", ".join(repr(x) for x in shown[:max_items]) + suffix
