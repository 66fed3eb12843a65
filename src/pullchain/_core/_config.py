from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

from ._format import iter_repr


@dataclass(slots=True)
class Config:
    """Process-wide settings, read through `get_config()`.

    Fields are plain attributes and can be changed at runtime.

    Attributes:
        repr_max_items (int): Number of items shown by `Seq.__repr__` before truncating with `...`.
        iota_limit (int | None): Optional bound on how many values an `iota` producer yields.
            `None` keeps `iota` infinite. The value is captured when `iota` is called.

    Example:
    ```python
    >>> import pullchain as pc
    >>> cfg = pc.get_config()
    >>> cfg.iota_limit = 3
    >>> pc.iota().collect()
    Seq(1, 2, 3)
    >>> cfg.reset()
    >>> cfg.iota_limit is None
    True

    ```
    """

    repr_max_items: int = 20
    iota_limit: int | None = None

    def reset(self) -> None:
        """Restore every field to its default."""
        defaults = Config()
        for field in fields(self):
            setattr(self, field.name, getattr(defaults, field.name))

    def iter_repr(self, v: Iterable[object]) -> str:
        return iter_repr(v, self.repr_max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
