import logging

from ._core import Config, get_config
from ._eager import Seq
from ._lazy import Iter
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import Pair, Producer, Unzipped

new = Iter.new
from_iterable = Iter.from_iterable
keys = Iter.from_keys
values = Iter.from_values
iota = Iter.iota

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pair",
    "Producer",
    "Seq",
    "Some",
    "Unzipped",
    "from_iterable",
    "get_config",
    "iota",
    "keys",
    "new",
    "values",
]
