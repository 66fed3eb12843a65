"""Benchmarks for pullchain chains, each paired with its plain-Python baseline."""

import functools
from operator import add

import pullchain as pc

from ._registery import bench


def _double(x: int) -> int:
    return x * 2


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _offset(x: int, y: int, *, z: int) -> int:
    return x + y + z


class MapFilter:
    """Benchmark `map`/`filter`/`collect` pipelines."""

    @bench()
    @staticmethod
    def chain(data: pc.Seq[int]) -> object:
        """map -> filter -> collect through producers."""
        return data.iter().map(_double).filter(_is_even).collect()

    @bench()
    @staticmethod
    def chain_args(data: pc.Seq[int]) -> object:
        """map with forwarded args and kwargs."""
        return data.iter().map(_offset, 20, z=30).collect()

    @bench()
    @staticmethod
    def builtin(data: pc.Seq[int]) -> object:
        """Same pipeline with builtins."""
        return tuple(filter(_is_even, map(_double, data)))


class ZipEnumerate:
    """Benchmark pair-producing combinators."""

    @bench()
    @staticmethod
    def enumerate_unzip(data: pc.Seq[int]) -> object:
        """enumerate -> unzip."""
        return data.iter().enumerate().unzip()

    @bench()
    @staticmethod
    def zip_collect(data: pc.Seq[int]) -> object:
        """zip two chains over the same data."""
        return data.iter().zip(data.iter().map(_double)).collect()

    @bench()
    @staticmethod
    def builtin(data: pc.Seq[int]) -> object:
        """Same as enumerate -> unzip, with builtins."""
        return tuple(zip(*enumerate(data, start=1), strict=True))


class Folding:
    """Benchmark consuming operations."""

    @bench()
    @staticmethod
    def fold(data: pc.Seq[int]) -> object:
        """fold over an Iter."""
        return data.iter().fold(add, 0)

    @bench()
    @staticmethod
    def reduce(data: pc.Seq[int]) -> object:
        """reduce over an Iter."""
        return data.iter().reduce(add)

    @bench()
    @staticmethod
    def any_late(data: pc.Seq[int]) -> object:
        """any, matching only the last item."""
        last = len(data)
        return data.iter().any(lambda x: x == last)

    @bench()
    @staticmethod
    def builtin(data: pc.Seq[int]) -> object:
        """functools.reduce over the raw data."""
        return functools.reduce(add, data, 0)
