"""Tests for slot usage in pullchain classes."""

import pullchain as pc


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(pc.Iter(lambda: pc.NONE))
    assert _check_slots(pc.values([1, 2]).map(str))
    assert _check_slots(pc.Seq(()))
    assert _check_slots(pc.Some(42))
    assert _check_slots(pc.NoneOption())
    assert _check_slots(pc.Unzipped(pc.Seq(()), pc.Seq(())))
    assert _check_slots(pc.get_config())
