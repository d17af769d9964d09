import dataclasses

import pytest

from dir2tree.file_system_tree.walk_options import WalkOptions


def test_defaults():
    options = WalkOptions()
    assert options.max_depth is None
    assert options.ignore_pattern is None
    assert options.show_hidden is True
    assert options.dirs_only is False
    assert options.dirs_first is False
    assert options.exclusion_rules is None


def test_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        WalkOptions().max_depth = 3


@pytest.mark.parametrize("max_depth", [0, -1])
def test_rejects_non_positive_depth(max_depth):
    with pytest.raises(ValueError):
        WalkOptions(max_depth=max_depth)


@pytest.mark.parametrize(
    "max_depth,depth,expected",
    [
        (None, 0, True),
        (None, 100, True),
        (1, 0, False),
        (2, 0, True),
        (2, 1, False),
        (3, 1, True),
    ],
)
def test_may_descend(max_depth, depth, expected):
    assert WalkOptions(max_depth=max_depth).may_descend(depth) is expected
