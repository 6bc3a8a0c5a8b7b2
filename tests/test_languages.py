import pytest
from drow_translator.languages import Direction, Language


def test_parse_exact_identifiers():
    assert Language.parse('Drow') is Language.DROW
    assert Language.parse('Common') is Language.COMMON


@pytest.mark.parametrize('name', ['drow', 'COMMON', 'Elvish', ''])
def test_parse_rejects_other_identifiers(name):
    with pytest.raises(ValueError, match='Invalid language id'):
        Language.parse(name)


def test_other():
    assert Language.DROW.other() is Language.COMMON
    assert Language.COMMON.other() is Language.DROW


def test_direction_to_target():
    direction = Direction.to(Language.DROW)
    assert direction.source is Language.COMMON
    assert direction.target is Language.DROW
    assert str(direction) == 'Common → Drow'


def test_direction_requires_distinct_languages():
    with pytest.raises(ValueError):
        Direction(Language.COMMON, Language.COMMON)
