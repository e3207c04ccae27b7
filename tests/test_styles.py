import dataclasses

import pytest

from recase import STYLES, CaseStyle, InvalidCaseStyleError, UnknownCaseStyleError, convert, get_style, split_words


def test_builtin_styles():
    assert set(STYLES) == {'kebab', 'camel', 'dot', 'snake', 'pascal'}
    for name, style in STYLES.items():
        assert style.name == name


def test_case_splitting_differs_per_style():
    assert get_style('kebab').split_case is True
    assert get_style('pascal').split_case is True
    assert get_style('camel').split_case is False
    assert get_style('dot').split_case is False


def test_get_style_returns_instances_unchanged():
    style = CaseStyle('shout', '_')
    assert get_style(style) is style


@pytest.mark.parametrize('name', ['KEBAB', 'kebab-case', '', 'title'])
def test_get_style_unknown_name(name):
    with pytest.raises(UnknownCaseStyleError, match='Unknown case style') as exc_info:
        get_style(name)
    assert exc_info.value.code == 'unknown-case-style'
    assert "'kebab'" in str(exc_info.value)


@pytest.mark.parametrize('name', [None, 1, b'kebab'])
def test_get_style_rejects_non_string_names(name):
    with pytest.raises(UnknownCaseStyleError):
        get_style(name)


def test_unknown_style_is_value_error():
    with pytest.raises(ValueError):
        convert('foo', 'screaming')


def test_styles_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        STYLES['kebab'].joiner = '_'


def test_custom_style():
    kebab_digits = dataclasses.replace(STYLES['kebab'], name='kebab-digits', split_digits=True)
    assert convert('item123Name', kebab_digits) == 'item-123-name'
    assert convert('item123Name', 'kebab') == 'item123-name'
    assert split_words('v2Beta', kebab_digits) == ['v', '2', 'beta']


def test_custom_style_casing():
    title_case = CaseStyle('title', ' ', casing='pascal', split_case=True, unicode=True)
    assert convert('hello_worldWide', title_case) == 'Hello World Wide'


@pytest.mark.parametrize(
    'casing,words,result',
    [
        ('lower', ['foo', 'bar'], 'foo-bar'),
        ('lower', ['Foo', 'BAR'], 'foo-bar'),
        ('camel', ['foo', 'bar'], 'foo-Bar'),
        ('pascal', ['foo', 'bar'], 'Foo-Bar'),
        ('camel', [], ''),
        ('pascal', [], ''),
        ('camel', ['foo'], 'foo'),
    ],
)
def test_assemble(casing, words, result):
    assert CaseStyle('test', '-', casing=casing).assemble(words) == result


def test_custom_style_blank_input():
    assert convert('   ', CaseStyle('test', '-')) == ''


@pytest.mark.parametrize('casing', ['upper', 'Camel', '', None])
def test_unknown_casing(casing):
    with pytest.raises(InvalidCaseStyleError, match='Invalid casing') as exc_info:
        CaseStyle('x', '-', casing=casing)
    assert exc_info.value.code == 'invalid-case-style'
    assert isinstance(exc_info.value, ValueError)


def test_replace_revalidates_casing():
    with pytest.raises(InvalidCaseStyleError):
        dataclasses.replace(STYLES['dot'], casing='title')


def test_transform_requires_joiner():
    with pytest.raises(InvalidCaseStyleError, match="'upper' has a transform"):
        CaseStyle('upper', '', transform=str.upper)


def test_transform_style_words():
    upper_snake = CaseStyle('upper-snake', '_', transform=lambda text: '_'.join(text.upper().split()))
    assert split_words('foo bar', upper_snake) == ['FOO', 'BAR']
    assert convert('foo bar', upper_snake) == 'FOO_BAR'


def test_separator_patterns_cache_is_bounded():
    from recase._internal._tokenize import _separator_pattern

    assert _separator_pattern.cache_info().maxsize is not None
