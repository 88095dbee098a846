"""Tests for facet expression parsing and FacetSpec validation."""

import pytest

from gridfacet import (ConfigurationError, FacetSpec, Scales, Space,
                       facet_grid, parse_facets, label_both, label_value)


def test_parse_formula_both_sides():
    assert parse_facets('a + b ~ c') == (('a', 'b'), ('c',))


def test_parse_formula_dot_means_no_variable():
    assert parse_facets('. ~ cyl') == ((), ('cyl',))
    assert parse_facets('cyl ~ .') == (('cyl',), ())


def test_parse_pair_and_mapping():
    assert parse_facets((['a', 'b'], None)) == (('a', 'b'), ())
    assert parse_facets({'cols': 'c'}) == ((), ('c',))


def test_parse_without_tilde_fails():
    with pytest.raises(ConfigurationError):
        parse_facets('a + b')


def test_parse_same_variable_on_both_sides_fails():
    with pytest.raises(ConfigurationError):
        parse_facets('a ~ a')


def test_no_variable_fails():
    with pytest.raises(ConfigurationError, match='at least one variable'):
        facet_grid('. ~ .')
    with pytest.raises(ConfigurationError):
        FacetSpec()


def test_invalid_scales_names_allowed_set():
    with pytest.raises(ConfigurationError) as excinfo:
        FacetSpec(cols='a', scales='loose')
    msg = str(excinfo.value)
    for v in ['fixed', 'free_x', 'free_y', 'free']:
        assert v in msg


def test_invalid_space_fails():
    with pytest.raises(ConfigurationError):
        FacetSpec(cols='a', space='free_x')


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        FacetSpec(cols='a', scales='nope')


def test_free_flags():
    spec = FacetSpec(rows='a', cols='b', scales='free_y', space='free')
    assert spec.scales is Scales.FREE_Y
    assert spec.free == {'x': False, 'y': True}
    assert spec.space is Space.FREE
    assert spec.space_is_free

    spec = FacetSpec(rows='a', scales=Scales.FREE)
    assert spec.free == {'x': True, 'y': True}


def test_spec_is_immutable():
    spec = FacetSpec(cols='a')
    with pytest.raises(AttributeError):
        spec.margins = True


def test_labeller_by_name():
    assert FacetSpec(cols='a').labeller is label_value
    assert FacetSpec(cols='a', labeller='both').labeller is label_both
    assert label_both('cyl', 4) == 'cyl: 4'
    assert FacetSpec(cols='a', labeller='parsed').labeller('a', 'alpha') == '$alpha$'

    with pytest.raises(ConfigurationError):
        FacetSpec(cols='a', labeller='label_nothing')


def test_row_strip_side_checked():
    assert FacetSpec(rows='a', row_strip='left').row_strip == 'left'
    with pytest.raises(ConfigurationError):
        FacetSpec(rows='a', row_strip='top')
