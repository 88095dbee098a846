"""Tests for Theme configuration and YAML loading."""

import copy
import io
import pickle

import pytest

from gridfacet import ConfigurationError, Theme, Unit, load_theme


def test_defaults():
    theme = Theme()
    assert theme.panel_margin == Unit(0.25, 'lines')
    assert theme.aspect_ratio is None


def test_replace_returns_new_theme():
    theme = Theme()
    other = theme.replace(aspect_ratio=2)
    assert other.aspect_ratio == 2.
    assert theme.aspect_ratio is None


def test_theme_is_immutable():
    with pytest.raises(AttributeError):
        Theme().aspect_ratio = 1


def test_theme_copies_equal():
    theme = Theme(aspect_ratio=2., panel_margin=[3, 'mm'])
    assert copy.copy(theme) == theme
    assert copy.deepcopy(theme) == theme
    assert pickle.loads(pickle.dumps(theme)) == theme


def test_unknown_field_fails():
    with pytest.raises(ConfigurationError, match='unknown theme field'):
        Theme(panel_spacing=1)


def test_bad_aspect_ratio_fails():
    with pytest.raises(ConfigurationError):
        Theme(aspect_ratio=-1)


def test_panel_margin_forms():
    assert Theme(panel_margin=0.5).panel_margin == Unit(0.5, 'cm')
    assert Theme(panel_margin=[2, 'mm']).panel_margin == Unit(2, 'mm')
    with pytest.raises(ConfigurationError):
        Theme(panel_margin=[1, 'null'])
    with pytest.raises(ConfigurationError):
        Theme(panel_margin=[1, 'furlong'])


def test_load_theme_from_yaml():
    text = (
        'panel_margin: [0.3, cm]\n'
        'strip_text_size: 9\n'
        'aspect_ratio: 0.5\n'
    )
    theme = load_theme(io.StringIO(text))
    assert theme.panel_margin == Unit(0.3, 'cm')
    assert theme.strip_text_size == 9
    assert theme.aspect_ratio == 0.5


def test_load_empty_yaml_gives_defaults(tmp_path):
    fname = tmp_path / 'theme.yaml'
    fname.write_text('')
    assert load_theme(str(fname)) == Theme()
