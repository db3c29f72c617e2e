import pytest

from osiconf import ConfigClass, ConfigParser, StaleCursorError


def walk(conf):
    ret = []
    it = conf.section_begin()
    while it != conf.section_end():
        ret.append(it.name)
        it = it.next()
    return ret


def test_walk_in_order():
    conf = ConfigParser.loads('[B]\nk=1\n[A]\nk=1\n[Empty]\n[C]\nk=1\n')
    assert walk(conf) == ['B', 'A', 'C']


def test_empty_config_begin_is_end():
    conf = ConfigClass()
    assert conf.section_begin() == conf.section_end()
    assert conf.section_begin().is_end


def test_end_cursor_has_no_name():
    conf = ConfigParser.loads('[A]\nk=1\n')
    end = conf.section_end()
    with pytest.raises(IndexError):
        end.name
    with pytest.raises(IndexError):
        end.next()


def test_emptied_sections_not_visited():
    conf = ConfigParser.loads('[A]\nk=1\n[B]\nk=1\n')
    conf.remove_key('A', 'k')
    assert walk(conf) == ['B']


def test_mutation_invalidates_cursors():
    conf = ConfigParser.loads('[A]\nk=1\n[B]\nk=1\n')
    it = conf.section_begin()
    conf.set_string('A', 'k', '2')
    with pytest.raises(StaleCursorError):
        it.name
    with pytest.raises(StaleCursorError):
        it.next()
    with pytest.raises(StaleCursorError):
        it == conf.section_end()


def test_reads_do_not_invalidate():
    conf = ConfigParser.loads('[A]\nk=1\n')
    it = conf.section_begin()
    conf.get_int('A', 'k', 0)
    conf.has_section('A')
    conf.clone().set_string('A', 'k', '2')
    assert it.name == 'A'


def test_cursors_share_names_within_generation():
    conf = ConfigClass()
    for i in range(200):
        conf.set_int(f'S{i}', 'n', i)
    assert walk(conf) == [f'S{i}' for i in range(200)]
    names = conf._section_names()
    assert conf.section_begin().next()._names is names
    assert conf.section_end()._names is names
    conf.remove_section('S0')
    assert conf._section_names() is not names
    assert walk(conf)[0] == 'S1'


def test_clone_cursor_sees_sections():
    conf = ConfigParser.loads('[A]\nk=1\n[B]\nk=1\n')
    assert walk(conf.clone()) == ['A', 'B']
