import pytest

from osiconf import ConfigClass, ConfigParser


@pytest.fixture
def conf():
    return ConfigParser.loads(
        '[Global]\nfoo=bar\n'
        '[Dev]\nx=5\nneg=-12\nhex=0x1F\noct=017\nzero=0\n'
        'bad=notanumber\ntrailing=12abc\nspaced=1 2\n'
        'big=65536\nport=65535\nhuge=18446744073709551615\n'
        'over=18446744073709551616\nyes=true\nno=false\nYes=True\none=1\n')


def test_get_string(conf):
    assert conf.get_string('Global', 'foo', '') == 'bar'
    assert conf.get_string('Global', 'missing', 'dflt') == 'dflt'
    assert conf.get_string('Missing', 'foo') is None


def test_get_int(conf):
    assert conf.get_int('Dev', 'x', 0) == 5
    assert conf.get_int('Dev', 'neg', 0) == -12
    assert conf.get_int('Dev', 'zero', 7) == 0
    assert conf.get_int('Dev', 'missing', 42) == 42
    assert conf.get_int('Dev', 'bad', 42) == 42
    assert conf.get_int('Dev', 'trailing', 42) == 42
    assert conf.get_int('Dev', 'spaced', 42) == 42
    # out of C int range
    assert conf.get_int('Dev', 'huge', 42) == 42


def test_get_int_bases(conf):
    assert conf.get_int('Dev', 'hex', 0) == 31
    assert conf.get_int('Dev', 'oct', 0) == 15


def test_get_bool_exact(conf):
    assert conf.get_bool('Dev', 'yes', False) is True
    assert conf.get_bool('Dev', 'no', True) is False
    assert conf.get_bool('Dev', 'Yes', False) is False
    assert conf.get_bool('Dev', 'one', False) is False
    assert conf.get_bool('Dev', 'missing', True) is True


def test_get_uint16(conf):
    assert conf.get_uint16('Dev', 'port', 0) == 65535
    assert conf.get_uint16('Dev', 'big', 7) == 7
    assert conf.get_uint16('Dev', 'neg', 7) == 7
    assert conf.get_uint16('Dev', 'bad', 7) == 7


def test_get_uint64(conf):
    assert conf.get_uint64('Dev', 'huge', 0) == (1 << 64) - 1
    assert conf.get_uint64('Dev', 'over', 3) == 3
    assert conf.get_uint64('Dev', 'neg', 3) == 3
    assert conf.get_uint64('Dev', 'x', 0) == 5


def test_typed_setters_store_canonical_text():
    conf = ConfigClass()
    conf.set_int('A', 'i', -40)
    conf.set_uint16('A', 'u16', 8080)
    conf.set_uint64('A', 'u64', 1 << 63)
    conf.set_bool('A', 't', True)
    conf.set_bool('A', 'f', False)
    conf.set_string('A', 's', 'text')
    assert conf['A'].to_dict() == {
        'i': '-40',
        'u16': '8080',
        'u64': str(1 << 63),
        't': 'true',
        'f': 'false',
        's': 'text',
    }
    assert conf.get_int('A', 'i', 0) == -40
    assert conf.get_uint64('A', 'u64', 0) == 1 << 63
    assert conf.get_bool('A', 't', False) is True


def test_typed_setter_overrides_in_place():
    conf = ConfigParser.loads('[A]\nn=1\nm=2\n')
    conf.set_int('A', 'n', 10)
    assert list(conf['A'].items()) == [('n', '10'), ('m', '2')]


def test_typed_setters_reject_out_of_range():
    conf = ConfigClass()
    with pytest.raises(ValueError):
        conf.set_uint16('A', 'k', 65536)
    with pytest.raises(ValueError):
        conf.set_uint16('A', 'k', -1)
    with pytest.raises(ValueError):
        conf.set_uint64('A', 'k', 1 << 64)
    with pytest.raises(ValueError):
        conf.set_int('A', 'k', 1 << 31)
    assert not conf.has_section('A')
