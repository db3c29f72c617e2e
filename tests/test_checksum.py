import os

from osiconf import ChecksumFile, checksum_read, checksum_save


def test_save_then_read(tmp_path):
    path = tmp_path / 'bt_config.conf.encrypted-checksum'
    assert checksum_save('abc123', path)
    assert checksum_read(path) == 'abc123'


def test_save_overwrites(tmp_path):
    path = tmp_path / 'checksum'
    path.write_text('a much longer former checksum', encoding='utf-8')
    assert checksum_save('abc123', path)
    assert checksum_read(path) == 'abc123'


def test_kept_verbatim(tmp_path):
    path = tmp_path / 'checksum'
    assert checksum_save('line1\r\nline2\n', path)
    assert checksum_read(path) == 'line1\r\nline2\n'


def test_read_missing_is_empty(tmp_path):
    assert checksum_read(tmp_path / 'missing') == ''
    assert ChecksumFile(tmp_path / 'missing').read() is None


def test_save_failure_reported(tmp_path):
    assert not checksum_save('abc123', tmp_path / 'no' / 'such' / 'checksum')


def test_unencodable_checksum_reported(tmp_path):
    path = tmp_path / 'checksum'
    assert not checksum_save('\udc80', path)
    assert os.listdir(tmp_path) == []
