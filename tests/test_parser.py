from io import BytesIO, StringIO

import pytest

from pycfgdiff.cfg import CfgParser, LineKind, parse_line
from pycfgdiff.cfg.parser import is_ascii_compatible


def read(text: str):
    return CfgParser.readstream(BytesIO(text.encode('utf-8')))


@pytest.mark.parametrize('line', ['', '   ', '\t\r\n', '; comment', '   ;x=y'])
def test_blank_lines(line):
    assert parse_line(line).kind is LineKind.BLANK


def test_section_header():
    line = parse_line('  [server]  ; main one')
    assert line.kind is LineKind.SECTION
    assert line.name == 'server'


def test_section_header_keeps_inner_whitespace():
    assert parse_line('[ a b ]').name == ' a b '
    assert parse_line('[]').name == ''


def test_header_wins_over_pair():
    line = parse_line('[a=b]')
    assert line.kind is LineKind.SECTION
    assert line.name == 'a=b'


def test_pair_is_trimmed():
    line = parse_line('  key one =  some value ; comment')
    assert line.kind is LineKind.PAIR
    assert (line.name, line.value) == ('key one', 'some value')


def test_pair_splits_on_first_equal_sign():
    line = parse_line('url = a=b=c')
    assert (line.name, line.value) == ('url', 'a=b=c')


def test_empty_value():
    line = parse_line('k=')
    assert line.kind is LineKind.PAIR
    assert line.value == ''


@pytest.mark.parametrize('line', ['stray prose', '[unbalanced', 'end]'])
def test_unknown_lines(line):
    assert parse_line(line).kind is LineKind.UNKNOWN


def test_read_single_pair():
    cfg = read('[s]\nk = v\n')
    assert len(cfg) == 1
    assert cfg.get_value('s', 'k') == 'v'


def test_read_root_section():
    cfg = read('k=v')
    assert cfg.get_value('root', 'k') == 'v'


def test_last_write_wins():
    cfg = read('[s]\nk=1\nk=2\n')
    assert len(cfg) == 1
    assert cfg.get_value('s', 'k') == '2'


def test_comment_stripped():
    assert read('k=v ; comment').get_value('root', 'k') == 'v'


def test_empty_value_is_present():
    cfg = read('k=')
    assert cfg.get_value('root', 'k') == ''
    assert cfg.get_value('root', 'missing') is None


def test_blank_and_comment_lines_add_nothing():
    assert len(read('\n   \n; a=b\n  ;[x]\n')) == 0


def test_reopened_section_is_one_section():
    cfg = read('[a]\nx=1\n[b]\nx=2\n[a]\nx=3\ny=4\n')
    assert cfg.get_value('a', 'x') == '3'
    assert cfg.get_value('a', 'y') == '4'
    assert cfg.get_value('b', 'x') == '2'
    assert list(cfg.sections) == ['root', 'a', 'b']


def test_malformed_lines_skipped():
    cfg = read('junk\n[s]\nmore junk\nk=v\n')
    assert dict((str(k), v) for k, v in cfg.items()) == {'s.k': 'v'}


def test_undecodable_line_dropped():
    raw = b'[s]\na=1\nb=\xff\xfe\nc=3\n'
    cfg = CfgParser.readstream(BytesIO(raw))
    assert cfg.get_value('s', 'a') == '1'
    assert cfg.get_value('s', 'b') is None
    assert cfg.get_value('s', 'c') == '3'


def test_text_stream():
    cfg = CfgParser.readstream(StringIO('[s]\r\nk = v\r\n'))
    assert cfg.get_value('s', 'k') == 'v'


def test_read_file(tmp_path):
    path = tmp_path / 'app.cfg'
    path.write_bytes('[db]\nhost = 数据库\n'.encode('utf-8'))
    cfg = CfgParser(str(path)).read()
    assert cfg.get_value('db', 'host') == '数据库'


def test_read_file_other_codec(tmp_path):
    path = tmp_path / 'app.cfg'
    path.write_bytes('[db]\nname = café\n'.encode('latin-1'))
    assert CfgParser(str(path)).read().get_value('db', 'name') is None
    cfg = CfgParser(str(path), 'latin-1').read()
    assert cfg.get_value('db', 'name') == 'café'


def test_read_file_auto_codec(tmp_path):
    path = tmp_path / 'app.cfg'
    path.write_bytes(b'[s]\nk = v\n')
    assert CfgParser(str(path), 'auto').read().get_value('s', 'k') == 'v'


def test_detect_codec_falls_back_to_utf8():
    assert CfgParser.detect_codec(b'') == 'utf-8'


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        CfgParser(str(tmp_path / 'nope.cfg')).read()


@pytest.mark.parametrize('codec', ['utf-8', 'latin-1', 'utf-8-sig', 'ascii'])
def test_ascii_compatible(codec):
    assert is_ascii_compatible(codec)


@pytest.mark.parametrize('codec', ['utf-16', 'utf-16-le', 'utf-32'])
def test_not_ascii_compatible(codec):
    assert not is_ascii_compatible(codec)


@pytest.mark.parametrize('codec', ['utf-16', 'utf-16-be', 'utf-32'])
def test_read_wide_codec(codec):
    raw = '[s]\nk = v\nx = 数据\n'.encode(codec)
    cfg = CfgParser.readstream(BytesIO(raw), codec)
    assert cfg.get_value('s', 'k') == 'v'
    assert cfg.get_value('s', 'x') == '数据'


def test_wide_codec_bad_line_dropped():
    raw = ('[s]\na=1\n'.encode('utf-16-le') + b'\x00\xd8'
           + 'b=2\nc=3\n'.encode('utf-16-le'))
    cfg = CfgParser.readstream(BytesIO(raw), 'utf-16-le')
    assert cfg.get_value('s', 'a') == '1'
    assert cfg.get_value('s', 'b') is None
    assert cfg.get_value('s', 'c') == '3'


def test_wide_codec_leaves_stream_open():
    buf = BytesIO('k=v\n'.encode('utf-16'))
    CfgParser.readstream(buf, 'utf-16')
    assert not buf.closed


def test_read_file_auto_utf16(tmp_path):
    path = tmp_path / 'app.cfg'
    path.write_bytes('[s]\nk = v\nx = 1\n'.encode('utf-16'))
    cfg = CfgParser(str(path), 'auto').read()
    assert cfg.get_value('s', 'k') == 'v'
    assert cfg.get_value('s', 'x') == '1'


def test_utf8_bom_stripped(tmp_path):
    path = tmp_path / 'app.cfg'
    path.write_bytes(b'\xef\xbb\xbf[s]\nk = v\n')
    cfg = CfgParser(str(path)).read()
    assert cfg.get_value('s', 'k') == 'v'
    assert cfg.get_value('root', 'k') is None
