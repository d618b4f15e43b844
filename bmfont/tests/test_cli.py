import logging

import pytest

import bmfont
from bmfont.cli import check, init_logger, main, stream_handler


@pytest.fixture
def menu_file(tmp_path, menu_font):
    filepath = tmp_path / 'menu.fnt'
    filepath.write_bytes(menu_font)
    return str(filepath)


def test_dump(menu_file, capsys):
    assert main(['dump', menu_file]) == 0
    out = capsys.readouterr().out
    assert "info face='Arial' size=32" in out
    assert "page id=1 file='menu_1.png'" in out
    assert "chars count=3" in out
    assert "kernings count=2" in out
    assert "kerning first" not in out


def test_dump_kernings(menu_file, capsys):
    assert main(['dump', menu_file, '--kernings']) == 0
    out = capsys.readouterr().out
    assert "kerning first=65 second=86 amount=-2" in out


def test_check(menu_file):
    assert main(['check', menu_file]) == 0


def test_check_problems(packers):
    font = bmfont.decode(
        packers.magic +
        packers.block(2, packers.common(pages=2)) +
        packers.block(3, b'only.png\0') +
        packers.block(4, packers.char(65, page=3)))
    problems = check(font)
    assert len(problems) == 2
    assert "declares 2 pages" in problems[0]
    assert "missing page 3" in problems[1]


def test_invalid_file(tmp_path, capsys):
    filepath = tmp_path / 'bad.fnt'
    filepath.write_bytes(b'nope')
    assert main(['check', str(filepath)]) == 1
    assert "Invalid BMFont header" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(['--version'])
    assert bmfont.__version__ in capsys.readouterr().out


def test_init_logger_adds_handler_once():
    logger = logging.getLogger()
    init_logger(False)
    init_logger(True)
    assert logger.handlers.count(stream_handler) == 1
    assert logger.level == logging.DEBUG
    logger.removeHandler(stream_handler)
    logger.setLevel(logging.WARNING)
