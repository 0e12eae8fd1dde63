import base64
import io
import re
import sys
from pathlib import Path

import pytest
from PIL import Image

from viuer.config import Config
from viuer.errors import InvalidConfigurationError, KittyNotSupportedError, KittyResponseError
from viuer.kitty import (
    TEMP_FILE_PREFIX,
    KittyPrinter,
    KittySupport,
    check_kitty_support,
    get_kitty_support,
    has_local_support,
    print_local,
    print_remote,
    store_in_tmp_file,
)


@pytest.fixture(autouse=True)
def _terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    monkeypatch.setattr(sys, "stdin", io.StringIO())
    get_kitty_support.cache_clear()
    yield
    get_kitty_support.cache_clear()


def test_print_local():
    img = Image.new("RGBA", (40, 25))
    config = Config(x=4, y=3)
    out = io.StringIO()

    assert print_local(out, img, config) == (40, 13)
    result = out.getvalue()
    assert result.startswith("\x1b[4;5H\x1b_Gf=32,s=40,v=25,c=40,r=13,a=T,t=t;")
    assert result.endswith("\x1b\\\n")


def test_print_local_removes_temp_file():
    img = Image.new("RGBA", (3, 3))
    out = io.StringIO()
    print_local(out, img, Config(absolute_offset=False))
    payload = re.search(r"t=t;([^\x1b]*)\x1b\\", out.getvalue()).group(1)
    path = Path(base64.b64decode(payload).decode())
    assert path.name.startswith(TEMP_FILE_PREFIX)
    assert not path.exists()


def test_print_remote():
    img = Image.new("RGBA", (1, 2))
    img.putpixel((0, 1), (2, 4, 6, 8))
    config = Config(x=2, y=5)
    out = io.StringIO()

    assert print_remote(out, img, config) == (1, 1)
    assert out.getvalue() == "\x1b[6;3H\x1b_Gf=32,a=T,t=d,s=1,v=2,c=1,r=1,m=1;AAAAAAIEBgg=\x1b\\\n"


def test_print_remote_chunks_round_trip():
    img = Image.new("RGBA", (40, 30), (10, 20, 30, 40))
    out = io.StringIO()
    print_remote(out, img, Config(absolute_offset=False))
    text = out.getvalue()

    payloads = re.findall(r"m=(\d);([^\x1b]*)\x1b\\", text)
    flags = [flag for flag, _ in payloads]
    assert flags[0] == "1"
    assert flags[-1] == "0"
    assert all(len(chunk) <= 4096 for _, chunk in payloads)
    joined = "".join(chunk for _, chunk in payloads)
    assert base64.b64decode(joined) == img.tobytes()


def test_print_remote_rejects_negative_absolute_offset():
    img = Image.new("RGBA", (2, 2))
    with pytest.raises(InvalidConfigurationError):
        print_remote(io.StringIO(), img, Config(absolute_offset=True, y=-1))


def test_store_in_tmp_file_writes_content():
    path = store_in_tmp_file(b"\x01\x02\x03")
    try:
        assert path.read_bytes() == b"\x01\x02\x03"
        assert path.name.startswith(TEMP_FILE_PREFIX)
    finally:
        path.unlink(missing_ok=True)


def test_has_local_support_fails_without_tty(capsys):
    with pytest.raises(KittyResponseError):
        has_local_support()
    query = capsys.readouterr().out
    match = re.fullmatch(r"\x1b_Gi=31,s=1,v=1,a=q,t=t;([^\x1b]*)\x1b\\", query)
    assert match is not None
    path = Path(base64.b64decode(match.group(1)).decode())
    assert not path.exists()


def test_check_kitty_support_without_term(monkeypatch):
    monkeypatch.delenv("TERM", raising=False)
    assert check_kitty_support() is KittySupport.NONE


def test_check_kitty_support_other_term(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    assert check_kitty_support() is KittySupport.NONE


@pytest.mark.parametrize("term", ["xterm-kitty", "xterm-ghostty"])
def test_check_kitty_support_remote_without_tty(monkeypatch, capsys, term):
    monkeypatch.setenv("TERM", term)
    assert check_kitty_support() is KittySupport.REMOTE


def test_kitty_printer_not_supported(monkeypatch):
    monkeypatch.delenv("TERM", raising=False)
    with pytest.raises(KittyNotSupportedError):
        KittyPrinter().print(io.StringIO(), Image.new("RGBA", (2, 2)), Config())


def test_kitty_printer_remote(monkeypatch, capsys):
    monkeypatch.setenv("TERM", "xterm-kitty")
    img = Image.new("RGBA", (1, 2))
    img.putpixel((0, 1), (2, 4, 6, 8))
    out = io.StringIO()
    assert KittyPrinter().print(out, img, Config(x=2, y=5)) == (1, 1)
    assert out.getvalue() == "\x1b[6;3H\x1b_Gf=32,a=T,t=d,s=1,v=2,c=1,r=1,m=1;AAAAAAIEBgg=\x1b\\\n"