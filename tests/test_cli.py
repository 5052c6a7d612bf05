import io
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlsplit

import pytest

from symhashkit.cli import main
from symhashkit.demangler import demangle
from symhashkit.hashing import hash_string
from symhashkit.symbols import HEADERS
from symhashkit.tools import inverse_hash_report, kmp_summary
from symhashkit.xortrick import analyze_xor

CSV = '"foo__3BarFi","Bar::foo( int )","Bar::foo(int)",80001234,1600000000\n'


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        url = urlsplit(self.path)
        status = 200
        if url.path == "/list/symbols":
            body = CSV.encode()
        elif url.path == "/list/submit_symbol":
            sym = parse_qs(url.query).get("sym", [""])[0]
            body = b"ok" if sym == "good" else b"already known"
        else:
            status = 404
            body = b"missing"
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}/list"
    httpd.shutdown()
    httpd.server_close()


def test_hash_default_seed(capsys):
    assert main(["hash", "abc"]) == 0
    assert capsys.readouterr().out == f"0x{hash_string('abc'):x}\n"


def test_hash_custom_seed(capsys):
    assert main(["hash", "abc", "--seed", "1234"]) == 0
    assert capsys.readouterr().out == f"0x{hash_string('abc', 0x1234):x}\n"


def test_inverse(capsys):
    assert main(["inverse", "deadbeef", "xyz"]) == 0
    assert capsys.readouterr().out == inverse_hash_report("deadbeef", "xyz")


def test_demangle_arguments(capsys):
    assert main(["demangle", "foo__3BarFi", "plain"]) == 0
    assert capsys.readouterr().out == "Bar::foo( int )\nplain\n"


def test_demangle_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("baz__Fv\nqux\n"))
    assert main(["demangle"]) == 0
    assert capsys.readouterr().out == demangle("baz__Fv") + "\nqux\n"


def test_xor_zero(capsys):
    assert main(["xor", "0"]) == 0
    assert capsys.readouterr().out == (
        "XOR = 0 -> (none), 11, 22, 33, 44, 55, 66, 77, 88, 99\n"
    )


def test_xor_with_chars(capsys):
    assert main(["xor", "1f_2a", "ab"]) == 0
    assert capsys.readouterr().out == str(analyze_xor("1f_2a", "ab")) + "\n"


def test_kmp(capsys):
    args = ["kmp", "--prefix1", "p1", "--suffix1", "s1", "--prefix2", "p2"]
    assert main(args) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [kmp_summary("p1", "s1"), kmp_summary("p2", "")]


def test_dictionary_custom(capsys, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("Bar\nBaz\n", encoding="utf-8")
    h1 = hash_string("fooBarBaz")
    h2 = hash_string("XBarBazY")
    args = [
        "dictionary", "--wordlist", str(words),
        "--hash1", f"{h1:x}", "--hash2", f"{h2:x}",
        "--prefix1", "foo", "--prefix2", "X", "--suffix2", "Y", "--custom",
    ]
    assert main(args) == 0
    assert "fooBarBaz" in capsys.readouterr().out.splitlines()


def test_dictionary_no_results(capsys, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("Bar\n", encoding="utf-8")
    h1 = hash_string("fooQuux")
    args = [
        "dictionary", "--wordlist", str(words),
        "--hash1", f"{h1:x}", "--hash2", "1", "--prefix1", "foo",
    ]
    assert main(args) == 0
    assert capsys.readouterr().out == "No collisions found.\n"


def test_dictionary_missing_wordlist(capsys, tmp_path):
    args = [
        "dictionary", "--wordlist", str(tmp_path / "absent.txt"),
        "--hash1", "1", "--hash2", "2",
    ]
    assert main(args) == 1
    assert "Error reading word list" in capsys.readouterr().err


def test_symbols(capsys, server):
    assert main(["symbols", "--base-url", server]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\t".join(HEADERS)
    assert lines[1].split("\t")[:4] == [
        "foo__3BarFi", "Bar::foo( int )", "Bar::foo(int)", "0x80001234"
    ]
    assert len(lines) == 2


def test_symbols_error(capsys, server):
    assert main(["symbols", "--base-url", server + "/gone"]) == 1
    assert "Error loading symbol list" in capsys.readouterr().err


def test_submit_ok(capsys, server):
    assert main(["submit", "good", "--base-url", server]) == 0
    assert capsys.readouterr().out == "Symbol added to database!\n"


def test_submit_rejected(capsys, server):
    assert main(["submit", "bad", "--base-url", server]) == 1
    assert "already known" in capsys.readouterr().err


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2