import pytest

from handson.numberlines import main, number_lines


def test_number_lines_format(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"a\nb\n")
    assert number_lines(str(src), str(dst)) == 2
    assert dst.read_bytes() == b"1:a\n2:b\n"


def test_number_lines_round_trip(tmp_path):
    lines = [b"first", b"", b"third line", "日本語".encode()]
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"\r\n".join(lines))
    assert number_lines(str(src), str(dst)) == len(lines)
    out = dst.read_bytes().split(b"\n")
    assert out[-1] == b""
    numbered = out[:-1]
    assert [line.split(b":", 1)[0] for line in numbered] == [
        str(n).encode() for n in range(1, len(lines) + 1)
    ]
    assert [line.split(b":", 1)[1] for line in numbered] == lines


def test_number_lines_empty_file(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"")
    assert number_lines(str(src), str(dst)) == 0
    assert dst.read_bytes() == b""


def test_missing_source_raises(tmp_path):
    src = tmp_path / "missing.txt"
    dst = tmp_path / "out.txt"
    with pytest.raises(OSError, match="ファイルが開けませんでした。"):
        number_lines(str(src), str(dst))
    assert not dst.exists()


def test_unwritable_destination_raises(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"x\n")
    dst = tmp_path / "no-such-dir" / "out.txt"
    with pytest.raises(OSError, match="ファイルを書き出せませんでした。"):
        number_lines(str(src), str(dst))


def test_main_too_few_arguments(capsys):
    assert main(["only-one"]) == 1
    assert capsys.readouterr().err == "引数が足りません。\n"


def test_main_success(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"hello\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_bytes() == b"1:hello\n"


def test_main_reports_missing_file(tmp_path, capsys):
    src = tmp_path / "missing.txt"
    assert main([str(src), str(tmp_path / "out.txt")]) == 1
    assert str(src) in capsys.readouterr().err