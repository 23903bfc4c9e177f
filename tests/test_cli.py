import io

import pytest

from cdl_fixer.cli import build_parser, main


def test_file_to_file(tmp_path, inv_netlist):
    src = tmp_path / "in.cdl"
    dst = tmp_path / "out.cdl"
    src.write_text(inv_netlist)

    assert main(["-i", str(src), "-o", str(dst)]) == 0
    text = dst.read_text()
    assert text.startswith("*" * 72 + "\n* Generated by cdl-fixer\n")
    assert "MN1 Y A VSS VSS nch w=1u l=180n fingers=2 fw=500n\n" in text


def test_stdin_to_stdout_with_soc_module(tmp_path, monkeypatch, capsys, inv_netlist, inv_descriptor):
    descriptor = tmp_path / "inv.soc_mod"
    descriptor.write_text(inv_descriptor)
    monkeypatch.setattr("sys.stdin", io.StringIO(inv_netlist))

    code = main(["--no-header", "--no-param", "--soc-module", str(descriptor)])
    out = capsys.readouterr().out

    assert code == 0
    assert out.splitlines()[:2] == [".SUBCKT inv A Y VDD VSS", "*.PININFO A:I Y:O VDD:B VSS:B"]


def test_all_passes_disabled(monkeypatch, capsys, inv_netlist):
    monkeypatch.setattr("sys.stdin", io.StringIO(inv_netlist))
    code = main(["--no-header", "--no-param", "--no-case-conversion", "--no-calc-data"])
    assert code == 0
    assert capsys.readouterr().out == inv_netlist.replace("\n\n", "\n")


def test_missing_input_fails_without_output(tmp_path, capsys):
    dst = tmp_path / "out.cdl"
    code = main(["-i", str(tmp_path / "missing.cdl"), "-o", str(dst)])

    assert code == 1
    assert "Failed to open file" in capsys.readouterr().err
    assert not dst.exists()


def test_missing_soc_module_fails_without_output(tmp_path, capsys, inv_netlist):
    src = tmp_path / "in.cdl"
    src.write_text(inv_netlist)
    dst = tmp_path / "out.cdl"

    code = main(["-i", str(src), "-o", str(dst), "-m", str(tmp_path / "missing.soc_mod")])
    assert code == 1
    assert "missing.soc_mod" in capsys.readouterr().err
    assert not dst.exists()


def test_parser_flags():
    args = build_parser().parse_args(["--no-calc-data", "-m", "x.soc_mod"])
    assert args.no_calc_data is True
    assert str(args.soc_module) == "x.soc_mod"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--bogus"])


def test_invalid_utf8_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"R1 a b 1k\n\xff\xfe\n"), encoding="utf-8"))

    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Failed to open file: <stdin>" in captured.err
    assert captured.out == ""
