"""
Tests for the command line entry point.
"""
import pytest

import main


def test_main_prints_report(transaction_file, capsys):
    path = transaction_file("1001 100 37", "1007 20 30")
    main.main([path])

    out = capsys.readouterr().out
    assert out.startswith("Welcome to Banked Bums\n")
    assert "1: 1001, $100, $37\nDeposit amount ($): 63\n" in out
    assert "2: 1007, $20, $30\nError: amount received must be >= amount returned.\n" in out
    assert out.endswith(f"2 line(s) read from file '{path}'.\n\nEnd of Banked Bums\n")


def test_main_missing_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main.main([str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 1
    assert capsys.readouterr().out.endswith("Error: unable to open input file.\n")


def test_main_invalid_configuration_exits_1(monkeypatch, transaction_file):
    monkeypatch.setenv("DENOMINATIONS", "[5, 2]")
    with pytest.raises(SystemExit) as exc_info:
        main.main([transaction_file("1 10 0")])
    assert exc_info.value.code == 1


def test_main_skip_malformed(transaction_file, capsys):
    path = transaction_file("1 10 0", "garbage", "3 30 0")
    main.main([path, "--skip-malformed"])
    assert "2 line(s) read from file" in capsys.readouterr().out


def test_main_export(transaction_file, tmp_path):
    target = tmp_path / "results.xlsx"
    main.main([transaction_file("1 10 5"), "--export", str(target)])
    assert target.exists()


def test_main_export_to_default_directory(monkeypatch, transaction_file, tmp_path):
    export_dir = tmp_path / "exports"
    monkeypatch.setenv("EXPORT_DIR", str(export_dir))
    main.main([transaction_file("1 10 5"), "--export"])
    assert len(list(export_dir.glob("transactions_processed_*.xlsx"))) == 1


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.input_file is None
    assert args.export is None
    assert args.skip_malformed is False
    assert args.log_level is None


def test_parse_args_log_level_normalized():
    assert main.parse_args(["--log-level", "info"]).log_level == "INFO"


def test_main_binary_input_reports_summary(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1001 100 37\n\xff\xfe 5 5\n1003 10 0\n")

    main.main([str(path)])

    out = capsys.readouterr().out
    assert "1: 1001, $100, $37" in out
    assert f"1 line(s) read from file '{path}'." in out


def test_main_unexpected_error_exits_1(monkeypatch, transaction_file):
    def fail(self, *args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(main.TransactionService, "process_file", fail)
    with pytest.raises(SystemExit) as exc_info:
        main.main([transaction_file("1 10 0")])
    assert exc_info.value.code == 1
