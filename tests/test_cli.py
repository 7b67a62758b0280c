"""Tests for the CLI interface."""

import pytest

from genocompare.cli import main


class TestCLI:
    def test_compare_json(self, raw_data_file, api_json_file, key_file, capsys):
        code = main(["-r", raw_data_file, "-a", api_json_file, "-k", key_file])
        captured = capsys.readouterr()

        assert code == 0
        assert "APICall: AG\tRawDataCall: GA\tTotal: 1\t" in captured.out
        assert "APICall: CC\tRawDataCall: \tTotal: 1\t" in captured.out
        assert "GG" not in captured.out
        assert "Same: 5, Mismatches: 2, Same: 71.428571%" in captured.out

    def test_compare_raw_format(self, raw_data_file, api_raw_file, key_file, capsys):
        code = main(["-r", raw_data_file, "-a", api_raw_file, "-k", key_file,
                     "--api-format", "raw"])

        assert code == 0
        assert "Same: 5, Mismatches: 2" in capsys.readouterr().out

    def test_no_false_alarms(self, raw_data_file, api_json_file, key_file, capsys):
        main(["-r", raw_data_file, "-a", api_json_file, "-k", key_file, "--no-false-alarms"])
        out = capsys.readouterr().out

        assert "APICall: GG\tRawDataCall: G\tTotal: 1\t" in out
        assert "Same: 4, Mismatches: 3" in out

    def test_csv_output(self, raw_data_file, api_json_file, key_file, tmp_path):
        csv_path = tmp_path / "out.csv"
        main(["-r", raw_data_file, "-a", api_json_file, "-k", key_file, "--csv", str(csv_path)])

        content = csv_path.read_text()
        assert content.startswith("api_call,raw_call,count,snps")
        assert "AG,GA,1,rs3" in content

    @pytest.mark.parametrize("missing", ["-r", "-a", "-k"])
    def test_missing_required_flag(self, raw_data_file, api_json_file, key_file, missing, capsys):
        flags = {"-r": raw_data_file, "-a": api_json_file, "-k": key_file}
        del flags[missing]
        argv = [item for pair in flags.items() for item in pair]

        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err

    def test_missing_input_file(self, api_json_file, key_file, tmp_path, capsys):
        code = main(["-r", str(tmp_path / "nope.txt"), "-a", api_json_file, "-k", key_file])

        assert code == 1
        assert "Error during comparison" in capsys.readouterr().err

    def test_strict_mode_fails_on_bad_key(self, raw_data_file, api_json_file, tmp_path, capsys):
        key = tmp_path / "bad.data"
        key.write_text("0\trs0\nbad\trs1\n")

        code = main(["-r", raw_data_file, "-a", api_json_file, "-k", str(key), "--strict"])

        assert code == 1
        assert "bad.data:2" in capsys.readouterr().err

    def test_no_arguments_prints_usage(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        assert "-r RAWDATA" in capsys.readouterr().err

    def test_non_utf8_raw_data(self, api_json_file, key_file, tmp_path, capsys):
        raw = tmp_path / "raw.txt"
        raw.write_bytes(b"# Caf\xe9 export\nrs0\t1\t1\tAA\nrs1\t1\t2\t\xff\xfe\n")

        code = main(["-r", str(raw), "-a", api_json_file, "-k", key_file])
        out = capsys.readouterr().out

        assert code == 0
        assert "APICall: AG\tRawDataCall: \ufffd\ufffd\tTotal: 1\t" in out
