"""
Tests for the identicon command line entry point.
"""

import json

from identicon import main


class TestCommandLine:
    """Tests for identicon.main."""

    def test_writes_file(self, output_dir, monkeypatch, capsys):
        monkeypatch.chdir(output_dir)
        monkeypatch.delenv("IDENTICON_CONFIG", raising=False)

        status = main(["asdf"])

        assert status == 0
        assert (output_dir / "asdf.png").exists()
        assert "asdf.png" in capsys.readouterr().out

    def test_missing_argument(self, capsys):
        status = main([])

        assert status == 1
        assert "Usage:" in capsys.readouterr().out

    def test_too_many_arguments(self, capsys):
        assert main(["a", "b"]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_config_from_environment(self, tmp_path, monkeypatch):
        out = tmp_path / "out"
        config_path = tmp_path / "identicon.json"
        config_path.write_text(json.dumps({"output_dir": str(out)}))
        monkeypatch.setenv("IDENTICON_CONFIG", str(config_path))

        assert main(["asdf"]) == 0
        assert (out / "asdf.png").exists()

    def test_bad_config_reports_error(self, tmp_path, monkeypatch, capsys):
        config_path = tmp_path / "identicon.json"
        config_path.write_text("{broken")
        monkeypatch.setenv("IDENTICON_CONFIG", str(config_path))

        assert main(["asdf"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_persistence_error_reports_error(self, output_dir, monkeypatch, capsys):
        monkeypatch.chdir(output_dir)
        monkeypatch.delenv("IDENTICON_CONFIG", raising=False)

        assert main(["../escape"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_empty_seed_writes_png(self, output_dir, monkeypatch):
        monkeypatch.chdir(output_dir)
        monkeypatch.delenv("IDENTICON_CONFIG", raising=False)

        assert main([""]) == 0
        assert (output_dir / ".png").exists()

    def test_null_byte_seed_reports_error(self, output_dir, monkeypatch, capsys):
        monkeypatch.chdir(output_dir)
        monkeypatch.delenv("IDENTICON_CONFIG", raising=False)

        assert main(["a\x00b"]) == 1
        assert "Error:" in capsys.readouterr().out
        assert list(output_dir.iterdir()) == []

    def test_malformed_background_reports_error(self, tmp_path, monkeypatch, capsys):
        config_path = tmp_path / "identicon.json"
        config_path.write_text(json.dumps({"background_color": 5}))
        monkeypatch.setenv("IDENTICON_CONFIG", str(config_path))

        assert main(["asdf"]) == 1
        assert "Error:" in capsys.readouterr().out
