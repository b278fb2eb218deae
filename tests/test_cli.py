"""Tests for the command-line entry points."""

import shutil
import subprocess
import sys

import numpy as np
import pytest
from PIL import Image

from palimpsest import cli, render_cli


def _run(monkeypatch, module, *argv):
    monkeypatch.setattr(sys, "argv", [module.build_parser().prog, *argv])
    module.main()


class TestRenderCli:
    def test_lengths_to_png(self, monkeypatch, tmp_path, capsys):
        out = tmp_path / "out.png"
        _run(
            monkeypatch, render_cli,
            "--lengths", "0", "120",
            "--width", "160", "--height", "120",
            "--seed", "3",
            "-o", str(out),
        )
        arr = np.array(Image.open(out).convert("RGB"))
        assert arr.shape == (120, 160, 3)
        assert arr.min() < 255
        assert "max chaos 0.30" in capsys.readouterr().out

    def test_typed_file_erodes_everything(self, monkeypatch, tmp_path):
        typed = tmp_path / "typed.txt"
        typed.write_text("x" * 400, encoding="utf-8")
        out = tmp_path / "gone.png"
        _run(
            monkeypatch, render_cli, str(typed),
            "--width", "96", "--height", "64",
            "--chars-per-frame", "100",
            "--backspace", "400",
            "-o", str(out),
        )
        arr = np.array(Image.open(out).convert("RGB"))
        assert arr.min() == 255

    def test_custom_paragraph(self, monkeypatch, tmp_path):
        paragraph = tmp_path / "para.txt"
        paragraph.write_text("short\nlines\n", encoding="utf-8")
        out = tmp_path / "para.png"
        _run(
            monkeypatch, render_cli,
            "--lengths", "0",
            "--paragraph", str(paragraph),
            "--width", "96", "--height", "64",
            "-o", str(out),
        )
        assert out.exists()

    def test_missing_typed_file(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, render_cli, str(tmp_path / "missing.txt"))
        assert exc.value.code == 1

    def test_unsupported_output(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, render_cli, "--lengths", "0", "-o", str(tmp_path / "x.gif"))
        assert exc.value.code == 1

    def test_requires_input(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, render_cli)
        assert exc.value.code == 2

    def test_non_positive_max_length(self, monkeypatch, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(
                monkeypatch, render_cli,
                "--lengths", "5", "--max-length", "0",
                "-o", str(tmp_path / "x.png"),
            )
        assert exc.value.code == 1
        assert "Error: --max-length must be positive" in capsys.readouterr().err

    def test_empty_paragraph_file(self, monkeypatch, tmp_path, capsys):
        paragraph = tmp_path / "empty.txt"
        paragraph.write_text("\n\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            _run(
                monkeypatch, render_cli,
                "--lengths", "0", "--paragraph", str(paragraph),
                "-o", str(tmp_path / "x.png"),
            )
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    @pytest.mark.skipif(
        not (shutil.which("ffmpeg") and shutil.which("ffprobe")),
        reason="ffmpeg/ffprobe not installed",
    )
    def test_lengths_to_mp4(self, monkeypatch, tmp_path, capsys):
        out = tmp_path / "out.mp4"
        _run(
            monkeypatch, render_cli,
            "--lengths", "0", "400",
            "--hold", "0.5", "-f", "10",
            "--width", "96", "--height", "64",
            "-q", "fast",
            "-o", str(out),
        )
        assert out.exists()
        # Two replayed frames plus five held ones
        counted = subprocess.run(
            [
                "ffprobe", "-v", "error", "-count_frames",
                "-select_streams", "v:0",
                "-show_entries", "stream=nb_read_frames",
                "-of", "csv=p=0", str(out),
            ],
            capture_output=True, text=True, check=True,
        )
        assert int(counted.stdout.strip()) == 7
        assert "frame 7/7" in capsys.readouterr().out


class TestInteractiveCli:
    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert (args.width, args.height) == (1280, 800)
        assert args.max_length == 400
        assert not args.no_input

    def test_missing_paragraph(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, cli, "--paragraph", str(tmp_path / "missing.txt"))
        assert exc.value.code == 1

    def test_empty_paragraph_file(self, monkeypatch, tmp_path, capsys):
        paragraph = tmp_path / "empty.txt"
        paragraph.write_text("", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, cli, "--paragraph", str(paragraph))
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_non_positive_max_length(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, cli, "--max-length", "-3")
        assert exc.value.code == 1
        assert "Error: --max-length must be positive, got -3" in capsys.readouterr().err
