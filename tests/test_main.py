"""Tests for the command line."""

import pytest

from src.main import main


WORDS = ["cat", "dog", "tea", "eat", "ate", "set", "sat", "rat", "tar", "art"]


def write_config(tmp_path) -> str:
    wordlist = tmp_path / "wordlist"
    wordlist.write_text("\n".join(WORDS) + "\n")

    config = tmp_path / "config.yaml"
    config.write_text(
        f"wordlist_path: {wordlist}\n"
        f"store_dir: {tmp_path / 'games'}\n"
        "log_level: WARNING\n"
        "generator:\n"
        "  threshold_score: 0\n"
    )
    return str(config)


class TestCommands:
    """Subcommands against a temporary store."""

    def test_generate_then_show(self, tmp_path, capsys):
        """A generated board can be shown."""
        config = write_config(tmp_path)

        assert main(["--config", config, "generate", "--date", "2024-06-01"]) == 0
        assert "Game #1 for 2024-06-01" in capsys.readouterr().out

        assert main(["--config", config, "show", "--date", "2024-06-01"]) == 0
        out = capsys.readouterr().out
        assert "Game #1 for 2024-06-01" in out
        assert "*" in out

    def test_generate_existing(self, tmp_path, capsys):
        """Generating an existing date reports it instead."""
        config = write_config(tmp_path)
        main(["--config", config, "generate", "--date", "2024-06-01"])
        capsys.readouterr()

        assert main(["--config", config, "generate", "--date", "2024-06-01"]) == 0
        assert "already exists" in capsys.readouterr().out

    def test_show_missing(self, tmp_path, capsys):
        """Showing an unknown date is an error."""
        config = write_config(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["--config", config, "show", "--date", "2024-06-01"])
        assert exc.value.code == 1
        assert "no game stored" in capsys.readouterr().err

    def test_validate_invalid_word(self, tmp_path, capsys):
        """Invalid submissions print filtered errors and fail."""
        config = write_config(tmp_path)
        main(["--config", config, "generate", "--date", "2024-06-01"])
        capsys.readouterr()

        assert main(["--config", config, "validate", "--date", "2024-06-01", "zzyzx"]) == 1
        assert "INVALID_WORD" in capsys.readouterr().out

    def test_solve(self, tmp_path, capsys):
        """Solve lists the discoverable word count."""
        config = write_config(tmp_path)
        main(["--config", config, "generate", "--date", "2024-06-01"])
        capsys.readouterr()

        assert main(["--config", config, "solve", "--date", "2024-06-01", "--top", "3"]) == 0
        assert "words on this board" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        """A missing config file is reported."""
        assert main(["--config", str(tmp_path / "nope.yaml"), "fill"]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_wordlist(self, tmp_path, capsys):
        """A missing word list is reported."""
        config = tmp_path / "config.yaml"
        config.write_text(f"wordlist_path: {tmp_path / 'nope'}\n")
        assert main(["--config", str(config), "fill"]) == 1
        assert "Error loading word list" in capsys.readouterr().err
