"""Tests for main.py CLI functionality."""

import json
import os
from unittest.mock import patch

import pytest

from media_optimizer.main import main

CONFIG_ARGS = [
    "--imagekit-id",
    "demo",
    "--supabase-url",
    "https://xyz.supabase.co",
    "--bucket",
    "uploads",
]


def _run(argv, capsys):
    main(argv)
    return json.loads(capsys.readouterr().out)


class TestMainCLI:
    """Tests for the main CLI functionality."""

    def test_main_with_no_args_shows_help(self):
        """Test that running main without arguments shows help."""
        with patch("sys.argv", ["media-optimizer"]):
            with patch("argparse.ArgumentParser.print_help") as mock_help:
                with patch("sys.exit") as mock_exit:
                    main()
                    mock_help.assert_called_once()
                    mock_exit.assert_called_once_with(1)

    def test_main_version_command(self):
        """Test version command output."""
        with patch("builtins.print") as mock_print:
            with patch("sys.exit") as mock_exit:
                main(["version"])
                mock_print.assert_any_call("Media Optimizer CLI")
                mock_print.assert_any_call("Version 2.0.0")
                mock_exit.assert_called_once_with(0)

    def test_resolve_command(self, capsys):
        payload = _run(
            ["resolve", "images/a.jpg", "--width", "800", "--quality", "85",
             "--format", "webp", "--fit", "cover", *CONFIG_ARGS],
            capsys,
        )
        assert payload["primary_url"] == (
            "https://ik.imagekit.io/demo/tr:w-800,q-85,c-maintain_ratio,f-webp/images/a.jpg"
        )
        assert payload["provider"] == "imagekit"
        assert "src_set" not in payload

    def test_resolve_with_srcset(self, capsys):
        payload = _run(["resolve", "x.jpg", "--with-srcset", *CONFIG_ARGS], capsys)
        assert payload["src_set"].endswith("1920w")

    def test_resolve_force_backup_and_sharpen(self, capsys):
        payload = _run(
            ["resolve", "x.jpg", "--sharpen", "--force-backup", *CONFIG_ARGS], capsys
        )
        assert payload["provider"] == "supabase"
        assert payload["primary_url"] == payload["backup_url"]

    def test_srcset_command(self, capsys):
        payload = _run(["srcset", "x.jpg", "--widths", "320,640", *CONFIG_ARGS], capsys)
        assert payload["src_set"].count(", ") == 1
        assert payload["src_set"].endswith(" 640w")

    def test_config_from_environment(self, capsys):
        env = {
            "MEDIA_IMAGEKIT_ID": "envid",
            "MEDIA_SUPABASE_URL": "https://env.supabase.co",
            "MEDIA_SUPABASE_BUCKET": "media",
        }
        with patch.dict(os.environ, env):
            payload = _run(["resolve", "x.jpg"], capsys)
        assert payload["primary_url"].startswith("https://ik.imagekit.io/envid/")
        assert payload["backup_url"].startswith(
            "https://env.supabase.co/storage/v1/render/image/public/media/x.jpg"
        )

    def test_flags_override_environment(self, capsys):
        with patch.dict(os.environ, {"MEDIA_IMAGEKIT_ID": "envid"}):
            payload = _run(["resolve", "x.jpg", *CONFIG_ARGS], capsys)
        assert payload["primary_url"].startswith("https://ik.imagekit.io/demo/")

    def test_invalid_path_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "../x.jpg", *CONFIG_ARGS])
        assert exc_info.value.code == 2
        assert "error: Invalid path" in capsys.readouterr().err

    def test_missing_configuration_exits_with_error(self, capsys):
        env = {k: v for k, v in os.environ.items() if not k.startswith("MEDIA_")}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(SystemExit) as exc_info:
                main(["resolve", "x.jpg"])
        assert exc_info.value.code == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_out_of_range_option_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "x.jpg", "--width", "5000", *CONFIG_ARGS])
        assert exc_info.value.code == 2
        assert "width: Must be between 1 and 4000" in capsys.readouterr().err

    def test_bad_widths_argument(self):
        with pytest.raises(SystemExit):
            main(["srcset", "x.jpg", "--widths", "a,b", *CONFIG_ARGS])
