"""
Tests for the command-line entry point.
"""

from unittest.mock import MagicMock, patch

from file_manager import cli


class TestMain:
    """Test cases for cli.main."""

    @patch("file_manager.cli.DependencyContainer")
    @patch("file_manager.cli.load_settings")
    def test_runs_shell_with_loaded_settings(self, mock_load, mock_container_cls):
        mock_container_cls.return_value.get_shell.return_value.run.return_value = 0

        status = cli.main(["--username", "alice"])

        assert status == 0
        mock_load.assert_called_once_with(["--username", "alice"])
        mock_container_cls.assert_called_once_with(mock_load.return_value)

    def test_configuration_error_exits_with_2(self, monkeypatch, capsys):
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "zero")

        status = cli.main([])

        assert status == 2
        assert "Chunk size must be an integer" in capsys.readouterr().err

    def test_end_to_end_session(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setenv("FILE_MANAGER_START_DIR", str(tmp_path))
        monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "ERROR")
        monkeypatch.chdir(tmp_path)
        lines = iter(["add hello.txt", "ls"])

        def fake_input():
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        with patch("file_manager.cli.DependencyContainer") as mock_container_cls:
            from file_manager.container import DependencyContainer

            mock_container_cls.side_effect = lambda settings: DependencyContainer(
                settings, read_line=fake_input, binary=MagicMock()
            )
            status = cli.main(["--username", "alice"])

        out = capsys.readouterr().out
        assert status == 0
        assert "Welcome to the File Manager, alice!" in out
        assert "- hello.txt" in out
        assert "Thank you for using File Manager, alice, goodbye!" in out
        assert (tmp_path / "hello.txt").exists()
