"""Tests for CLI catalog_commands module."""

from unittest.mock import Mock, patch

import pytest

from src.cli.catalog_commands import create_parser, list_podcasts, main
from src.db.models import Podcast
from src.services.results import PodcastsOutput


class TestCreateParser:
    """Tests for create_parser function."""

    def test_has_env_file_argument(self):
        parser = create_parser()
        args = parser.parse_args(["--env-file", "/path/.env", "list-podcasts"])
        assert args.env_file == "/path/.env"
        assert args.command == "list-podcasts"

    def test_log_level_is_uppercased(self):
        args = create_parser().parse_args(["--log-level", "debug", "init-db"])
        assert args.log_level == "DEBUG"

    def test_create_account_subcommand(self):
        args = create_parser().parse_args(
            ["create-account", "a@example.com", "pw", "--role", "Host"]
        )
        assert args.command == "create-account"
        assert args.email == "a@example.com"
        assert args.password == "pw"
        assert args.role == "Host"

    def test_create_account_default_role(self):
        args = create_parser().parse_args(["create-account", "a@example.com", "pw"])
        assert args.role == "Listener"

    def test_add_podcast_subcommand(self):
        args = create_parser().parse_args(["add-podcast", "My Show", "Comedy"])
        assert args.title == "My Show"
        assert args.category == "Comedy"

    def test_list_episodes_requires_integer_id(self):
        args = create_parser().parse_args(["list-episodes", "12"])
        assert args.podcast_id == 12

        with pytest.raises(SystemExit):
            create_parser().parse_args(["list-episodes", "abc"])


class TestListPodcasts:
    def test_prints_table(self, capsys):
        services = Mock()
        services.podcasts.get_all_podcasts.return_value = PodcastsOutput(
            ok=True, podcasts=[Podcast(id=1, title="Show", category="Tech", rating=None)]
        )

        assert list_podcasts(Mock(), services) == 0

        out = capsys.readouterr().out
        assert "Show" in out
        assert "Total: 1 podcasts" in out

    def test_failure_exit_code(self, capsys):
        services = Mock()
        services.podcasts.get_all_podcasts.return_value = PodcastsOutput.internal_error()

        assert list_podcasts(Mock(), services) == 1
        assert "Internal server error occurred." in capsys.readouterr().out


class TestMain:
    """End-to-end runs against a temporary SQLite database."""

    @pytest.fixture(autouse=True)
    def database_url(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'cli.db'}"
        with patch.dict("os.environ", {"DATABASE_URL": url}):
            yield url

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_catalog_flow(self, capsys):
        assert main(["init-db"]) == 0
        assert main(["add-podcast", "Daily Show", "News"]) == 0
        assert "ID: 1" in capsys.readouterr().out

        assert main(["list-podcasts"]) == 0
        assert "Daily Show" in capsys.readouterr().out

        assert main(["list-episodes", "1"]) == 0
        assert "Total: 0 episodes" in capsys.readouterr().out

    def test_missing_podcast_exit_code(self, capsys):
        main(["init-db"])
        capsys.readouterr()

        assert main(["list-episodes", "99"]) == 1
        assert "Podcast with id 99 not found" in capsys.readouterr().out

    def test_account_and_login(self, capsys):
        main(["init-db"])
        assert main(["create-account", "host@example.com", "pw", "--role", "Host"]) == 0
        capsys.readouterr()

        assert main(["login", "host@example.com", "pw"]) == 0
        token = capsys.readouterr().out.strip()
        assert token.count(".") == 2

        assert main(["login", "host@example.com", "nope"]) == 1
        assert "Wrong password" in capsys.readouterr().out

        assert main(["create-account", "host@example.com", "pw"]) == 1
        assert "There is a user with that email already" in capsys.readouterr().out

    def test_invalid_input(self, capsys):
        main(["init-db"])

        assert main(["create-account", "not-an-email", "pw"]) == 1
        assert "Invalid input" in capsys.readouterr().out

    def test_missing_jwt_secret(self, capsys):
        with patch.dict("os.environ", {"JWT_SECRET_KEY": ""}):
            assert main(["list-podcasts"]) == 1
        assert "JWT_SECRET_KEY" in capsys.readouterr().out
