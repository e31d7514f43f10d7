"""
Unit tests for the Typer CLI, wired against a mock transport.
"""
import json

import httpx
import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from cli.bootstrap import AppContainer
from support import StubReachability, json_response

runner = CliRunner()


def users_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/users":
        since = int(request.url.params["since"])
        return json_response(
            [{"login": f"user{since}", "avatar_url": "u", "html_url": f"https://github.com/user{since}"}]
        )
    login = request.url.path.rsplit("/", 1)[-1]
    if login == "missing":
        return httpx.Response(404)
    return json_response({"login": login, "location": "Earth", "followers": 7, "following": 2})


@pytest.fixture
def container(settings, monkeypatch):
    built = AppContainer.build(
        settings,
        reachability=StubReachability(True),
        transport=httpx.MockTransport(users_handler),
    )
    monkeypatch.setattr(cli_main, "_bootstrap", lambda verbose: built)
    return built


def test_users_lists_requested_pages(container, tmp_path):
    out = tmp_path / "users.json"

    result = runner.invoke(cli_main.app, ["users", "--pages", "3", "--per-page", "10", "--no-banner", "--json", str(out)])

    assert result.exit_code == 0, result.output
    assert "user0" in result.output
    assert "user20" in result.output
    exported = json.loads(out.read_text(encoding="utf-8"))
    assert [u["login"] for u in exported] == ["user0", "user10", "user20"]
    assert "id" not in exported[0]


def test_users_reports_errors(settings, monkeypatch):
    built = AppContainer.build(
        settings,
        reachability=StubReachability(False),
        transport=httpx.MockTransport(users_handler),
    )
    monkeypatch.setattr(cli_main, "_bootstrap", lambda verbose: built)

    result = runner.invoke(cli_main.app, ["users", "--no-banner"])

    assert result.exit_code == 1
    assert "Sorry! The service cannot be reached" in result.output


def test_user_detail(container):
    result = runner.invoke(cli_main.app, ["user", "octocat"])

    assert result.exit_code == 0, result.output
    assert "octocat" in result.output
    assert "Followers: 7" in result.output


def test_user_detail_error(container):
    result = runner.invoke(cli_main.app, ["user", "missing"])

    assert result.exit_code == 1
    assert "Error fetching user detail" in result.output


def test_invalid_configuration_exits(monkeypatch):
    monkeypatch.setenv("GITHUB_USERS_API_BASE_URL", "nope")

    result = runner.invoke(cli_main.app, ["user", "octocat"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_container_builds_view_models(container):
    list_vm = container.user_list_view_model()
    assert list_vm.pagination.page_size == container.settings.page_size
    assert container.user_detail_view_model().user_detail is None
