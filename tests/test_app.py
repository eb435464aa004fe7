import pytest

from progress_log import create_app
from progress_log.errors import StartupError


def test_unreachable_storage_is_fatal_at_startup(tmp_path):
    missing_dir = tmp_path / "does" / "not" / "exist"

    with pytest.raises(StartupError) as excinfo:
        create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{missing_dir / 'progress_log.db'}",
            "RATELIMIT_ENABLED": False,
        })

    assert "Could not prepare progress log storage" in str(excinfo.value)


def test_restart_keeps_existing_entries(tmp_path):
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'progress_log.db'}",
        "RATELIMIT_ENABLED": False,
    }
    first = create_app(config)
    first.test_client().post("/add", data={"text": "before restart", "created_at": "t0"})

    second = create_app(config)
    html = second.test_client().get("/").get_data(as_text=True)
    assert "before restart" in html


# ----- CLI -----
def test_cli_list_on_empty_store(runner):
    result = runner.invoke(args=["entries", "list"])

    assert result.exit_code == 0
    assert "No entries yet." in result.output


def test_cli_add_then_list(runner):
    result = runner.invoke(args=["entries", "add", "Shipped it", "--created-at", "2024-01-01 10:00:00"])
    assert result.exit_code == 0
    assert "Entry added." in result.output

    result = runner.invoke(args=["entries", "list"])
    assert result.exit_code == 0
    assert "Shipped it" in result.output
    assert "2024-01-01 10:00:00" in result.output


def test_cli_delete(app, runner):
    runner.invoke(args=["entries", "add", "short lived"])

    result = runner.invoke(args=["entries", "delete", "1"])

    assert result.exit_code == 0
    with app.app_context():
        assert app.extensions["entry_repository"].list() == []


def test_cli_init_db_is_idempotent(runner):
    for _ in range(2):
        result = runner.invoke(args=["entries", "init-db"])
        assert result.exit_code == 0
        assert "Progress log table ready." in result.output
