# tests/test_main.py

import pytest
from unittest.mock import MagicMock

import main


@pytest.fixture
def error_display(monkeypatch) -> MagicMock:
    display = MagicMock()
    monkeypatch.setattr(main, "display_error", display)
    monkeypatch.setattr(main, "display_welcome_banner", MagicMock())
    return display


def test_missing_data_directory_exits(tmp_path, monkeypatch, error_display):
    monkeypatch.setattr("sys.argv", ["main.py", "--data-dir", str(tmp_path / "missing")])

    with pytest.raises(SystemExit) as exit_info:
        main.main()

    assert exit_info.value.code == 1
    assert "Data directory not found" in error_display.call_args.args[0]


def test_empty_data_directory_exits(tmp_path, monkeypatch, error_display):
    monkeypatch.setattr("sys.argv", ["main.py", "--data-dir", str(tmp_path)])

    with pytest.raises(SystemExit):
        main.main()

    assert "No supported documents" in error_display.call_args.args[0]


def test_invalid_top_k_exits(tmp_path, monkeypatch, error_display):
    (tmp_path / "notes.txt").write_text("Volcano eruption notes", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["main.py", "--data-dir", str(tmp_path), "--top-k", "0"])

    with pytest.raises(SystemExit):
        main.main()

    assert "top_k" in error_display.call_args.args[0]


def test_search_loop_runs_until_declined(tmp_path, monkeypatch, error_display):
    (tmp_path / "notes.txt").write_text("Volcano eruption notes", encoding="utf-8")
    (tmp_path / "bread.md").write_text("Sourdough bread baking", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["main.py", "--data-dir", str(tmp_path)])
    monkeypatch.setattr(main, "display_indexing_status", MagicMock())
    monkeypatch.setattr(main, "prompt_for_query", MagicMock(side_effect=["volcano", "   "]))
    monkeypatch.setattr(main, "ask_continue", MagicMock(side_effect=[True, False]))
    results_display = MagicMock()
    monkeypatch.setattr(main, "display_results", results_display)

    main.main()

    first, second = results_display.call_args_list
    assert [r.document.id for r in first.args[1]] == ["notes.txt"]
    assert second.args[1] == []
    error_display.assert_not_called()
