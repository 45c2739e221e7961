import logging

import pytest

import main


def _fake_solve(times):
    def fake(board, pool, on_solution):
        for _ in range(times):
            on_solution(board, ())
        return times
    return fake


def test_run_prints_board_pieces_solutions_and_count(monkeypatch, capsys):
    monkeypatch.setattr(main, "solve", _fake_solve(2))

    total = main.run(6, 28)

    out = capsys.readouterr().out
    assert total == 2
    assert out.startswith("Today's board is \n")
    assert "Available blocks" in out
    assert out.count("Solution:") == 2
    assert out.rstrip().endswith("number of solutions:2")


def test_run_quiet_hides_solutions_and_pieces(monkeypatch, capsys):
    monkeypatch.setattr(main, "solve", _fake_solve(3))

    main.run(1, 1, show_solutions=False, show_pieces=False)

    out = capsys.readouterr().out
    assert "Solution:" not in out
    assert "Available blocks" not in out
    assert "number of solutions:3" in out


def test_run_logs_progress(monkeypatch, caplog):
    monkeypatch.setattr(main, "solve", _fake_solve(4))

    with caplog.at_level(logging.INFO, logger="main"):
        main.run(1, 1, show_solutions=False, progress_every=2)

    progress = [r for r in caplog.records if "solutions so far" in r.getMessage()]
    assert len(progress) == 2


def test_main_parses_date_and_flags(monkeypatch, capsys):
    seen = {}

    def fake_run(month, day, show_solutions, show_pieces, progress_every):
        seen.update(month=month, day=day, show_solutions=show_solutions, show_pieces=show_pieces)
        return 0

    monkeypatch.setattr(main, "run", fake_run)
    main.main(["3", "14", "--quiet", "--no-pieces"])

    assert seen == {"month": 3, "day": 14, "show_solutions": False, "show_pieces": False}


def test_main_rejects_invalid_date(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["13", "1"])
    assert excinfo.value.code == 2
    assert "month must be in 1..12" in capsys.readouterr().err


def test_main_exits_nonzero_on_unexpected_failure(monkeypatch):
    def broken(board, pool, on_solution):
        raise RuntimeError("boom")

    monkeypatch.setattr(main, "solve", broken)
    with pytest.raises(SystemExit) as excinfo:
        main.main(["6", "28", "--quiet", "--no-pieces"])
    assert excinfo.value.code == 1
