from karasu.simulation.watch_game import describe_outcome, trace_strategy, watch_game


def test_watch_game_logs_every_roll(capinfo):
    board = watch_game(seed=3, fruit=2, tokens=2, strategy="min")
    assert board.is_finished()

    messages = [rec.getMessage() for rec in capinfo.records if getattr(rec, "stage", None) == "watch"]
    assert messages[1] == "start  F: 2,2,2,2 K: 2"
    rolls = [m for m in messages if m.startswith("roll")]
    assert rolls
    assert rolls[-1].endswith(str(board))
    assert messages[-1].startswith("Game over after %d rolls" % len(rolls))


def test_watch_game_renders_board_when_logged(capinfo):
    from karasu.game.board import Board

    watch_game(seed=5, fruit=1, tokens=3, strategy="first")
    records = [rec for rec in capinfo.records if getattr(rec, "stage", None) == "watch"]
    assert records
    assert not any(isinstance(arg, Board) for rec in records for arg in (rec.args or ()))
    assert records[1].getMessage() == "start  F: 1,1,1,1 K: 3"


def test_watch_game_is_reproducible():
    a = watch_game(seed=8, fruit=3, tokens=3, strategy="random")
    b = watch_game(seed=8, fruit=3, tokens=3, strategy="random")
    assert a.snapshot() == b.snapshot()


def test_trace_strategy_logs_pick(capinfo, scripted):
    from karasu.game.board import Board

    traced = trace_strategy(lambda _b: (1, 2), "custom")
    assert traced(Board.new(1, 1, rng=scripted([]))) == (1, 2)
    assert any("custom picks (1, 2) on F: 1,1,1,1 K: 1" == rec.getMessage() for rec in capinfo.records)


def test_describe_outcome():
    assert describe_outcome(0) == "pile 0"
    assert describe_outcome(3) == "pile 3"
    assert describe_outcome(4) == "choose two"
    assert describe_outcome(5) == "karasu"
