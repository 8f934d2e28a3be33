import csv

from core.game_loop import GameLoop
from core.timers import ManualTimer
from runners.session_log import CSVLogger, TICK_KEYS, make_tick_logger


def test_tick_log_rows(rules_factory, tmp_path):
    path = tmp_path / "logs" / "session.csv"
    logger = CSVLogger(str(path), fieldnames=TICK_KEYS)
    rules = rules_factory(snake=[(0, 2)], food=(0, 0))
    timer = ManualTimer()
    with GameLoop(rules, timer, [make_tick_logger(logger)]) as loop:
        loop.handle_key("ArrowRight")
        timer.advance(1000)
    logger.close()

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["status"] for r in rows] == ["pending", "playing", "playing", "playing", "playing", "stopped"]
    assert rows[0]["tick"] == "0"
    assert [r["tick"] for r in rows[1:]] == ["1", "2", "3", "4", "4"]
    assert {r["food_idx"] for r in rows} == {"0"}
    assert rows[-1]["reason"] == "wall"
    assert rows[-1]["head_x"] == "4"
    assert rows[-1]["length"] == "1"


def test_csv_logger_appends_without_second_header(tmp_path):
    path = str(tmp_path / "a.csv")
    for step in (1, 2):
        lg = CSVLogger(path)
        lg.log(step, {"status": "playing"})
        lg.close()
    with open(path) as f:
        lines = f.read().splitlines()
    assert lines == ["tick,status", "1,playing", "2,playing"]
