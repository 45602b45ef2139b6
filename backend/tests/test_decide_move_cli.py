import io
import json
import sys

import cli.decide_move as decide_move  # noqa: E402


def write_request(tmp_path, payload):
    path = tmp_path / "move.json"
    path.write_text(json.dumps(payload))
    return str(path)


def test_prints_scores_stages_and_move(tmp_path, capsys, make_request):
    path = write_request(tmp_path, make_request(you=[(5, 5), (5, 4), (5, 3)], health=10, food=[(5, 8)]))

    assert decide_move.main([path, "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Space scores:" in out
    assert "Stage reachability:" in out
    assert "Stage food_seeking: up" in out
    assert out.strip().endswith("Move: up")


def test_json_output(tmp_path, capsys, make_request):
    path = write_request(tmp_path, make_request(you=[(5, 5), (5, 4), (5, 3)], health=10, food=[(5, 8)]))

    assert decide_move.main([path, "--json", "--seed", "1"]) == 0

    assert json.loads(capsys.readouterr().out) == {"move": "up"}


def test_random_variant(tmp_path, capsys, make_request):
    path = write_request(tmp_path, make_request(you=[(0, 0)]))

    assert decide_move.main([path, "--variant", "random", "--seed", "4"]) == 0

    out = capsys.readouterr().out
    assert "Move (random):" in out
    assert out.strip().split()[-1] in {"up", "right"}


def test_reads_stdin(monkeypatch, capsys, make_request):
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(make_request(you=[(5, 5), (5, 4)]))))

    assert decide_move.main(["-", "--json"]) == 0

    assert json.loads(capsys.readouterr().out)["move"] in {"up", "left", "right"}


def test_malformed_request_exits_2(tmp_path, capsys):
    path = write_request(tmp_path, {"board": {"width": 11}})

    assert decide_move.main([path]) == 2

    assert "Malformed move request" in capsys.readouterr().err


def test_invalid_json_exits_2(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    assert decide_move.main([str(path)]) == 2


def test_missing_request_file_exits_2(tmp_path, capsys):
    assert decide_move.main([str(tmp_path / "absent.json")]) == 2

    assert "Could not read move request" in capsys.readouterr().err
