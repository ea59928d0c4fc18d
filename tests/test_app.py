import pytest

from adastra.app import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.name == "PLAYER"
    assert args.scores == "scores.json"
    assert args.frames is None
    assert args.seed is None


def test_parse_args_values():
    args = parse_args(["--name", "Nova", "--frames", "5", "--seed", "3", "--scores", "best.json"])
    assert args.name == "Nova"
    assert args.frames == 5
    assert args.seed == 3
    assert args.scores == "best.json"


@pytest.mark.parametrize("frames", ["0", "-2", "many"])
def test_parse_args_rejects_bad_frames(frames):
    with pytest.raises(SystemExit):
        parse_args(["--frames", frames])


def test_main_runs_headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scores = tmp_path / "scores.json"
    assert main(["--frames", "3", "--seed", "1", "--scores", str(scores), "--name", ""]) == 0
    assert not scores.exists()