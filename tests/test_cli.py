import pytest

from pirouette.__main__ import build_parser, main


def test_parser_defaults_leave_config_values_in_charge():
    args = build_parser().parse_args([])
    assert args.config is None
    assert args.size is None
    assert args.render_scale is None
    assert args.fps is None
    assert args.seed is None


def test_parser_reads_size_and_numbers():
    args = build_parser().parse_args(
        ["--size", "640x480", "--render-scale", "2", "--fps", "24", "--seed", "7"]
    )
    assert args.size == (640, 480)
    assert args.render_scale == 2.0
    assert args.fps == 24.0
    assert args.seed == 7


@pytest.mark.parametrize("size", ["640", "640x", "axb", "0x480", "-1x10"])
def test_parser_rejects_bad_size(size):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--size", size])


def test_main_forwards_arguments_to_run(monkeypatch):
    calls = []
    monkeypatch.setattr("pirouette.api.run", lambda **kwargs: calls.append(kwargs))

    assert main(["--config", "my.yaml", "--size", "320x200"]) == 0
    assert calls == [
        {
            "config_path": "my.yaml",
            "canvas_size": (320, 200),
            "render_scale": None,
            "fps": None,
            "seed": None,
        }
    ]
