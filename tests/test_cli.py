"""Tests for the command-line entry point."""
from __future__ import annotations

import numpy as np
import pytest

import tunnelvis.__main__ as cli
from tunnelvis.tunnel_renderer import TunnelRenderer


def parse(*argv):
    return cli.build_parser().parse_args(list(argv))


class TestArguments:
    def test_defaults(self):
        args = parse()
        assert (args.width, args.height) == (1280, 720)
        assert args.fps == 60
        assert args.preview is False
        assert args.seed is None

    @pytest.mark.parametrize(
        "argv",
        [
            ("--width", "0"),
            ("--height", "-5"),
            ("--dpi", "0"),
            ("--fps", "0"),
            ("--duration", "0"),
            ("--focal-width", "-1"),
        ],
    )
    def test_invalid_values_exit(self, argv):
        with pytest.raises(SystemExit, match=r"\[!\]"):
            cli.validate_args(parse(*argv))

    def test_zero_focal_size_is_allowed(self):
        cli.validate_args(parse("--focal-width", "0", "--focal-height", "0"))


class FakeVideoClip:
    instances = []

    def __init__(self, make_frame, duration):
        self.make_frame = make_frame
        self.duration = duration
        self.written = None
        FakeVideoClip.instances.append(self)

    def write_videofile(self, path, **kwargs):
        self.frames = [self.make_frame(t) for t in (0.0, 0.5)]
        self.written = (path, kwargs)


class TestRenderVideo:
    def test_writes_rgb_frames(self, monkeypatch, tmp_path):
        monkeypatch.setattr(cli, "VideoClip", FakeVideoClip)
        output = str(tmp_path / "out.mp4")

        cli.main(["--width", "64", "--height", "48", "--duration", "1", "--seed", "1", "-o", output])

        clip = FakeVideoClip.instances[-1]
        path, kwargs = clip.written
        assert path == output
        assert kwargs["fps"] == 60
        assert clip.duration == 1
        assert all(frame.shape == (48, 64, 3) and frame.dtype == np.uint8 for frame in clip.frames)


class SizingVideoClip(FakeVideoClip):
    """Renders frame 0 on construction to find the size, as MoviePy does."""

    def __init__(self, make_frame, duration):
        super().__init__(make_frame, duration)
        self.size = make_frame(0).shape[:2][::-1]


class TestFirstFrame:
    def test_export_starts_at_first_step(self, monkeypatch, tmp_path):
        """The size-probing frame does not count toward the written animation."""
        progress = []
        original = TunnelRenderer.make_frame

        def recording_make_frame(self, t):
            frame = original(self, t)
            progress.append(self.engine.discs[0].progress)
            return frame

        monkeypatch.setattr(TunnelRenderer, "make_frame", recording_make_frame)
        monkeypatch.setattr(cli, "VideoClip", SizingVideoClip)

        cli.main(["--width", "32", "--height", "24", "--duration", "1", "-o", str(tmp_path / "a.mp4")])

        # Size frame, then the two written frames
        assert len(progress) == 3
        assert progress[1] == pytest.approx(0.001)
        assert progress[2] == pytest.approx(0.002)
