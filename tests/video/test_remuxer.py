"""
ffmpeg-backed fast-start remuxer, run against stand-in ffmpeg scripts.
"""

import asyncio
from pathlib import Path

import pytest

from conftest import write_script
from video_ingest.core.errors import RemuxFailure
from video_ingest.video.infrastructure.converters import FFmpegFastStartRemuxer

# Copies the -i input to the last argument, like a stream copy would
COPYING_FFMPEG = """
in=""
prev=""
for arg; do
  if [ "$prev" = "-i" ]; then in="$arg"; fi
  prev="$arg"
  out="$arg"
done
cp "$in" "$out"
"""


@pytest.fixture
def clip(tmp_path: Path) -> Path:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"mdat....moov")
    return path


def test_output_path_is_input_plus_suffix(tmp_path: Path) -> None:
    remuxer = FFmpegFastStartRemuxer("ffmpeg")
    assert remuxer.output_path_for(tmp_path / "abc.mp4") == tmp_path / "abc.mp4.processed.mp4"


def test_remux_writes_new_file(tmp_path: Path, clip: Path) -> None:
    remuxer = FFmpegFastStartRemuxer(str(write_script(tmp_path / "ffmpeg", COPYING_FFMPEG)))

    output = asyncio.run(remuxer.remux(clip))

    assert output == remuxer.output_path_for(clip)
    assert output.read_bytes() == clip.read_bytes()
    assert clip.exists()


def test_non_zero_exit_carries_stderr(tmp_path: Path, clip: Path) -> None:
    script = write_script(tmp_path / "ffmpeg", "echo 'moov atom not found' >&2\nexit 1\n")
    remuxer = FFmpegFastStartRemuxer(str(script))

    with pytest.raises(RemuxFailure) as e:
        asyncio.run(remuxer.remux(clip))

    assert "exit code 1" in str(e.value)
    assert "moov atom not found" in str(e.value)


def test_missing_executable_is_a_remux_failure(tmp_path: Path, clip: Path) -> None:
    remuxer = FFmpegFastStartRemuxer(str(tmp_path / "no-such-ffmpeg"))

    with pytest.raises(RemuxFailure, match="not found"):
        asyncio.run(remuxer.remux(clip))


def test_command_copies_streams_and_moves_index_to_front(clip: Path) -> None:
    remuxer = FFmpegFastStartRemuxer("ffmpeg")
    cmd = remuxer._build_ffmpeg_command(clip, remuxer.output_path_for(clip))

    assert cmd == [
        "ffmpeg",
        "-i", str(clip),
        "-movflags", "faststart",
        "-map_metadata", "0",
        "-codec", "copy",
        "-f", "mp4",
        f"{clip}.processed.mp4",
    ]
