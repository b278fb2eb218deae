"""
FFmpeg video encoder.

Pipes raw RGB frames to ffmpeg via stdin. No intermediate files:
frames go straight from numpy arrays to the encoder.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Iterator


# Quality presets: (preset, crf, pix_fmt)
QUALITY_PRESETS = {
    "high": ("slow", "18", "yuv444p"),
    "medium": ("medium", "23", "yuv420p"),
    "fast": ("ultrafast", "28", "yuv420p"),
}


def ffmpeg_available() -> bool:
    return shutil.which("ffmpeg") is not None


def build_command(
    output_path: Path,
    width: int,
    height: int,
    fps: int,
    quality: str = "high",
) -> list[str]:
    """Build the ffmpeg command line for a rawvideo stdin pipe."""
    preset, crf, pix_fmt = QUALITY_PRESETS.get(quality, QUALITY_PRESETS["high"])

    return [
        "ffmpeg", "-y",
        # Raw video input from pipe
        "-f", "rawvideo",
        "-pix_fmt", "rgb24",
        "-s", f"{width}x{height}",
        "-r", str(fps),
        "-i", "pipe:0",
        # Video encoding
        "-c:v", "libx264",
        "-preset", preset,
        "-crf", crf,
        "-pix_fmt", pix_fmt,
        # yuv420p needs even dimensions
        "-vf", "pad=ceil(iw/2)*2:ceil(ih/2)*2:color=white",
        # Output
        str(output_path),
    ]


def encode_video(
    frame_iterator: Iterator,
    output_path: Path,
    width: int = 1920,
    height: int = 1080,
    fps: int = 30,
    quality: str = "high",
    total_frames: int | None = None,
    progress_callback: callable = None,
) -> Path:
    """
    Encode frames to MP4.

    Args:
        frame_iterator: Yields (H, W, 3) uint8 numpy arrays.
        output_path: Output MP4 path.
        width: Frame width.
        height: Frame height.
        fps: Frames per second.
        quality: "high", "medium", or "fast".
        total_frames: Total frame count for progress reporting.
        progress_callback: Optional callback(current_frame, total_frames).

    Returns:
        Path to the output file.

    Raises:
        RuntimeError: If ffmpeg exits with a non-zero status.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = build_command(output_path, width, height, fps, quality)

    # ffmpeg stats would fill a stderr pipe and stall the encode
    stderr_file = tempfile.TemporaryFile()
    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=stderr_file,
    )

    frame_count = 0
    try:
        for frame in frame_iterator:
            # Ensure contiguous C-order array
            raw = frame.tobytes()
            proc.stdin.write(raw)
            frame_count += 1

            if progress_callback and total_frames:
                progress_callback(frame_count, total_frames)

    except BrokenPipeError:
        # ffmpeg died early; the return code below reports why
        pass
    finally:
        if proc.stdin:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                pass

    proc.wait()

    stderr_file.seek(0)
    stderr = stderr_file.read().decode("utf-8", errors="replace")
    stderr_file.close()

    if proc.returncode != 0:
        # Filter out common non-error ffmpeg messages
        error_lines = [
            line for line in stderr.split("\n")
            if "error" in line.lower() or "invalid" in line.lower()
        ]
        error_msg = "\n".join(error_lines[-5:]) if error_lines else stderr[-500:]
        raise RuntimeError(
            f"ffmpeg exited with code {proc.returncode}: {error_msg}"
        )

    return output_path
