"""MusicTrack class for a vehicle's ambient music."""

from typing import Optional

from .constants import DEFAULT_VOLUME


class MusicTrack:
    """A loaded audio source. Playback is tracked, not rendered."""

    def __init__(self, source: str, name: str, volume: float = DEFAULT_VOLUME):
        if not source:
            raise ValueError("Music source is required")
        self.source = source
        self.name = name or "Unknown"
        self.volume = min(1.0, max(0.0, float(volume)))
        self.playing = False

    def play(self) -> None:
        self.playing = True

    def stop(self) -> None:
        self.playing = False

    def __repr__(self) -> str:
        state = "playing" if self.playing else "stopped"
        return f"MusicTrack({self.name!r}, {state})"


def stop_track(track: Optional[MusicTrack]) -> bool:
    """Stop a track if it is playing. Returns True if it was."""
    if track is not None and track.playing:
        track.stop()
        return True
    return False
