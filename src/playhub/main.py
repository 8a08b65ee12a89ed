#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from playhub.app import build_coordinator, default_playlist_store, sample_playlist
from playhub.config.logging import configure_logging
from playhub.domain.formatting import format_time
from playhub.domain.model import SourceKind
from playhub.domain.playlist import PlaylistManager

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from playhub.domain.model import PlaybackProgress, PlaybackState, Song


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multi-source music playback")
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search a source catalog")
    search.add_argument("query", help="Text matched against title, artist and album")
    search.add_argument(
        "--source",
        type=SourceKind,
        choices=list(SourceKind),
        default=SourceKind.LOCAL,
        help="Catalog to search (default: %(default)s)",
    )

    demo = commands.add_parser("demo", help="Play the saved (or sample) playlist for a while")
    demo.add_argument(
        "--seconds",
        type=float,
        default=5.0,
        help="How long to play before shutting down (default: %(default)s)",
    )
    return parser.parse_args(list(argv))


def _describe(song: Song) -> str:
    return f"{song.artist} - {song.title} [{song.album}] ({format_time(song.duration_seconds)})"


async def _search(query: str, source: SourceKind) -> list[Song]:
    async with build_coordinator(default_source=source) as coordinator:
        return await coordinator.search(query)


async def _demo(seconds: float) -> None:
    if seconds < 0:
        raise ValueError("Seconds must be non-negative")
    store = default_playlist_store()
    songs = store.load_playlist() or sample_playlist()
    playlist = PlaylistManager(songs)

    async with build_coordinator(playlist=playlist) as coordinator:

        def show_state(state: PlaybackState) -> None:
            print(f"state: {state}")

        def show_progress(progress: PlaybackProgress) -> None:
            print(
                f"  {format_time(progress.current_time_seconds)}"
                f" / {format_time(progress.duration_seconds)}"
            )

        with coordinator.state.subscribe(show_state), coordinator.progress.subscribe(
            show_progress, replay=False
        ):
            song = playlist.current_song.value
            if song is None:
                print("Playlist is empty")
                return
            print(f"Now playing: {_describe(song)}")
            await coordinator.play_song(song)
            await asyncio.sleep(seconds)
            await coordinator.stop()
        playlist.save_to(store)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    configure_logging()

    try:
        parsed_args = _parse_args(argv or sys.argv[1:])
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        if parsed_args.command == "search":
            songs = asyncio.run(_search(parsed_args.query, parsed_args.source))
            if not songs:
                print("No songs found")
            for song in songs:
                print(f"{song.id}: {_describe(song)}")
        else:
            asyncio.run(_demo(parsed_args.seconds))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
