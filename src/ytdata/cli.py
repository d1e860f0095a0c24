"""Command-line interface for YouTube lookups."""

import argparse
import json
import sys
from typing import Iterable, List, Optional

from . import config, utils
from .api import YouTube
from .entities import Entity
from .errors import YouTubeError, log_error
from .logging_config import enable_debug, get_logger


logger = get_logger(__name__)


def print_entities(entities: Iterable[Entity]) -> None:
    """Print one JSON object per entity."""
    for entity in entities:
        print(json.dumps(entity.to_dict(), ensure_ascii=False))


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Search and look up YouTube resources")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--key", help="YouTube Data API key (default: $YOUTUBE_API_KEY)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search videos, channels or playlists")
    search_parser.add_argument("kind", choices=["videos", "channels", "playlists"])
    search_parser.add_argument("term", help="Search term")
    search_parser.add_argument(
        "-n",
        "--max-results",
        type=int,
        default=config.DEFAULT_SEARCH_RESULTS,
        help="Number of results (1-50)",
    )

    video_parser = subparsers.add_parser("video", help="Show a video")
    video_parser.add_argument("video", help="Video ID or URL")

    channel_parser = subparsers.add_parser("channel", help="Show a channel")
    channel_parser.add_argument("channel", help="Channel ID or URL")

    channel_videos_parser = subparsers.add_parser(
        "channel-videos", help="List the latest videos of a channel"
    )
    channel_videos_parser.add_argument("channel", help="Channel ID")

    playlist_parser = subparsers.add_parser("playlist", help="Show a playlist")
    playlist_parser.add_argument("playlist", help="Playlist ID or URL")

    items_parser = subparsers.add_parser("playlist-items", help="List the videos of a playlist")
    items_parser.add_argument("playlist", help="Playlist ID or URL")
    items_parser.add_argument(
        "-n",
        "--max-results",
        type=int,
        default=-1,
        help="Number of videos (1-50), all videos if omitted",
    )

    return parser


def run_command(client: YouTube, args: argparse.Namespace) -> List[Entity]:
    """Dispatch parsed arguments to the client.

    Returns:
        Entities to print
    """
    if args.command == "search":
        search = {
            "videos": client.search_videos,
            "channels": client.search_channels,
            "playlists": client.search_playlists,
        }[args.kind]
        return search(args.term, args.max_results)

    if args.command == "video":
        if utils.parse_url(args.video).video:
            return [client.get_video_by_url(args.video)]
        return [client.get_video(args.video)]

    if args.command == "channel":
        if utils.parse_url(args.channel).channel:
            return [client.get_channel_by_url(args.channel)]
        return [client.get_channel(args.channel)]

    if args.command == "channel-videos":
        return client.get_channel_videos(args.channel)

    if args.command == "playlist":
        return [client.get_playlist(utils.parse_playlist_url(args.playlist))]

    if args.command == "playlist-items":
        playlist_id = utils.parse_playlist_url(args.playlist)
        return client.get_playlist_items(playlist_id, args.max_results)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    argv = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    if args.debug:
        enable_debug()

    if not args.command:
        parser.print_help()
        return 1

    token = args.key or config.YOUTUBE_API_KEY
    if not token:
        logger.error("No API key given: pass --key or set YOUTUBE_API_KEY")
        return 1

    try:
        client = YouTube(token)
        print_entities(run_command(client, args))
        return 0
    except YouTubeError as e:
        log_error(e, "Command failed")
        return 1
    except ValueError as e:
        log_error(e, "Invalid input")
        return 1


if __name__ == "__main__":
    sys.exit(main())
