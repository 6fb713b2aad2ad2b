"""Start, stop and poll HoloLens perception simulation recordings."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import PortalError
from .schemas import StartRecordingOptions
from .services.network import PortalSession
from .services.recording import RecordingClient
from .settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Control HoloLens perception simulation recordings.")
    parser.add_argument("--url", help="Device portal URL (default: $PORTAL_URL).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="Print whether a recording is running.")

    start = sub.add_parser("start", help="Start a new recording.")
    start.add_argument("name", help="Recording name.")
    start.add_argument("--no-head", action="store_true", help="Skip head pose data.")
    start.add_argument("--no-hands", action="store_true", help="Skip hand data.")
    start.add_argument("--no-spatial-mapping", action="store_true", help="Skip spatial mapping data.")
    start.add_argument("--no-environment", action="store_true", help="Skip environment data.")

    stop = sub.add_parser("stop", help="Stop the running recording and save its data.")
    stop.add_argument(
        "--output",
        type=Path,
        default=Path("recording.xef"),
        help="File to write the recording to (default: recording.xef).",
    )
    return parser


def _open_session(args: argparse.Namespace) -> PortalSession:
    settings = get_settings()
    if args.url:
        settings = settings.model_copy(update={"base_url": args.url})
    return PortalSession(settings)


async def _run(args: argparse.Namespace, session: PortalSession) -> int:
    async with session:
        client = RecordingClient(session, session.settings.device_info())
        if args.command == "status":
            recording = await client.get_recording_status()
            print("recording" if recording else "idle")
        elif args.command == "start":
            options = StartRecordingOptions(
                record_head=not args.no_head,
                record_hands=not args.no_hands,
                record_spatial_mapping=not args.no_spatial_mapping,
                record_environment=not args.no_environment,
            )
            await client.start_recording(args.name, options)
            print(f"Recording {args.name!r} started")
        elif args.command == "stop":
            data = await client.stop_recording()
            if data is None:
                print("Recording stopped; device returned no data")
            else:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_bytes(data)
                print(f"Saved {len(data)} bytes to {args.output}")
    return 0


def main(argv: Optional[Sequence[str]] = None, *, session: Optional[PortalSession] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        return asyncio.run(_run(args, session or _open_session(args)))
    except PortalError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
