"""playht command line.

Thin argparse wrapper over Client for poking at the API from a shell.
Credentials come from PLAYHT_SECRET_KEY / PLAYHT_USER_ID (or .env).

Usage:
    playht voices
    playht cloned-voices
    playht clone-voice ./sample.m4a audio/x-m4a --name my-voice
    playht delete-voice <voice_id>
    playht create-job "What is life?" --voice <voice_id>
    playht get-job <job_id>
    playht job-progress <job_id>
    playht job-audio <job_id> out.mp3
    playht stream "What is life?" --voice <voice_id> out.mp3
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from playht.api.client import Client
from playht.core.exceptions import DecodeError, PlayHTError
from playht.core.logging_config import setup_logging
from playht.schemas.job import TTSJobRequest
from playht.schemas.stream import TTSStreamRequest
from playht.schemas.tts import OutputFormat, Quality
from playht.schemas.voice import CloneVoiceFileRequest, DeleteClonedVoiceRequest

logger = logging.getLogger(__name__)


def _print(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _dump(model) -> Any:
    if isinstance(model, list):
        return [m.model_dump(mode="json", exclude_none=True) for m in model]
    return model.model_dump(mode="json", exclude_none=True)


async def _run(args: argparse.Namespace, client: Client) -> None:
    if args.command == "voices":
        _print(_dump(await client.get_stock_voices()))
    elif args.command == "cloned-voices":
        _print(_dump(await client.get_cloned_voices()))
    elif args.command == "clone-voice":
        req = CloneVoiceFileRequest(sample_file=args.sample_file, mime_type=args.mime_type, voice_name=args.name)
        _print(_dump(await client.clone_voice_from_file(req)))
    elif args.command == "delete-voice":
        _print(_dump(await client.delete_cloned_voice(DeleteClonedVoiceRequest(voice_id=args.voice_id))))
    elif args.command == "create-job":
        req = TTSJobRequest(
            text=args.text, voice=args.voice, quality=Quality(args.quality),
            speed=args.speed, sample_rate=args.sample_rate,
        )
        _print(_dump(await client.create_tts_job(req)))
    elif args.command == "get-job":
        _print(_dump(await client.get_tts_job(args.job_id)))
    elif args.command == "job-progress":
        async for result in client.iter_tts_job_progress(args.job_id):
            if isinstance(result, DecodeError):
                print(f"warning: {result.message}", file=sys.stderr)
            else:
                _print(_dump(result))
    elif args.command == "job-audio":
        with open(args.output, "wb") as f:
            written = await client.stream_tts_job_audio(args.job_id, f)
        print(f"Wrote {written} bytes to {args.output}")
    elif args.command == "stream":
        req = TTSStreamRequest(
            text=args.text, voice=args.voice, quality=Quality(args.quality),
            output_format=OutputFormat(args.format), speed=args.speed, sample_rate=args.sample_rate,
        )
        with open(args.output, "wb") as f:
            written = await client.stream_audio(req, f)
        print(f"Wrote {written} bytes to {args.output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="playht", description="play.ht API client")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING ...")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("voices", help="List stock voices")
    sub.add_parser("cloned-voices", help="List cloned voices")

    p = sub.add_parser("clone-voice", help="Clone a voice from a local sample")
    p.add_argument("sample_file")
    p.add_argument("mime_type", help="e.g. audio/x-m4a, audio/wav")
    p.add_argument("--name", default="playht-cli-voice")

    p = sub.add_parser("delete-voice", help="Delete a cloned voice")
    p.add_argument("voice_id")

    for name, helptext in (("create-job", "Create an async TTS job"), ("stream", "Stream TTS audio to a file")):
        p = sub.add_parser(name, help=helptext)
        p.add_argument("text")
        p.add_argument("--voice", required=True)
        p.add_argument("--quality", default=Quality.default().value, choices=[q.value for q in Quality])
        p.add_argument("--speed", type=float, default=None)
        p.add_argument("--sample-rate", type=int, default=None)
        if name == "stream":
            p.add_argument("output")
            p.add_argument("--format", default=OutputFormat.default().value, choices=[f.value for f in OutputFormat])

    p = sub.add_parser("get-job", help="Fetch a TTS job")
    p.add_argument("job_id")

    p = sub.add_parser("job-progress", help="Follow a TTS job's progress events")
    p.add_argument("job_id")

    p = sub.add_parser("job-audio", help="Stream a finished job's audio to a file")
    p.add_argument("job_id")
    p.add_argument("output")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[Client] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        setup_logging(args.log_level)

    async def _main() -> None:
        c = client or Client()
        try:
            await _run(args, c)
        finally:
            await c.aclose()

    try:
        asyncio.run(_main())
    except PlayHTError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
