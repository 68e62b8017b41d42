"""TypeID command line: new, parse, explain, encode, decode."""

import argparse
import json
import sys
from uuid import UUID

from typeid.config import load_config
from typeid.core import api, codec
from typeid.core.errors import TypeIDError
from typeid.core.validation import valid_uuidv7_bytes
from typeid.internal.logging import LogLevel, StructuredLogger
from typeid.utils import uuid7
from typeid.utils.timestamp import format_timestamp

LOG_LEVEL_NAMES = [level.name for level in LogLevel] + ["WARNING"]


def build_parser():
    parser = argparse.ArgumentParser(prog="typeid", description="Create and inspect TypeIDs")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVEL_NAMES,
                        help="DEBUG, INFO, WARN or ERROR (overrides config)")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Generate a TypeID with a fresh UUIDv7")
    new.add_argument("prefix", nargs="?", help="Type prefix, e.g. user")
    new.add_argument("--uuid", help="Encode this UUID instead of generating one")

    parse = commands.add_parser("parse", help="Split a TypeID into its components")
    parse.add_argument("typeid")

    explain = commands.add_parser("explain", help="Report why a TypeID is invalid")
    explain.add_argument("value")

    encode = commands.add_parser("encode", help="Encode a hex UUID as a TypeID")
    encode.add_argument("uuid")
    encode.add_argument("--prefix", default="")

    decode = commands.add_parser("decode", help="Decode a TypeID to its UUID")
    decode.add_argument("typeid")

    return parser


def _print_json(data, indent):
    print(json.dumps(data, indent=indent, default=str))


def _cmd_new(args, config):
    prefix = args.prefix if args.prefix is not None else config.output.default_prefix
    uuid = UUID(bytes=codec.hex_to_uuid(args.uuid)) if args.uuid else None
    print(api.create(prefix, uuid))
    return 0


def _cmd_parse(args, config):
    parts = api.parse(args.typeid)
    data = parts.to_dict()
    data["uuid"] = str(parts.uuid)
    if valid_uuidv7_bytes(parts.uuid.bytes):
        data["timestamp"] = format_timestamp(uuid7.timestamp_ms(parts.uuid.bytes))
    _print_json(data, config.output.indent)
    return 0


def _cmd_explain(args, config):
    record = api.explain(args.value)
    _print_json(record.to_dict() if record else None, config.output.indent)
    return 1 if record else 0


def _cmd_encode(args, config):
    print(codec.encode(codec.hex_to_uuid(args.uuid), args.prefix))
    return 0


def _cmd_decode(args, config):
    print(codec.bytes_to_uuid(codec.decode(args.typeid)))
    return 0


_COMMANDS = {
    "new": _cmd_new,
    "parse": _cmd_parse,
    "explain": _cmd_explain,
    "encode": _cmd_encode,
    "decode": _cmd_decode,
}


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    try:
        level = LogLevel.parse(args.log_level or config.logging.level)
        bad_level = None
    except KeyError:
        level, bad_level = LogLevel.WARN, config.logging.level
    logger = StructuredLogger.configure(min_level=level)
    if bad_level is not None:
        logger.warn("unknown log level in config, using WARN", configured=bad_level)

    try:
        return _COMMANDS[args.command](args, config)
    except TypeIDError as exc:
        logger.warn("command failed", error=exc, command=args.command, kind=exc.kind.value)
        _print_json(exc.record.to_dict(), config.output.indent)
        return 1


if __name__ == "__main__":
    sys.exit(main())
