import logging
import pathlib
from argparse import ArgumentParser

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_parser():
    parser = ArgumentParser(prog="virtualdir")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # inspect
    inspect_parser = subparsers.add_parser("inspect")
    inspect_parser.add_argument("path", type=pathlib.Path)
    inspect_parser.add_argument("-d", "--depth", type=int, default=-1)

    # copy
    copy_parser = subparsers.add_parser("copy")
    copy_parser.add_argument("source", type=pathlib.Path)
    copy_parser.add_argument("destination", type=pathlib.Path)
    copy_parser.add_argument("--replace", action="store_true")

    # dump
    dump_parser = subparsers.add_parser("dump")
    dump_parser.add_argument("path", type=pathlib.Path)
    dump_parser.add_argument("--indent", type=int, default=2)

    # load
    load_parser = subparsers.add_parser("load")
    load_parser.add_argument("json_file", type=pathlib.Path)
    load_parser.add_argument("destination", type=pathlib.Path)
    load_parser.add_argument("--replace", action="store_true")

    return parser


def log_level(verbosity: int) -> int:
    match verbosity:
        case 0:
            return logging.WARNING
        case 1:
            return logging.INFO
        case _:
            return logging.DEBUG


def configure_logging(verbosity: int = 0):
    logging.basicConfig(level=log_level(verbosity), format=LOG_FORMAT)
