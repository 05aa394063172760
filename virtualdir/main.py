import json
import logging
import pathlib
import sys

from virtualdir.errors import UnsupportedPathError, VirtualDirError
from virtualdir.fs import generate, read
from virtualdir.models import VirtualDirectory, VirtualFile, wrap
from virtualdir.utils import configure_logging, get_parser

logger = logging.getLogger(__name__)


def _read_directory(path: pathlib.Path) -> VirtualDirectory:
    match read(path):
        case VirtualDirectory() as directory:
            return directory
        case VirtualFile() as file:
            return wrap(path.name, file)
        case None:
            raise UnsupportedPathError(path)


def inspect(path: pathlib.Path, *, depth: int = -1) -> str:
    output = _read_directory(path).inspect(depth)
    sys.stdout.write(output)
    return output


def copy(source: pathlib.Path, destination: pathlib.Path, *, replace: bool = False):
    report = generate(_read_directory(source), destination, replace=replace)
    logger.info("Copied %s to %s", source, destination)
    sys.stdout.write(report.summary() + "\n")
    return report


def dump(path: pathlib.Path, *, indent: int = 2) -> str:
    output = json.dumps(_read_directory(path).to_mapping(), indent=indent)
    sys.stdout.write(output + "\n")
    return output


def load(json_file: pathlib.Path, destination: pathlib.Path, *, replace: bool = False):
    with json_file.open("r", encoding="utf-8") as f:
        directory = VirtualDirectory.from_mapping(json.load(f))
    report = generate(directory, destination, replace=replace)
    sys.stdout.write(report.summary() + "\n")
    return report


def run(args):
    match args.command:
        case "inspect":
            return inspect(args.path, depth=args.depth)
        case "copy":
            return copy(args.source, args.destination, replace=args.replace)
        case "dump":
            return dump(args.path, indent=args.indent)
        case "load":
            return load(args.json_file, args.destination, replace=args.replace)
        case _:
            raise RuntimeError(f"Unknown command #{args.command}")


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        run(args)
    except (VirtualDirError, OSError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        sys.stderr.write(f"virtualdir: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
