"""regroup CLI — regroup group, regroup partition."""
import sys
import os

from regroup import log
from regroup.data import read, read_records, save, dumps
from regroup.exceptions import RegroupError
from regroup.group import (
    group_data_by,
    group_objects_props,
    group_objects_props_and_head_if_single,
    group_objects_props_keep_only_value,
)

USAGE = """\
Usage: regroup <command> [args]
Commands:
  group <records> <key> <structures> [--single | --values] [-o out.json]
  partition <records> <key> [-o out.json]"""


def _pop_option(args: list[str], name: str) -> str | None:
    if name not in args:
        return None
    i = args.index(name)
    if i + 1 >= len(args):
        print(f"Error: {name} needs a value", file=sys.stderr)
        sys.exit(1)
    value = args[i + 1]
    del args[i:i + 2]
    return value


def _pop_flag(args: list[str], name: str) -> bool:
    if name in args:
        args.remove(name)
        return True
    return False


def _require_file(path: str):
    if not os.path.exists(path):
        print(f"Error: file not found: {path}", file=sys.stderr)
        sys.exit(1)


def _emit(data, out_path: str | None, summary: str):
    # stdout carries the JSON unless writing to a file
    if out_path:
        log(summary)
        save(data, out_path)
    else:
        print(dumps(data))


def main():
    if len(sys.argv) < 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]
    out_path = _pop_option(args, "-o")

    try:
        if command == "group":
            single = _pop_flag(args, "--single")
            values = _pop_flag(args, "--values")
            if len(args) != 3 or (single and values):
                print("Usage: regroup group <records> <key> <structures> [--single | --values]", file=sys.stderr)
                sys.exit(1)
            records_path, key, structures_path = args
            _require_file(records_path)
            _require_file(structures_path)
            records = read_records(records_path)
            structures = read(structures_path)
            if single:
                result = group_objects_props_and_head_if_single(key, structures, records)
            elif values:
                result = group_objects_props_keep_only_value(key, structures, records)
            else:
                result = group_objects_props(key, structures, records)
            _emit(result, out_path, f"{len(records)} records -> {len(result)} groups")

        elif command == "partition":
            if len(args) != 2:
                print("Usage: regroup partition <records> <key>", file=sys.stderr)
                sys.exit(1)
            records_path, key = args
            _require_file(records_path)
            records = read_records(records_path)
            result = group_data_by(key, records)
            _emit(result, out_path, f"{len(records)} records -> {len(result)} partitions")

        else:
            print(f"Unknown command: {command}", file=sys.stderr)
            sys.exit(1)

    except RegroupError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
