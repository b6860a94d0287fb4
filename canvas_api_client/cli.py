"""CLI commands for the Canvas API client."""

import argparse
import json
import logging
import re
import sys

from .errors import CanvasError

_BRACKET_KEY = re.compile(r"^([^\[\]]+)\[([^\[\]]*)\]$")


def parse_params(pairs):
    """Turn ``KEY=VALUE`` strings into a parameter mapping.

    ``include[]=term`` accumulates into a list and ``course[name]=N`` builds a
    nested mapping, matching the shapes ``encode_query`` accepts.

    Raises:
        ValueError: one key is given in two different shapes, e.g.
            ``a=1`` and ``a[]=2``.
    """
    params = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        match = _BRACKET_KEY.match(key)
        if not match:
            if key in params:
                _check_shape(key, params[key], str)
            params[key] = value
            continue
        name, index = match.groups()
        shape = dict if index else list
        _check_shape(name, params.setdefault(name, shape()), shape)
        if index:
            params[name][index] = value
        else:
            params[name].append(value)
    return params


def _check_shape(key, current, shape):
    if not isinstance(current, shape):
        raise ValueError(f"--param {key} is given both as {type(current).__name__} and as {shape.__name__}")


def _add_param_option(parser):
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, e.g., --param include[]=term)",
    )


def main():
    parser = argparse.ArgumentParser(
        description="Call the Canvas LMS REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Canvas instance URL (default: CANVAS_API_URL)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request and followed page",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Make a generic Canvas API call",
    )
    api_parser.add_argument(
        "path",
        help="Resource path below api/v1 (e.g., courses/123/sections)",
    )
    api_parser.add_argument(
        "--method",
        default="GET",
        type=str.upper,
        choices=["GET", "PUT", "POST", "DELETE"],
        help="HTTP method (default: GET)",
    )
    _add_param_option(api_parser)

    course_parser = subparsers.add_parser("course", help="Show a course")
    course_parser.add_argument("course_id")
    _add_param_option(course_parser)

    sections_parser = subparsers.add_parser("sections", help="List sections of a course")
    sections_parser.add_argument("course_id")
    _add_param_option(sections_parser)

    users_parser = subparsers.add_parser("users", help="List users of an account")
    users_parser.add_argument("account_id")
    _add_param_option(users_parser)

    enrollments_parser = subparsers.add_parser("enrollments", help="List enrollments of a course or section")
    enrollments_parser.add_argument("target_id")
    enrollments_parser.add_argument(
        "--type",
        default="section",
        choices=["course", "section"],
        help="Whether target_id is a course or a section (default: section)",
    )
    _add_param_option(enrollments_parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    if args.command is None:
        parser.print_help()
        return

    from . import client as client_mod

    try:
        params = parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    try:
        client = client_mod.get_client(base_url=args.base_url)
        if args.command == "api":
            result = client.request(args.method, args.path, params).body
        elif args.command == "course":
            from .courses import get_course

            result = get_course(client, args.course_id, params)
        elif args.command == "sections":
            from .sections import sections_by_course

            result = sections_by_course(client, args.course_id, params)
        elif args.command == "users":
            from .users import list_users

            result = list_users(client, args.account_id, params)
        else:
            from .enrollments import get_enrollments

            result = get_enrollments(client, args.target_id, params, type=args.type)
    except CanvasError as e:
        parser.exit(1, f"error: {e}\n")

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
