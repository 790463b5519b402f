from __future__ import annotations

import argparse

from dodgerace.ui.cli import commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dodge Race")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--width", type=int, default=None)
    common_parent.add_argument("--height", type=int, default=None)
    common_parent.add_argument("--fps", type=int, default=None)
    common_parent.add_argument("--seed", type=int, default=None)
    common_parent.add_argument("--duration", type=float, default=None, help="Round length in seconds")

    sub = subparsers.add_parser("play", parents=[common_parent], help="Open the game window")
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless rounds")
    sub.add_argument("--rounds", type=int, default=None)
    sub.add_argument("--pilot", choices=sorted(commands.PILOTS), default="dodge")
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
