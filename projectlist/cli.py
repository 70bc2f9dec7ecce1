#!/usr/bin/env python3
"""pl CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from projectlist.lib.config import load_config
from projectlist.lib.source import load_projects
from projectlist.commands import list as cmd_list_module
from projectlist.commands import show as cmd_show_module
from projectlist.commands import export as cmd_export_module


def get_config(args):
    """Load config from --root, applying --file on top."""
    root = Path(args.root) if args.root else Path.cwd()
    try:
        config = load_config(root)
    except ValueError as e:
        print(f"ERROR: Invalid projectlist.env: {e}")
        sys.exit(2)

    if args.file:
        config.projectlist_path = Path(args.file)
    return config


def run_with_projects(handler):
    """Wrap a command handler so it receives config and parsed projects."""
    def run(args):
        config = get_config(args)
        try:
            projects = load_projects(config.projectlist_path)
        except FileNotFoundError as e:
            print(f"ERROR: {e}")
            return 2
        return handler(args, config, projects)
    return run


def main(argv=None):
    parser = argparse.ArgumentParser(prog='pl', description='Project list viewer')
    parser.add_argument('--root', '-r', help='Repository root (default: current directory)')
    parser.add_argument('--file', '-f', help='Path to projectlist.md (overrides PROJECTLIST_PATH)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log parser decisions')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # pl list
    p_list = subparsers.add_parser('list', help='List projects by lifecycle stage')
    p_list.add_argument('--all', '-a', action='store_true', help='Include abandoned and on-hold projects')
    p_list.set_defaults(func=run_with_projects(cmd_list_module.cmd_list))

    # pl show
    p_show = subparsers.add_parser('show', help='Show project details')
    p_show.add_argument('id', help='Project ID (e.g., 0042)')
    p_show.set_defaults(func=run_with_projects(cmd_show_module.cmd_show))

    # pl export
    p_export = subparsers.add_parser('export', help='Export projects as JSON or YAML')
    p_export.add_argument('--format', choices=['json', 'yaml'], help='Output format (default: EXPORT_FORMAT or json)')
    p_export.add_argument('--output', '-o', help='Write to file instead of stdout')
    p_export.set_defaults(func=run_with_projects(cmd_export_module.cmd_export))

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
