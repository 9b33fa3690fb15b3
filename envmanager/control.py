#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import argparse
import os
import sys

from envmanager.core.env_manager import EnvManager
from envmanager.core.settings import ManagerSettings
from envmanager.envmanager_constants import DEMO_KEY, DEMO_VALUE, ENV_VERBOSITY
from envmanager.envmanager_utils import get_verbosity_env_var_count
from envmanager.utils.exceptions import EnvManagerError
from envmanager.utils.logger_utils import EnvManagerLogger


###################################################################################################
def cmd_verify(manager, args):
    manager.verify_installation()
    print("Environment loader verified")
    return 0


def cmd_set(manager, args):
    manager.set_variable(args.key, args.value)
    print(f"{args.key}={args.value}")
    return 0


def cmd_delete(manager, args):
    if manager.delete_variable(args.key):
        print(f"Deleted {args.key}")
    else:
        print(f"{args.key} not found")
    return 0


def cmd_reload(manager, args):
    manager.reload()
    print("Environment reloaded")
    return 0


def cmd_get(manager, args):
    value = manager.get_variable(args.key)
    live = manager.environ.get(args.key)
    print(f"persisted: {args.key}={value}" if value is not None else f"persisted: {args.key} not set")
    print(f"live: {args.key}={live}" if live is not None else f"live: {args.key} not set")
    return 0 if value is not None else 1


def cmd_list(manager, args):
    for key, value in manager.list_variables():
        print(f"{key}={value}")
    return 0


def cmd_demo(manager, args):
    manager.verify_installation()
    print("Environment loader verified")

    manager.set_variable(DEMO_KEY, DEMO_VALUE)
    print(f"Added environment variable {DEMO_KEY}={DEMO_VALUE}")

    manager.delete_variable(DEMO_KEY)
    print(f"Deleted environment variable {DEMO_KEY}")

    print("All steps succeeded")
    return 0


###################################################################################################
def build_arg_parser(parser):
    parser.add_argument(
        '--base-dir',
        dest='baseDir',
        metavar='<string>',
        default=None,
        help='Directory holding the .env file (sets the base directory variable)',
    )
    parser.add_argument(
        '--install-dir',
        dest='installDir',
        metavar='<string>',
        default=None,
        help='Directory containing the bundled env_loader directory',
    )
    parser.add_argument(
        '--component',
        dest='component',
        metavar='<string>',
        default=None,
        help='Name of the environment loader component',
    )
    parser.add_argument(
        '--shell',
        dest='shell',
        metavar='<string>',
        default=None,
        help='Shell used for self-repair and re-sourcing the startup file',
    )
    parser.add_argument(
        '--startup-file',
        dest='startupFile',
        metavar='<string>',
        default=None,
        help='Shell startup file re-sourced after a reload',
    )
    parser.add_argument('-d', '--debug', dest='debug', action='store_true', help='Enable debug output')
    parser.add_argument('-q', '--quiet', dest='quiet', action='store_true', help='Suppress log output')
    parser.add_argument(
        '--log-file',
        dest='logFile',
        metavar='<string>',
        nargs='?',
        const='',
        default=None,
        help='Write log output to a file (a timestamped name is generated if none is given)',
    )

    subparsers = parser.add_subparsers(dest='command', metavar='<command>', required=True)

    subparsers.add_parser('verify', help='Verify the environment loader').set_defaults(func=cmd_verify)

    setParser = subparsers.add_parser('set', help='Set a variable')
    setParser.add_argument('key', metavar='KEY')
    setParser.add_argument('value', metavar='VALUE')
    setParser.set_defaults(func=cmd_set)

    deleteParser = subparsers.add_parser('delete', help='Delete a variable')
    deleteParser.add_argument('key', metavar='KEY')
    deleteParser.set_defaults(func=cmd_delete)

    subparsers.add_parser('reload', help='Reload the environment').set_defaults(func=cmd_reload)

    getParser = subparsers.add_parser('get', help='Show the persisted and live value of a variable')
    getParser.add_argument('key', metavar='KEY')
    getParser.set_defaults(func=cmd_get)

    subparsers.add_parser('list', help='List persisted variables').set_defaults(func=cmd_list)

    subparsers.add_parser('demo', help='Verify, then add and delete a test variable').set_defaults(func=cmd_demo)

    return parser


def configure_logging(args, environ):
    if args.quiet:
        EnvManagerLogger.set_console_output(False)

    if args.debug or get_verbosity_env_var_count(ENV_VERBOSITY, environ) > 0:
        EnvManagerLogger.set_debug_enabled(True)

    if args.logFile is not None:
        EnvManagerLogger.set_log_file(args.logFile or EnvManagerLogger.generate_timestamped_filename())


def main(argv=None, environ=None):
    environ = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        description='Environment variable manager',
        add_help=True,
        usage='envmanager [options] <command> [<args>]',
    )
    build_arg_parser(parser)
    args = parser.parse_args(argv)

    configure_logging(args, environ)

    settings = ManagerSettings.from_environment(environ).replace(
        component_name=args.component,
        install_dir=os.path.abspath(args.installDir) if args.installDir else None,
        shell=args.shell,
        shell_startup_file=args.startupFile,
    )
    if args.baseDir:
        environ[settings.base_dir_key] = os.path.abspath(args.baseDir)

    manager = EnvManager(environ=environ, settings=settings)
    try:
        return args.func(manager, args)
    except EnvManagerError as e:
        EnvManagerLogger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
