"""

Command line utility to convert JSON schema documents to GraphQL types.

"""


import argparse
import json
import logging
import os
import sys
import tempfile

from jsonstographql import _version

ARG_TYPES = {
    'str': str,
    'int': int,
}


def load_commands():
    """Load the commands from the commands.json file."""
    commands_path = os.path.join(os.path.dirname(__file__), 'commands.json')
    with open(commands_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def create_subparsers(subparsers, commands):
    """Create subparsers for the commands."""
    for command in commands:
        cmd_parser = subparsers.add_parser(command['command'], help=command['description'])
        for arg in command['args']:
            kwargs = {'help': arg['help']}
            if arg['type'] == 'bool':
                kwargs['action'] = 'store_true'
            else:
                kwargs['type'] = ARG_TYPES[arg['type']]
            for option in ('nargs', 'choices', 'default'):
                if option in arg:
                    kwargs[option] = arg[option]
            carg = cmd_parser.add_argument(arg['name'], **kwargs)
            if arg['name'].startswith('-'):
                carg.required = arg.get('required', True)


def dynamic_import(module, func):
    """Dynamically import a module and function."""
    mod = __import__(module, fromlist=[func])
    return getattr(mod, func)


def main():
    """Main function for the command line utility."""
    commands = load_commands()
    parser = argparse.ArgumentParser(description='Convert JSON schema documents to GraphQL types.')
    parser.add_argument('--version', action='store_true', help='Print the version of jsonstographql.')
    parser.add_argument('--verbose', action='store_true', help='Log conversion details to stderr.')

    subparsers = parser.add_subparsers(dest='command')
    create_subparsers(subparsers, commands)

    args = parser.parse_args()

    if getattr(args, 'version', False):
        print(f'jsonstographql {_version.version}')
        return

    if args.command is None:
        parser.print_help()
        return

    if getattr(args, 'verbose', False):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    temp_input = None
    try:
        command = next((cmd for cmd in commands if cmd['command'] == args.command), None)
        if not command:
            print(f"Error: Command {args.command} not found.")
            sys.exit(1)

        input_file_paths = getattr(args, 'input', None)
        if not input_file_paths:
            temp_input = tempfile.NamedTemporaryFile(delete=False, mode='w', encoding='utf-8', suffix='.json')
            temp_input.write(sys.stdin.read())
            temp_input.close()
            input_file_paths = [temp_input.name]

        temp_output = None
        output_file_path = getattr(args, 'out', None)
        if output_file_path is None:
            temp_output = tempfile.NamedTemporaryFile(delete=False)
            temp_output.close()
            output_file_path = temp_output.name

        module_name, func_name = command['function']['name'].rsplit('.', 1)
        func = dynamic_import(module_name, func_name)
        func_args = {}
        for arg, val in command['function']['args'].items():
            if val == 'input_file_path':
                func_args[arg] = input_file_paths
            elif val == 'output_file_path':
                func_args[arg] = output_file_path
            elif val.startswith('args.'):
                if hasattr(args, val[5:]):
                    func_args[arg] = getattr(args, val[5:])
            else:
                func_args[arg] = val
        func(**func_args)

        if temp_output:
            with open(output_file_path, 'r', encoding='utf-8') as f:
                sys.stdout.write(f.read())
            os.remove(output_file_path)

    except Exception as e:  # pylint: disable=broad-except
        print("Error: ", str(e))
        sys.exit(1)
    finally:
        if temp_input:
            try:
                os.remove(temp_input.name)
            except OSError as e:
                print(f"Error: Could not delete temporary input file {temp_input.name}. {e}")


if __name__ == "__main__":
    main()
