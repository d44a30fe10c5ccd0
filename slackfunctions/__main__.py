"""
Usage:
    python -m slackfunctions [--logging=debug] definitions
    python -m slackfunctions [--slack_bot_token=... --slack_team_id=...] call <name> '<json arguments>'
"""
import sys
import json

import tornado.options

from .open_function import SlackOpenFunction
from . import config


def main(argv=None):
    args = tornado.options.parse_command_line(argv)
    if not args or args[0] not in ("definitions", "call"):
        sys.stderr.write(__doc__)
        return 2

    if args[0] == "definitions":
        sys.stdout.write(json.dumps(SlackOpenFunction.generate_function_definitions(), indent=2) + "\n")
        return 0

    if len(args) not in (2, 3):
        sys.stderr.write(__doc__)
        return 2
    try:
        arguments = json.loads(args[2]) if len(args) == 3 else {}
        slack = SlackOpenFunction.from_options()
    except (ValueError, config.ConfigurationError) as e:
        sys.stderr.write("error: {0}\n".format(e))
        return 2
    try:
        response = slack.call_method(args[1], arguments)
    finally:
        slack.close()
    sys.stdout.write(response.text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
