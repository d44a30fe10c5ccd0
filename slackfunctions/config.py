
import os

from tornado.options import define, options

define("slack_bot_token", type=str, default=None,
        help="bot token used as the bearer credential (default: $SLACK_BOT_TOKEN)")
define("slack_team_id", type=str, default=None,
        help="team id scoping channel and user listings (default: $SLACK_TEAM_ID)")
define("slack_host", type=str, default=None,
        help="host of the Slack Web API (default: slack.com)")


class ConfigurationError(Exception):
    pass


def load_credentials(environ=None):
    """Return (team_id, bot_token, host)

    Values set through tornado.options win over the environment.
    host is None unless it has been set.
    """
    environ = os.environ if environ is None else environ
    bot_token = options.slack_bot_token or environ.get("SLACK_BOT_TOKEN")
    team_id = options.slack_team_id or environ.get("SLACK_TEAM_ID")
    host = options.slack_host or environ.get("SLACK_HOST")

    if not bot_token:
        raise ConfigurationError("slack_bot_token is not set")
    if not team_id:
        raise ConfigurationError("slack_team_id is not set")
    return team_id, bot_token, host
