
import json
import logging

from .slack import SlackClient
from .definitions import FunctionDefinition, Parameter

JSON_SEPARATORS = (",", ":")

#################### Exceptions #####################
class FunctionNotFoundException(Exception):
    pass


class InvalidArgumentsException(Exception):
    pass

#################### Catalog #####################
# Optional params are nullable and required: the dispatcher passes a value
# or an explicit null, never leaves the key out.
_FUNCTIONS = {
    "list_channels": {
        "description": "List public channels in the workspace with pagination.",
        "params": {
            "limit": {
                "type": Parameter.TYPE_NUMBER, "nullable": True, "required": True,
                "description": "Maximum number of channels to return (default 100, max 200)",
            },
            "cursor": {
                "type": Parameter.TYPE_STRING, "nullable": True, "required": True,
                "description": "Pagination cursor for next page of results",
            },
        },
    },
    "post_message": {
        "description": "Post a new message to a Slack channel.",
        "params": {
            "channel_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the channel to post to",
            },
            "text": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The message text to post",
            },
        },
    },
    "reply_to_thread": {
        "description": "Reply to a specific message thread in Slack.",
        "params": {
            "channel_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the channel containing the thread",
            },
            "thread_ts": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The timestamp of the parent message",
            },
            "text": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The reply text",
            },
        },
    },
    "add_reaction": {
        "description": "Add a reaction emoji to a Slack message.",
        "params": {
            "channel_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the channel containing the message",
            },
            "timestamp": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The timestamp of the message to react to",
            },
            "reaction": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The name of the emoji reaction (without colons)",
            },
        },
    },
    "get_channel_history": {
        "description": "Get recent messages from a Slack channel.",
        "params": {
            "channel_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the channel",
            },
            "limit": {
                "type": Parameter.TYPE_NUMBER, "nullable": True, "required": True,
                "description": "Number of messages to retrieve (default 10)",
            },
        },
    },
    "get_thread_replies": {
        "description": "Get all replies in a Slack message thread.",
        "params": {
            "channel_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the channel containing the thread",
            },
            "thread_ts": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The timestamp of the parent message",
            },
        },
    },
    "get_users": {
        "description": "Get a list of users in the Slack workspace.",
        "params": {
            "limit": {
                "type": Parameter.TYPE_NUMBER, "nullable": True, "required": True,
                "description": "Maximum number of users to return (default 100, max 200)",
            },
            "cursor": {
                "type": Parameter.TYPE_STRING, "nullable": True, "required": True,
                "description": "Pagination cursor for next page of results",
            },
        },
    },
    "get_user_profile": {
        "description": "Get detailed profile information for a specific Slack user.",
        "params": {
            "user_id": {
                "type": Parameter.TYPE_STRING, "required": True,
                "description": "The ID of the user",
            },
        },
    },
}

#################### Responses #####################
class TextResponseItem(object):
    """The envelope returned to the dispatcher for every call"""

    def __init__(self, text):
        self.text = text

    def to_dict(self):
        return { "type": "text", "text": self.text }

    def __repr__(self):
        return "TextResponseItem({0!r})".format(self.text)


class SlackOpenFunction(object):
    """Exposes SlackClient as functions a tool calling dispatcher can call by name.

    Each method forwards to the client and serializes the decoded json into a
    TextResponseItem. Nothing is validated here, the types are only declared
    in the function definitions.

    Usage:
        slack = SlackOpenFunction(team_id, bot_token)
        tools = slack.generate_function_definitions()
        ...
        response = slack.call_method("get_users", { "limit": 50, "cursor": None })
    """

    def __init__(self, team_id, bot_token, http_client=None, host=None):
        self.slack_client = SlackClient(bot_token, team_id, http_client=http_client, host=host)

    @classmethod
    def from_options(cls, http_client=None):
        """Build an instance with the credentials from tornado.options or the environment"""
        from .config import load_credentials
        team_id, bot_token, host = load_credentials()
        return cls(team_id, bot_token, http_client=http_client, host=host)

    def close(self):
        self.slack_client.close()

    def list_channels(self, limit=100, cursor=None):
        result = self.slack_client.list_channels(limit, cursor)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def post_message(self, channel_id, text):
        result = self.slack_client.post_message(channel_id, text)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def reply_to_thread(self, channel_id, thread_ts, text):
        result = self.slack_client.reply_to_thread(channel_id, thread_ts, text)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def add_reaction(self, channel_id, timestamp, reaction):
        result = self.slack_client.add_reaction(channel_id, timestamp, reaction)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def get_channel_history(self, channel_id, limit=10):
        result = self.slack_client.get_channel_history(channel_id, limit)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def get_thread_replies(self, channel_id, thread_ts):
        result = self.slack_client.get_thread_replies(channel_id, thread_ts)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def get_users(self, limit=100, cursor=None):
        result = self.slack_client.get_users(limit, cursor)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    def get_user_profile(self, user_id):
        result = self.slack_client.get_user_profile(user_id)
        return TextResponseItem(json.dumps(result, separators=JSON_SEPARATORS))

    @staticmethod
    def function_definitions():
        return [ FunctionDefinition.from_config(name, config) for name, config in _FUNCTIONS.items() ]

    @classmethod
    def generate_function_definitions(cls):
        """Generate the function definitions for every exposed method, in a fixed order"""
        return [ d.create_function_description() for d in cls.function_definitions() ]

    def call_method(self, name, arguments=None):
        """Invoke a function by the name it is declared under.

        arguments must hold every declared parameter. Nullable ones may be None
        but cannot be left out.
        """
        if name not in _FUNCTIONS:
            raise FunctionNotFoundException("{0} is not a declared function".format(name))
        arguments = arguments or {}
        definition = FunctionDefinition.from_config(name, _FUNCTIONS[name])

        missing = [ key for key in definition.required_parameter_names if key not in arguments ]
        if missing:
            raise InvalidArgumentsException("{0} is missing arguments: {1}".format(name, ", ".join(missing)))
        unexpected = [ key for key in arguments if key not in definition.parameter_names ]
        if unexpected:
            raise InvalidArgumentsException("{0} got unexpected arguments: {1}".format(name, ", ".join(unexpected)))

        logging.debug("Calling function {0}".format(name))
        return getattr(self, name)(**arguments)
