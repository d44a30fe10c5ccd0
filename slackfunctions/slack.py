
import types

import tornado.httpclient

from . import conversations, users, chat, reactions

class SlackClient(object):
    """Blocking client for the handful of Slack Web API methods we expose.

    Every method issues exactly one request and returns the decoded json
    as it is. Errors from the http client or the json decoder are not caught.
    """

    def __init__(self, bot_token, team_id, http_client=None, host=None):
        self.team_id = team_id
        self.http_client = http_client or tornado.httpclient.HTTPClient()

        self.api = types.SimpleNamespace()
        self.api.conversations = conversations.ConversationsAPI(bot_token, team_id, self.http_client, host=host)
        self.api.users = users.UsersAPI(bot_token, team_id, self.http_client, host=host)
        self.api.chat = chat.ChatAPI(bot_token, self.http_client, host=host)
        self.api.reactions = reactions.ReactionsAPI(bot_token, self.http_client, host=host)

    def close(self):
        self.http_client.close()

    def list_channels(self, limit=100, cursor=None):
        """List public, non archived channels of the team.

        limit is clamped to 200. cursor is only sent when given.
        """
        return self.api.conversations.list(limit=limit, cursor=cursor)

    def post_message(self, channel_id, text):
        return self.api.chat.post_message(channel=channel_id, text=text)

    def reply_to_thread(self, channel_id, thread_ts, text):
        """Post text in the thread whose parent message is thread_ts"""
        return self.api.chat.post_message(channel=channel_id, thread_ts=thread_ts, text=text)

    def add_reaction(self, channel_id, timestamp, reaction):
        """reaction is the emoji name without the colons, e.g. thumbsup"""
        return self.api.reactions.add(channel=channel_id, timestamp=timestamp, name=reaction)

    def get_channel_history(self, channel_id, limit=10):
        return self.api.conversations.history(channel=channel_id, limit=limit)

    def get_thread_replies(self, channel_id, thread_ts):
        return self.api.conversations.replies(channel=channel_id, ts=thread_ts)

    def get_users(self, limit=100, cursor=None):
        """List the users of the team.

        limit is clamped to 200. cursor is only sent when given.
        """
        return self.api.users.list(limit=limit, cursor=cursor)

    def get_user_profile(self, user_id):
        return self.api.users.profile_get(user=user_id)
