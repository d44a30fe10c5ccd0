
from . import _GenericAPI
from .api_wrapper import RestAPI

MAX_LIMIT = 200

_API = {
    "list": {
        "url": "/api/conversations.list",
        "method": RestAPI.GET,
        "params": {
            "types": { "type": "comma_string" },
            "exclude_archived": { "type": "bool_string" },
            "limit": { "type": "int", "default": 100, "max": MAX_LIMIT },
            "team_id": { "type": "string" },
            "cursor": { "type": "string", "omit_empty": True },
        },
        "fixed": {
            "types": "public_channel",
            "exclude_archived": True,
        },
    },
    "history": {
        "url": "/api/conversations.history",
        "method": RestAPI.GET,
        "params": {
            "channel": { "type": "string", "is_required": True },
            "limit": { "type": "int", "default": 10 },
        },
    },
    "replies": {
        "url": "/api/conversations.replies",
        "method": RestAPI.GET,
        "params": {
            "channel": { "type": "string", "is_required": True },
            "ts": { "type": "string", "is_required": True },
        },
    },
}

class ConversationsAPI(_GenericAPI):

    def __init__(self, token, team_id, http_client, host=None):
        super().__init__(token, _API, http_client, host=host)
        self.list.partial(team_id=team_id)
