
from . import _GenericAPI
from .api_wrapper import RestAPI

_API = {
    "post_message": {
        "url": "/api/chat.postMessage",
        "method": RestAPI.POST,
        "params": {
            "channel": { "type": "string", "is_required": True },
            "thread_ts": { "type": "string" },
            "text": { "type": "string", "is_required": True },
        },
    },
}

class ChatAPI(_GenericAPI):

    def __init__(self, token, http_client, host=None):
        super().__init__(token, _API, http_client, host=host)
