
from . import _GenericAPI
from .api_wrapper import RestAPI

_API = {
    "add": {
        "url": "/api/reactions.add",
        "method": RestAPI.POST,
        "params": {
            "channel": { "type": "string", "is_required": True },
            "timestamp": { "type": "string", "is_required": True },
            # emoji name, without the surrounding colons
            "name": { "type": "string", "is_required": True },
        },
    },
}

class ReactionsAPI(_GenericAPI):

    def __init__(self, token, http_client, host=None):
        super().__init__(token, _API, http_client, host=host)
