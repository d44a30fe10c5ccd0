
from . import _GenericAPI
from .api_wrapper import RestAPI

MAX_LIMIT = 200

_API = {
    "list": {
        "url": "/api/users.list",
        "method": RestAPI.GET,
        "params": {
            "limit": { "type": "int", "default": 100, "max": MAX_LIMIT },
            "team_id": { "type": "string" },
            "cursor": { "type": "string", "omit_empty": True },
        },
    },
    "profile_get": {
        "url": "/api/users.profile.get",
        "method": RestAPI.GET,
        "params": {
            "user": { "type": "string", "is_required": True },
            "include_labels": { "type": "bool_string" },
        },
        "fixed": {
            "include_labels": True,
        },
    },
}
class UsersAPI(_GenericAPI):

    def __init__(self, token, team_id, http_client, host=None):
        super().__init__(token, _API, http_client, host=host)
        self.list.partial(team_id=team_id)
