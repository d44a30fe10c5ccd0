
from .api_wrapper import RestAPI, parse_json_body

SLACK_HOST = "slack.com"

class _GenericAPI(object):

    def __init__(self, token, api_definitions, http_client, host=None):
        self.token = token
        self.http_client = http_client

        for function_name, definition in api_definitions.items():
            definition = dict(definition)
            definition["host"] = host or definition.get("host", SLACK_HOST)
            definition["protocol"] = definition.get("protocol", RestAPI.HTTPS)
            fixed = definition.pop("fixed", {})
            api = (RestAPI.from_config(definition)
                .set(decode="utf-8")
                .set_httpclient(self.http_client)
                .add_headers({
                    "Authorization": "Bearer {0}".format(self.token),
                    "Content-Type": "application/json",
                })
                .add_post_response_hook(parse_json_body()))
            if fixed:
                api.partial(**fixed)
            setattr(self, function_name, api)


from .slack import SlackClient
from .open_function import SlackOpenFunction, TextResponseItem
