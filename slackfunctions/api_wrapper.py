"""
Api wrapper is a small tornado wrapper that allows developers to describe a rest api
in the form of a dictionary and call it like a method.

Calls are blocking: requests are fetched with tornado.httpclient.HTTPClient
(or any object exposing the same fetch(request) method).

Some note:

GET params go to the query string, POST params go to a compact json body.
Requests are fetched exactly once. Errors raised by the http client
(HTTPClientError for non 2xx status, OSError for network failures) are
logged and re-raised as they are.
"""
import json
import math
import logging

import tornado.httputil
import tornado.httpclient

#################### Exceptions #####################
class RestAPIParserException(Exception):
    pass


class RestAPIRuntimeException(Exception):
    pass

#################### Utility functions #####################


def _fetch(http_client, request):
    """Fetch a request once

    http_client         The httpclient to use
    request             The request to fetch
    """
    logging.debug("Fetching: {method} {url}".format(method=request.method, url=request.url))
    try:
        return http_client.fetch(request)
    except tornado.httpclient.HTTPClientError as e:
        logging.warning(("Request error:\nURL: {}\nMethod: {}\nCode: {}").format(
                request.url, request.method, e.code))
        raise

#################### Main object #################
class RestAPI(object):
    """
    Usage:
    from api_wrapper import RestAPI

    user_api_config = {
        "protocol": RestAPI.HTTPS,
        "url": "/api/users.list",
        "params": { "limit" : { "type": "int", "default": 100, "max": 200 } },
        "method": RestAPI.GET,
        "host": "slack.com",
        "headers": {},
    }

    list_users = RestAPI.from_config(user_api_config)

    response = list_users(limit=50)

    do not use the constructor of RestAPI directly
    """

    ##### Commonly used constants #######
    HTTP="http"
    HTTPS="https"

    GET="GET"
    POST="POST"
    METHODS = (GET, POST)

    TYPE_STRING = "string"
    TYPE_INT = "int"
    TYPE_COMMA_STRING = "comma_string"
    TYPE_BOOL_STRING = "bool_string"
    PARAM_TYPES = (
        TYPE_STRING, TYPE_INT,
        TYPE_COMMA_STRING, TYPE_BOOL_STRING
    )

    JSON_SEPARATORS = (",", ":")

    def __init__(self):
        self.http_client = None
        self.host = None
        self.post_response_hooks = []
        self.headers = {}
        self._default_values = {}
        self._partial_values = {}
        self.decode = None

    @classmethod
    def from_config(cls, config):
        api = RestAPI()
        api.protocol = config.get("protocol") if "protocol" in config else RestAPI.HTTPS
        api.host = config.get("host") if "host" in config else None
        api.url = config.get("url")
        if api.url is None:
            raise RestAPIParserException("url is not set")
        api.method = config.get("method") if "method" in config else RestAPI.GET
        if api.method not in RestAPI.METHODS:
            raise RestAPIParserException("Invalid method {0}".format(api.method))

        if "headers" in config:
            api.headers.update(config["headers"])
        api.params = config.get("params") if "params" in config else {}
        for key, param in api.params.items():
            if param.get("type") is not None and param["type"] not in RestAPI.PARAM_TYPES:
                raise RestAPIParserException("Invalid type {0} for param {1}".format(param["type"], key))
            if "default" in param:
                api._default_values[key] = param["default"]
        return api

    def set(self, **params):
        """Set the other stuffs in one shot

        The only thing that can be set here is
        decode                  what encoding to decode the response to. (default None)
        """
        if "decode" in params:
            self.decode = params["decode"]
        return self

    def copy(self):
        """Make a copy of this api
        """
        api = RestAPI()
        api.protocol = self.protocol
        api.url = self.url
        api.method = self.method
        api.params = self.params
        api.decode = self.decode

        # mutable values
        api._default_values.update(self._default_values)
        api._partial_values.update(self._partial_values)

        api.http_client = self.http_client
        api.host = self.host
        api.headers.update(self.headers)
        api.post_response_hooks = [ h for h in self.post_response_hooks ]
        return api

    def add_headers(self, headers, create_new=False):
        """Add default headers to the api

        headers                 key/value pair for headers
        create_new              if True a new RestAPI object is returned,
                                else the current one is modified (default: False)

        return                  instance of RestAPI
        """
        copy = self.copy() if create_new else self
        copy.headers.update(headers)
        return copy

    def set_httpclient(self, http_client, create_new=False):
        """Set the HTTPClient to use

        http_client             a tornado.httpclient.HTTPClient instance
        create_new              if True a new RestAPI object is returned,
                                else the current one is modified (default: False)

        return                  instance of RestAPI
        """
        copy = self.copy() if create_new else self
        copy.http_client = http_client
        return copy

    def add_post_response_hook(self, hooks, create_new=False):
        """Add a post response hook

        hooks                   a function that is called with the response once it is fetched.
                                Its return value replaces the value returned by the call.
        create_new              if True a new RestAPI object is returned,
                                else the current one is modified (default: False)
        """
        copy = self.copy() if create_new else self
        copy.post_response_hooks.append(hooks)
        return copy

    def partial(self, create_new=False, **params):
        """Partially fill this api.

        create_new              if True a new RestAPI object is returned,
                                else the current one is modified (default: False)
        **params                fill the object with partial data.

        Values filled here are fixed and cannot be passed again when calling.
        """
        copy = self.copy() if create_new else self
        for key, param in params.items():
            if key not in copy.params:
                raise RestAPIRuntimeException("Invalid params {0}".format(key))
            copy._partial_values[key] = param
        return copy

    def __call__(self, **params):
        """The actual call method

        Please call this with keyword arguments.
        Params given as None are treated as not given.

        Returns the fetched response, or whatever the last post response hook returns.
        """
        if self.http_client is None:
            raise RestAPIRuntimeException("http_client is not set")
        request = self._create_request(params=params)
        response = _fetch(self.http_client, request)
        if hasattr(response, "body") and response.body is not None and self.decode is not None:
            response.decoded_body = response.body.decode(self.decode)

        result = response
        for hook in self.post_response_hooks:
            result = hook(response)
        return result

    def request(self, **params):
        """Create a request with params
        """
        return self._create_request(params=params)

    def _create_request(self, params):
        """Internal method to create request
        """
        for param_key, value in params.items():
            if param_key in self._partial_values and value is not None:
                raise RestAPIRuntimeException("param {0} have been fixed".format(param_key))

        actual_params = {}
        actual_params.update(self._default_values)
        actual_params.update({ k: v for k, v in params.items() if v is not None })
        actual_params.update(self._partial_values)

        self._clean_and_check_if_ready(actual_params)
        url = "{protocol}://{host}{url}".format(protocol=self.protocol, host=self.host, url=self.url)
        # create the actual request
        _r = { "method": self.method, "headers": {} }
        _r["headers"].update(self.headers)

        if self.method == RestAPI.GET:
            url = tornado.httputil.url_concat(url, actual_params)
        else:
            _r["body"] = json.dumps(actual_params, separators=RestAPI.JSON_SEPARATORS)
            _r["headers"]["Content-Type"] = "application/json"

        _r["url"] = url
        return tornado.httpclient.HTTPRequest(**_r)

    def _clean_and_check_if_ready(self, actual_params):
        """Check if the request is ready to be called

        raise RestAPIRuntimeException if not enough param is passed to create the request
        Params are reordered to follow the order they are declared in.
        """
        if self.host is None:
            raise RestAPIRuntimeException("host is not set")
        for key in list(actual_params.keys()):
            if key not in self.params:
                raise RestAPIRuntimeException("{0} is not a valid param".format(key))

        for key, param in self.params.items():
            if param.get("is_required") and key not in actual_params:
                raise RestAPIRuntimeException("param {0} is required".format(key))

            if key in actual_params:
                new_value = self._check_type_and_value_for_param(key, actual_params[key], param)
                if new_value is None:
                    actual_params.pop(key)
                else:
                    actual_params[key] = new_value

        for key in [ key for key in self.params if key in actual_params ]:
            actual_params[key] = actual_params.pop(key)

    def _check_type_and_value_for_param(self, key, value, param):
        param_type = param.get("type")
        if param_type == "string":
            value = str(value)
        elif param_type == "int":
            # clamp before converting, so anything above the maximum (inf included) becomes the maximum
            maximum = param.get("max")
            if (maximum is not None and isinstance(value, (int, float))
                    and not isinstance(value, bool) and not math.isnan(value) and value > maximum):
                value = maximum
            try:
                value = int(value)
            except (TypeError, ValueError, OverflowError):
                raise RestAPIRuntimeException("{0} cannot be converted to a int".format(value))
        elif param_type == "comma_string":
            if isinstance(value, list):
                value = ",".join(str(v) for v in value)
            elif not isinstance(value, str):
                raise RestAPIRuntimeException("{0} cannot be converted to a comma separated string".format(value))
        elif param_type == "bool_string":
            if isinstance(value, str):
                value_lowered = value.lower()
                if value_lowered not in {"true", "false"}:
                    raise RestAPIRuntimeException("{0} is not valid bool_string value".format(value))
                value = value_lowered
            elif isinstance(value, bool):
                value = { True: "true", False: "false" }.get(value)
            else:
                raise RestAPIRuntimeException("{0} is not valid bool_string value".format(value))

        if param.get("omit_empty") and value == "":
            return None

        return value


def parse_json_body(decode="utf-8"):
    """A post response hook that parses the body as json

    decode                  the encoding of the body ( default: "utf-8" )

    Malformed json raises ValueError.
    """
    def _parse(response):
        if hasattr(response, "decoded_body"):
            body = response.decoded_body
        else:
            body = response.body.decode(decode)
        response.json_body = json.loads(body)
        return response.json_body
    return _parse
