"""
Function definitions describe a callable to a tool calling dispatcher.

A definition is a name, a description and an ordered list of parameters.
create_function_description() renders it as

    {
        "type": "function",
        "function": {
            "name": "...",
            "description": "...",
            "parameters": {
                "type": "object",
                "properties": { ... },
                "required": [ ... ],
            },
        },
    }

A nullable parameter renders its type as [type, "null"].
"""

class Parameter(object):

    TYPE_STRING = "string"
    TYPE_NUMBER = "number"
    TYPES = (TYPE_STRING, TYPE_NUMBER)

    def __init__(self, name, param_type, description=None, nullable=False, required=False):
        if param_type not in Parameter.TYPES:
            raise ValueError("Invalid parameter type {0}".format(param_type))
        self.name = name
        self.type = param_type
        self.description = description
        self.nullable = nullable
        self.required = required

    @classmethod
    def from_config(cls, name, config):
        return cls(name, config["type"],
                description=config.get("description"),
                nullable=config.get("nullable", False),
                required=config.get("required", False))

    def to_schema(self):
        schema = { "type": [self.type, "null"] if self.nullable else self.type }
        if self.description is not None:
            schema["description"] = self.description
        return schema

    def __repr__(self):
        return "Parameter({0!r}, {1!r}, nullable={2}, required={3})".format(
            self.name, self.type, self.nullable, self.required)


class FunctionDefinition(object):

    def __init__(self, name, description, parameters=None):
        self.name = name
        self.description = description
        self.parameters = list(parameters or [])

    @classmethod
    def from_config(cls, name, config):
        """Build a definition from a dict of the form

        { "description": "...", "params": { "<name>": { "type": ..., "nullable": ..., ... } } }

        params are kept in the order they are declared in.
        """
        params = config.get("params", {})
        return cls(name, config["description"],
                [ Parameter.from_config(key, param) for key, param in params.items() ])

    def add_parameter(self, parameter):
        self.parameters.append(parameter)
        return self

    @property
    def parameter_names(self):
        return [ p.name for p in self.parameters ]

    @property
    def required_parameter_names(self):
        return [ p.name for p in self.parameters if p.required ]

    def create_function_description(self):
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": { p.name: p.to_schema() for p in self.parameters },
                    "required": self.required_parameter_names,
                },
            },
        }

    def __repr__(self):
        return "FunctionDefinition({0!r}, {1!r})".format(self.name, self.parameter_names)
