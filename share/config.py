# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

from typing import Any, Union

import yaml

from .logger import logger as shared_logger

_available_output_types: list[str] = ["elasticsearch"]

_DEFAULT_FORMAT = "json"
_DEFAULT_REQUEST_TIMEOUT = 30
_DEFAULT_MAX_RETRIES = 4


class Output:
    """
    Base class for Output component
    """

    def __init__(self, output_type: str):
        self.type: str = output_type

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`type` must be provided as string")

        if value not in _available_output_types:
            raise ValueError(f"`type` must be one of {','.join(_available_output_types)}: {value} given")
        self._type = value


class ElasticsearchOutput(Output):
    def __init__(
        self,
        elasticsearch_url: str = "",
        cloud_id: str = "",
        username: str = "",
        password: str = "",
        api_key: str = "",
        index_name: str = "",
        format: str = _DEFAULT_FORMAT,
        ssl_assert_fingerprint: str = "",
        request_timeout: Union[int, float] = _DEFAULT_REQUEST_TIMEOUT,
        max_retries: int = _DEFAULT_MAX_RETRIES,
    ):
        super().__init__(output_type="elasticsearch")
        self.elasticsearch_url = elasticsearch_url
        self.cloud_id = cloud_id
        self.username = username
        self.password = password
        self.api_key = api_key
        self.index_name = index_name
        self.format = format
        self.ssl_assert_fingerprint = ssl_assert_fingerprint
        self.request_timeout = request_timeout
        self.max_retries = max_retries

        if not self.cloud_id and not self.elasticsearch_url:
            raise ValueError("One between `elasticsearch_url` or `cloud_id` must be set")

        if self.cloud_id and self.elasticsearch_url:
            shared_logger.warning("both `elasticsearch_url` and `cloud_id` set in config: using `elasticsearch_url`")
            self.cloud_id = ""

        if not self.username and not self.api_key:
            raise ValueError("One between `username` and `password`, or `api_key` must be set")

        if self.username and self.api_key:
            shared_logger.warning("both `api_key` and `username` and `password` set in config: using `api_key`")
            self.username = ""
            self.password = ""

        if self.username and not self.password:
            raise ValueError("`password` must be set when using `username`")

        if not self.index_name:
            raise ValueError("`index_name` must be set")

        if not self.format:
            shared_logger.debug("empty `format` set in config: using default", extra={"format": _DEFAULT_FORMAT})
            self.format = _DEFAULT_FORMAT

    @property
    def elasticsearch_url(self) -> str:
        return self._elasticsearch_url

    @elasticsearch_url.setter
    def elasticsearch_url(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`elasticsearch_url` must be provided as string")

        self._elasticsearch_url = value

    @property
    def cloud_id(self) -> str:
        return self._cloud_id

    @cloud_id.setter
    def cloud_id(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`cloud_id` must be provided as string")

        self._cloud_id = value

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`username` must be provided as string")

        self._username = value

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`password` must be provided as string")

        self._password = value

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`api_key` must be provided as string")

        self._api_key = value

    @property
    def index_name(self) -> str:
        return self._index_name

    @index_name.setter
    def index_name(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`index_name` must be provided as string")

        self._index_name = value

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`format` must be provided as string")

        self._format = value

    @property
    def ssl_assert_fingerprint(self) -> str:
        return self._ssl_assert_fingerprint

    @ssl_assert_fingerprint.setter
    def ssl_assert_fingerprint(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`ssl_assert_fingerprint` must be provided as string")

        self._ssl_assert_fingerprint = value

    @property
    def request_timeout(self) -> Union[int, float]:
        return self._request_timeout

    @request_timeout.setter
    def request_timeout(self, value: Union[int, float]) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("`request_timeout` must be provided as number")

        if value <= 0:
            raise ValueError("`request_timeout` must be greater than 0")

        self._request_timeout = value

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @max_retries.setter
    def max_retries(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("`max_retries` must be provided as integer")

        if value < 0:
            raise ValueError("`max_retries` must not be negative")

        self._max_retries = value


class Config:
    """
    Config component.
    Holds the outputs every event is delivered to
    """

    def __init__(self) -> None:
        self._outputs: list[Output] = []

    @property
    def outputs(self) -> list[Output]:
        return self._outputs

    def add_output(self, output_type: str, **kwargs: Any) -> None:
        """
        Output setter.
        Builds the concrete Output given its type and args and appends it to the config
        """
        output: Output
        if output_type == "elasticsearch":
            output = ElasticsearchOutput(**kwargs)
        else:
            output = Output(output_type=output_type)

        self._outputs.append(output)


def parse_config(config_yaml: str) -> Config:
    """
    Config component factory
    Given a config yaml as string it return the Config instance as defined by the yaml
    """

    yaml_config = yaml.safe_load(config_yaml)
    if not isinstance(yaml_config, dict):
        raise ValueError("config must be provided as a yaml mapping")

    conf: Config = Config()

    if "outputs" not in yaml_config or not isinstance(yaml_config["outputs"], list):
        raise ValueError("`outputs` must be provided as list")

    if len(yaml_config["outputs"]) == 0:
        raise ValueError("at least one output must be provided")

    for output_n, output_config in enumerate(yaml_config["outputs"]):
        if not isinstance(output_config, dict):
            raise ValueError(f"output at position {output_n + 1} must be provided as dictionary")

        if "type" not in output_config or not isinstance(output_config["type"], str):
            raise ValueError(f"`type` must be provided as string for output at position {output_n + 1}")

        if "args" not in output_config or not isinstance(output_config["args"], dict):
            raise ValueError(f"`args` must be provided as dictionary for output at position {output_n + 1}")

        try:
            conf.add_output(output_type=output_config["type"], **output_config["args"])
        except (ValueError, TypeError) as e:
            raise ValueError(
                f"An error occurred while applying output configuration at position {output_n + 1}"
                f" for type {output_config['type']}: {e}"
            )

    return conf
