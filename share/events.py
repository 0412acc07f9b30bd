# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.

import datetime
from typing import Any, Optional


class Event:
    """
    A single record flowing through the pipeline.
    Nodes read `created_at`, `type` and `payload` and append rendered
    representations to the format storage; they never change the first three
    """

    def __init__(self, event_type: str, payload: Any, created_at: Optional[datetime.datetime] = None):
        if created_at is None:
            created_at = datetime.datetime.now(datetime.timezone.utc)

        self.type: str = event_type
        self.payload: Any = payload
        self.created_at: datetime.datetime = created_at
        self.formatted: dict[str, bytes] = {}

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError("`type` must be provided as string")

        self._type = value

    @property
    def created_at(self) -> datetime.datetime:
        return self._created_at

    @created_at.setter
    def created_at(self, value: datetime.datetime) -> None:
        if not isinstance(value, datetime.datetime):
            raise ValueError("`created_at` must be provided as datetime")

        self._created_at = value

    def format(self, format_name: str) -> Optional[bytes]:
        """
        Returns the bytes previously stored for `format_name`, None if the event was never rendered in it
        """
        return self.formatted.get(format_name)

    def formatted_as(self, format_name: str, value: bytes) -> None:
        self.formatted[format_name] = value
