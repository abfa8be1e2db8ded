"""
Request bodies for the picker HTTP API.

Shape validation only. Palette membership and hex syntax are checked by
the domain layer so that HTTP and non-HTTP callers share one rule set.
"""

from __future__ import annotations

from pydantic import BaseModel


class PickRequest(BaseModel):
    family: str
    depth: int


class ColorRequest(BaseModel):
    value: str


class ConnectRequest(BaseModel):
    endpoint: str
