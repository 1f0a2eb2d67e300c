"""Hosting provider enum."""

from enum import Enum


class Provider(str, Enum):
    GITHUB = "github"
    BITBUCKET = "bitbucket"
    UNKNOWN = "unknown"
