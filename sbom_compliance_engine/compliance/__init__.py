"""Compliance package — check functions, record store and standard dispatcher."""

from .base import Check, Standard
from .db import DB, Record
from .dispatcher import STANDARDS, UnknownStandardError, evaluate, get_standard
from .keys import CheckKey
from .ntia import NTIA
from .oct import OCT
from .scvs import SCVS, SCVS_CONTROLS, SCVS_LEVELS

__all__ = [
    "Check",
    "Standard",
    "DB",
    "Record",
    "STANDARDS",
    "UnknownStandardError",
    "evaluate",
    "get_standard",
    "CheckKey",
    "NTIA",
    "OCT",
    "SCVS",
    "SCVS_CONTROLS",
    "SCVS_LEVELS",
]
