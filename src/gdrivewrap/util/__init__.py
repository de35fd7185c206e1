from .ids import (
    HOME_ALIAS,
    PATH_SEPARATOR,
    ROOT_ID,
    is_not_found_id,
    is_root_segment,
)
from .mime import DIRECTORY_CODE, FILE_CODE, FOLDER_MIME, is_folder
from .time import normalize_dt, parse_listing_time, parse_rfc3339, to_naive_utc

__all__ = [
    "ROOT_ID",
    "HOME_ALIAS",
    "PATH_SEPARATOR",
    "is_root_segment",
    "is_not_found_id",
    "FOLDER_MIME",
    "DIRECTORY_CODE",
    "FILE_CODE",
    "is_folder",
    "parse_listing_time",
    "parse_rfc3339",
    "normalize_dt",
    "to_naive_utc",
]
