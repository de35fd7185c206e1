from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

# Type codes printed in the "Type" column of `gdrive list`.
DIRECTORY_CODE: str = "dir"
FILE_CODE: str = "bin"


def is_folder(mime_type: str) -> bool:
    return mime_type.strip().lower() == FOLDER_MIME
