"""
Filename helpers for user uploads.

Uploaded photos, avatars and backgrounds keep part of the user's original
filename. These helpers keep the stored names and URL paths short enough
to stay clear of filesystem path limits.
"""
import ntpath
import re
import unicodedata
import uuid

# Windows caps paths at 260 characters; keep a safety margin
MAX_FILENAME_LENGTH = 100
MAX_PATH_LENGTH = 200

# uuid4 string plus the joining underscore
GUID_PREFIX_LENGTH = 37

_CONTROL_CHARS = frozenset(chr(code) for code in range(32))
INVALID_FILENAME_CHARS = frozenset('<>:"/\\|?*') | _CONTROL_CHARS
INVALID_PATH_CHARS = frozenset('"<>|') | _CONTROL_CHARS

_UNDERSCORE_RUN = re.compile(r'_{2,}')


def _is_control(char):
    return unicodedata.category(char) == 'Cc'


def _split_extension(file_name):
    """Split a name into (stem, extension) ignoring any directory part."""
    stem, extension = ntpath.splitext(ntpath.basename(file_name))
    if extension == '.':
        # "photo." has no extension, and Windows drops the trailing dot
        return stem, ''
    return stem, extension


def sanitize_file_name(file_name):
    """
    Replace invalid and control characters with underscores.

    Runs of underscores collapse to one, leading and trailing underscores
    are trimmed, and an empty result becomes ``unnamed``.
    """
    if not file_name:
        return 'unnamed'

    cleaned = ''.join(
        '_' if char in INVALID_FILENAME_CHARS or _is_control(char) else char
        for char in file_name
    )
    cleaned = _UNDERSCORE_RUN.sub('_', cleaned).strip('_')

    return cleaned or 'unnamed'


def create_safe_file_name(original_file_name, include_guid=True):
    """
    Build a unique, filesystem-safe name for an uploaded file.

    Args:
        original_file_name: Name supplied by the client
        include_guid: Prefix the name with a fresh UUID for uniqueness

    Returns:
        A name of at most MAX_FILENAME_LENGTH characters that keeps the
        original extension.
    """
    if not original_file_name:
        return f'{uuid.uuid4()}.jpg' if include_guid else 'unnamed.jpg'

    stem, extension = _split_extension(original_file_name)
    clean_name = sanitize_file_name(stem)

    guid_length = GUID_PREFIX_LENGTH if include_guid else 0

    # An extension that leaves no room for a one-character name is clipped
    max_extension_length = MAX_FILENAME_LENGTH - guid_length - 1
    if len(extension) > max_extension_length:
        extension = extension[:max_extension_length]

    max_name_length = MAX_FILENAME_LENGTH - guid_length - len(extension)
    if len(clean_name) > max_name_length:
        clean_name = clean_name[:max(1, max_name_length)]

    if include_guid:
        return f'{uuid.uuid4()}_{clean_name}{extension}'
    return f'{clean_name}{extension}'


def shorten_file_name(long_file_name, max_length=MAX_FILENAME_LENGTH):
    """Truncate the stem of a filename so the whole name fits max_length."""
    if not long_file_name or len(long_file_name) <= max_length:
        return long_file_name

    stem, extension = ntpath.splitext(long_file_name)

    max_name_length = max_length - len(extension)
    if max_name_length <= 0:
        return f'file{extension}'

    return f'{stem[:max_name_length]}{extension}'


def create_safe_url_path(base_path, file_name):
    """
    Join a base URL path and a filename, shortening the filename when the
    result would exceed MAX_PATH_LENGTH.
    """
    base = base_path.rstrip('/')
    full_path = f'{base}/{file_name}'

    if len(full_path) > MAX_PATH_LENGTH:
        available_length = MAX_PATH_LENGTH - len(base) - 1
        full_path = f'{base}/{shorten_file_name(file_name, available_length)}'

    return full_path


def is_path_safe(file_path):
    """Check that a path is non-empty, short enough and free of invalid characters."""
    if not file_path:
        return False

    if len(file_path) > MAX_PATH_LENGTH:
        return False

    return not any(char in INVALID_PATH_CHARS for char in file_path)
