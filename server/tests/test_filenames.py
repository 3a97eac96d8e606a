"""
Tests for upload filename helpers.
"""
import pytest
from fishsmart.filenames import (
    INVALID_FILENAME_CHARS,
    MAX_FILENAME_LENGTH,
    MAX_PATH_LENGTH,
    create_safe_file_name,
    create_safe_url_path,
    is_path_safe,
    sanitize_file_name,
    shorten_file_name,
)

SAMPLE_NAMES = [
    'photo.jpg',
    'IMG_2024-06-14 06.30.12.jpeg',
    'a' * 300 + '.png',
    'weird<>:"|?*name.gif',
    'no_extension',
    'trailing_dot.',
    '.hidden',
    'redfish.' + 'x' * 120,
    'tab\tand\x00nul.jpg',
    'C:\\Users\\angler\\Pictures\\catch.jpg',
]


class TestCreateSafeFileName:

    @pytest.mark.parametrize('name', SAMPLE_NAMES)
    @pytest.mark.parametrize('include_guid', [True, False])
    def test_never_exceeds_max_length(self, name, include_guid):
        assert len(create_safe_file_name(name, include_guid)) <= MAX_FILENAME_LENGTH

    @pytest.mark.parametrize('name, extension', [
        ('photo.jpg', '.jpg'),
        ('IMG_2024-06-14 06.30.12.jpeg', '.jpeg'),
        ('a' * 300 + '.png', '.png'),
        ('weird<>:"|?*name.gif', '.gif'),
        ('C:\\Users\\angler\\Pictures\\catch.jpg', '.jpg'),
    ])
    def test_keeps_original_extension(self, name, extension):
        assert create_safe_file_name(name).endswith(extension)
        assert create_safe_file_name(name, include_guid=False).endswith(extension)

    def test_empty_name_falls_back_to_jpg(self):
        assert create_safe_file_name('').endswith('.jpg')
        assert create_safe_file_name('', include_guid=False) == 'unnamed.jpg'

    def test_guid_prefix_makes_names_unique(self):
        assert create_safe_file_name('photo.jpg') != create_safe_file_name('photo.jpg')

    def test_without_guid_is_sanitized_name(self):
        assert create_safe_file_name('my:photo.jpg', include_guid=False) == 'my_photo.jpg'

    def test_trailing_dot_is_dropped(self):
        assert create_safe_file_name('photo.', include_guid=False) == 'photo'
        assert not create_safe_file_name('photo.').endswith('.')


class TestSanitizeFileName:

    def test_empty_is_unnamed(self):
        assert sanitize_file_name('') == 'unnamed'

    def test_only_invalid_characters_is_unnamed(self):
        assert sanitize_file_name('<>|') == 'unnamed'

    @pytest.mark.parametrize('name', SAMPLE_NAMES + ['a__b___c', '__edge__', 'x\x1fy\x7fz'])
    def test_output_is_clean(self, name):
        result = sanitize_file_name(name)
        assert not any(char in INVALID_FILENAME_CHARS for char in result)
        assert not any(ord(char) < 32 or ord(char) == 127 for char in result)
        assert '__' not in result

    def test_replaces_and_collapses(self):
        assert sanitize_file_name('big  fish?*.jpg') == 'big  fish_.jpg'
        assert sanitize_file_name('a//b') == 'a_b'


class TestShortenFileName:

    def test_short_name_unchanged(self):
        assert shorten_file_name('photo.jpg', 50) == 'photo.jpg'
        assert shorten_file_name('x' * 50, 50) == 'x' * 50

    def test_long_name_keeps_extension(self):
        result = shorten_file_name('a' * 150 + '.jpg', 50)
        assert len(result) <= 50
        assert result.endswith('.jpg')

    def test_no_room_for_stem(self):
        assert shorten_file_name('photo.jpeg', 3) == 'file.jpeg'


class TestUrlPaths:

    def test_joins_base_and_name(self):
        assert create_safe_url_path('/Images/Catches/', 'fish.jpg') == '/Images/Catches/fish.jpg'

    def test_long_path_is_shortened(self):
        result = create_safe_url_path('/Images/Catches', 'b' * 300 + '.jpg')
        assert len(result) <= MAX_PATH_LENGTH
        assert result.startswith('/Images/Catches/')
        assert result.endswith('.jpg')

    def test_safe_path(self):
        assert is_path_safe('/Images/Backgrounds/fish.jpg')

    @pytest.mark.parametrize('path', [
        '',
        '/' + 'p' * MAX_PATH_LENGTH,
        '/Images/bad\x00name.jpg',
        '/Images/"quoted".jpg',
        '/Images/<tag>.jpg',
    ])
    def test_unsafe_paths(self, path):
        assert not is_path_safe(path)
