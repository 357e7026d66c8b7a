# Tests for links.py
# Created: 2026-10-19

import pytest

from drivegallery.integrations.gdrive import FOLDER_MIME_TYPE, FileEntry
from drivegallery.links import (
    EMPTY_LINK_MESSAGE,
    FOLDER_LINK_PATTERN,
    INVALID_LINK_MESSAGE,
    FolderLinkError,
    extract_folder_id,
    image_url,
    image_urls,
)


class TestExtractFolderId:
    @pytest.mark.parametrize(
        "link, expected",
        [
            ("https://drive.google.com/drive/folders/1a2b3c4d", "1a2b3c4d"),
            ("https://drive.google.com/drive/folders/abc-DEF_123", "abc-DEF_123"),
            ("https://drive.google.com/drive/folders/xyz?usp=sharing", "xyz"),
            ("  https://drive.google.com/drive/folders/xyz?usp=sharing  ", "xyz"),
            ("https://drive.google.com/drive/folders/xyz?", "xyz"),
        ],
    )
    def test_valid_links(self, link, expected):
        assert extract_folder_id(link) == expected

    def test_matches_first_group_of_trimmed_input(self):
        link = "\thttps://drive.google.com/drive/folders/Q-9_z?resourcekey=0-abc\n"
        assert extract_folder_id(link) == FOLDER_LINK_PATTERN.fullmatch(link.strip()).group(1)

    def test_empty_input(self):
        with pytest.raises(FolderLinkError, match=EMPTY_LINK_MESSAGE):
            extract_folder_id("   ")

    @pytest.mark.parametrize(
        "link",
        [
            "not-a-link",
            "http://drive.google.com/drive/folders/abc",
            "https://drive.google.com/drive/folders/",
            "https://drive.google.com/file/d/abc/view",
            "https://drive.google.com/drive/folders/abc/extra",
            "https://drive.google.com/drive/folders/abc#frag",
            "https://drive.google.com/drive/folders/abc?usp=sharing\rx",
            "https://drive.google.com/drive/folders/abc?usp=sharing\u2028x",
            "https://drive.google.com/drive/folders/abc?usp=sharing\u2029x",
            "https://evil.example/?https://drive.google.com/drive/folders/abc",
            "https://drive.google.com/drive/folders/abcé",
        ],
    )
    def test_invalid_links(self, link):
        with pytest.raises(FolderLinkError) as exc_info:
            extract_folder_id(link)
        assert str(exc_info.value) == INVALID_LINK_MESSAGE


class TestImageUrls:
    def test_template(self):
        assert image_url("img1") == "https://drive.google.com/uc?id=img1"

    def test_keeps_only_images_in_order(self):
        entries = [
            FileEntry(id="a", mime_type="image/png"),
            FileEntry(id="b", mime_type="application/pdf"),
            FileEntry(id="c", mime_type=FOLDER_MIME_TYPE),
            FileEntry(id="d", mime_type="image/jpeg"),
            FileEntry(id="e", mime_type=""),
            FileEntry(id="f", mime_type="video/image"),
        ]
        assert image_urls(entries) == [
            "https://drive.google.com/uc?id=a",
            "https://drive.google.com/uc?id=d",
        ]

    def test_empty(self):
        assert image_urls([]) == []
