"""
Unit tests for static file resolution.

Run: pytest tests/unit/test_static_files.py -v
"""

import pytest
from pathlib import Path

from routes.static import content_type_for, resolve_public_file
from exceptions import ForbiddenPathError, StaticFileNotFoundError


@pytest.fixture
def public_dir(tmp_path) -> Path:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html></html>", encoding="utf-8")
    (public / "nested").mkdir()
    (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
    return public


class TestContentTypeFor:
    """Tests for content_type_for()"""

    @pytest.mark.parametrize("name,expected", [
        ("index.html", "text/html"),
        ("app.js", "text/javascript"),
        ("style.css", "text/css"),
        ("LOGO.PNG", "image/png"),
        ("font.woff2", "font/woff2"),
        ("archive.tar.gz", "application/octet-stream"),
        ("README", "application/octet-stream"),
    ])
    def test_extension_mapping(self, name, expected):
        assert content_type_for(Path(name)) == expected


class TestResolvePublicFile:
    """Tests for resolve_public_file()"""

    def test_resolves_existing_file(self, public_dir):
        result = resolve_public_file(public_dir, "index.html")

        assert result == (public_dir / "index.html").resolve()

    def test_parent_traversal_forbidden(self, public_dir):
        """Should refuse paths that escape the public directory."""
        with pytest.raises(ForbiddenPathError) as exc_info:
            resolve_public_file(public_dir, "../secret.txt")

        assert exc_info.value.status_code == 403

    def test_absolute_path_forbidden(self, public_dir, tmp_path):
        with pytest.raises(ForbiddenPathError):
            resolve_public_file(public_dir, str(tmp_path / "secret.txt"))

    def test_missing_file_not_found(self, public_dir):
        with pytest.raises(StaticFileNotFoundError) as exc_info:
            resolve_public_file(public_dir, "missing.css")

        assert exc_info.value.status_code == 404

    def test_directory_not_found(self, public_dir):
        """Should not serve directories."""
        with pytest.raises(StaticFileNotFoundError):
            resolve_public_file(public_dir, "nested")
