# hms_core/common/tests/test_media.py
import pytest

from hms_core.common.media import image_url


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", "/static/placeholder.png"),
        (None, "/static/placeholder.png"),
        ("doctors/house.jpg", "/media/doctors/house.jpg"),
        ("/uploads/x.png", "/uploads/x.png"),
        ("https://cdn.example.com/a.png", "https://cdn.example.com/a.png"),
    ],
)
def test_image_url(settings, path, expected):
    settings.HMS_DEFAULT_IMAGE_URL = "/static/placeholder.png"
    settings.MEDIA_URL = "/media/"
    assert image_url(path) == expected
