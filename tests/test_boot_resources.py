"""Tests for boot resource registration and upload."""

import pytest

from maasclient import MAASError
from maasclient.models import BootResource
from maasclient.utils.files import CHUNK_SIZE


def _resource(sets=None):
    return {
        "id": 12,
        "type": "Uploaded",
        "name": "custom/img",
        "architecture": "amd64/generic",
        "sets": sets if sets is not None else {
            "20240101-0": {"files": {"root-tgz": {"upload_uri": "/MAAS/api/2.0/boot-resources/12/upload/3/"}}},
        },
    }


def test_latest_set_is_smallest_key():
    # Arrange
    resource = BootResource.model_validate(_resource({
        "20240101-0": {"version": "20240101-0"},
        "20231231-0": {"version": "20231231-0"},
    }))

    # Act
    latest = resource.latest_set()

    # Assert: lexicographic minimum, not the newest date
    assert latest.version == "20231231-0"


def test_latest_set_requires_a_set():
    # Act & Assert
    with pytest.raises(MAASError, match="no set found in boot resource"):
        BootResource.model_validate(_resource({})).latest_set()


def test_upload_uri_strips_api_prefix():
    # Act
    uri = BootResource.model_validate(_resource()).latest_set().upload_uri()

    # Assert
    assert uri == "/boot-resources/12/upload/3/"


def test_upload_uri_requires_exactly_one_file():
    # Arrange
    resource = BootResource.model_validate(_resource({"1": {"files": {"a": {}, "b": {}}}}))

    # Act & Assert
    with pytest.raises(MAASError, match="exactly one file"):
        resource.latest_set().upload_uri()


def test_create_posts_multipart_form(client, transport):
    # Arrange
    transport.reply(_resource(), status=201)

    # Act
    resource = (
        client.boot_resources.builder("custom/img", "amd64/generic", "ab" * 32, "img.tgz", 1024)
        .with_title("Custom")
        .with_file_type("tgz")
        .with_base_image("ubuntu/jammy")
        .create()
    )

    # Assert
    call = transport.calls[0]
    assert call.path == "/boot-resources/"
    assert call.content_type.startswith("multipart/form-data; boundary=")
    assert b'name="name"' in call.body and b"custom/img" in call.body
    assert b'name="base_image"' in call.body
    assert resource.id == 12


@pytest.mark.parametrize(
    "size, expected",
    [
        (CHUNK_SIZE, [CHUNK_SIZE]),
        (CHUNK_SIZE + 1, [CHUNK_SIZE, 1]),
        (10, [10]),
        (0, []),
    ],
)
def test_upload_streams_fixed_chunks(client, transport, tmp_path, size, expected):
    # Arrange
    path = tmp_path / "img.tgz"
    path.write_bytes(b"x" * size)
    resource = BootResource.model_validate(_resource())

    # Act
    client.boot_resources.boot_resource(12).upload(path, resource)

    # Assert: no empty trailing chunk because the last read is trimmed
    assert [c.content_length for c in transport.calls] == expected
    assert all(c.method == "PUT" and c.path == "/boot-resources/12/upload/3/" for c in transport.calls)
    assert all(len(c.body) == c.content_length for c in transport.calls)


def test_upload_fetches_resource_when_not_given(client, transport, tmp_path):
    # Arrange
    path = tmp_path / "img.tgz"
    path.write_bytes(b"abc")
    transport.reply(_resource())

    # Act
    client.boot_resources.boot_resource(12).upload(path)

    # Assert
    assert [c.method for c in transport.calls] == ["GET", "PUT"]
    assert transport.calls[0].path == "/boot-resources/12/"


def test_upload_stops_on_rejected_chunk(client, transport, tmp_path):
    # Arrange
    path = tmp_path / "img.tgz"
    path.write_bytes(b"x" * (CHUNK_SIZE + 1))
    transport.reply(b"checksum mismatch", status=400)

    # Act & Assert
    with pytest.raises(MAASError):
        client.boot_resources.boot_resource(12).upload(path, BootResource.model_validate(_resource()))
    assert len(transport.calls) == 1
