"""Tests for the read-mostly collections."""

import pytest

from maasclient import MAASError, Params


@pytest.mark.parametrize(
    "attr, path, payload, field, expected",
    [
        ("zones", "/zones/", [{"id": 1, "name": "az1"}], "name", "az1"),
        ("resource_pools", "/resourcepools/", [{"id": 0, "name": "default"}], "name", "default"),
        ("spaces", "/spaces/", [{"id": 2, "name": "public", "subnets": []}], "name", "public"),
        ("subnets", "/subnets/", [{"id": 3, "cidr": "10.0.0.0/24", "vlan": {"id": 1, "fabric": "fabric-0"}}], "cidr", "10.0.0.0/24"),
        ("domains", "/domains/", [{"id": 0, "name": "maas", "ttl": 30}], "name", "maas"),
        ("ssh_keys", "/account/prefs/sshkeys/", [{"id": 9, "key": "ssh-ed25519 AAAA", "keysource": None}], "key", "ssh-ed25519 AAAA"),
    ],
)
def test_list_endpoints(client, transport, attr, path, payload, field, expected):
    # Arrange
    transport.reply(payload)

    # Act
    items = getattr(client, attr).list()

    # Assert
    assert transport.calls[0].path == path
    assert getattr(items[0], field) == expected


def test_whoami_sends_op(client, transport):
    # Arrange
    transport.reply({"username": "admin", "email": "a@b.c", "is_superuser": True, "is_local": True})

    # Act
    user = client.users.whoami()

    # Assert
    assert transport.calls[0].params == {"op": ["whoami"]}
    assert user.is_superuser


def test_users_list_after_whoami_has_no_op(client, transport):
    # Arrange
    transport.reply({"username": "admin"}).reply([{"username": "admin"}])
    client.users.whoami()

    # Act
    users = client.users.list()

    # Assert: the whoami op does not leak into the next call
    assert transport.calls[1].params == {}
    assert users[0].username == "admin"


def test_import_boot_images(client, transport):
    # Act
    client.rack_controllers.import_boot_images()

    # Assert
    assert transport.calls[0].method == "POST"
    assert transport.calls[0].path == "/rackcontrollers/"
    assert transport.calls[0].params == {"op": ["import_boot_images"]}


def test_ip_address_get_all_returns_first_match(client, transport):
    # Arrange
    transport.reply([{"ip": "10.0.0.5", "alloc_type_name": "User reserved"}])

    # Act
    address = client.ip_addresses.get_all("10.0.0.5")

    # Assert
    assert transport.calls[0].params == {"ip": ["10.0.0.5"], "all": ["true"]}
    assert address.ip == "10.0.0.5"


def test_ip_address_get_without_match_raises(client, transport):
    # Arrange
    transport.reply([])

    # Act & Assert
    with pytest.raises(MAASError, match="no IP address found for 10.0.0.5"):
        client.ip_addresses.get("10.0.0.5")


def test_ip_address_release_and_force_release(client, transport):
    # Act
    client.ip_addresses.release("10.0.0.5")
    client.ip_addresses.force_release("10.0.0.6")

    # Assert
    assert transport.calls[0].params == {"op": ["release"], "ip": ["10.0.0.5"]}
    assert transport.calls[1].params == {"op": ["release"], "ip": ["10.0.0.6"], "force": ["true"]}


def test_ip_address_list_merges_params(client, transport):
    # Arrange
    transport.reply([])

    # Act
    client.ip_addresses.list(Params().set("all", "true"))

    # Assert
    assert transport.calls[0].params == {"all": ["true"]}
