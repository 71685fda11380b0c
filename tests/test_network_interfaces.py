"""Tests for interface IP reconfiguration."""

import pytest

from maasclient import MAASConfigError
from maasclient.models import IPConfigurationUpdate

SUBNET = {"id": 3, "name": "10.0.0.0/24", "cidr": "10.0.0.0/24"}


def _interface(id, name, links=(), children=()):
    return {"id": id, "name": name, "type": "physical", "links": list(links), "children": list(children)}


def test_set_boot_interface_static_ip_relinks_dhcp_link(client, transport, sample_machine_data):
    # Arrange: machine whose boot interface has a dhcp and a static link
    transport.reply(sample_machine_data)
    transport.reply(_interface(7, "eth0", links=[
        {"id": 20, "mode": "static", "subnet": SUBNET, "ip_address": "10.0.0.9"},
        {"id": 21, "mode": "dhcp", "subnet": SUBNET},
    ]))

    # Act
    client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.50")

    # Assert: the dhcp link is replaced because it is preferred
    paths = [(c.method, c.path) for c in transport.calls]
    assert paths == [
        ("GET", "/machines/abc123/"),
        ("GET", "/nodes/abc123/interfaces/7/"),
        ("POST", "/nodes/abc123/interfaces/7/"),
        ("POST", "/nodes/abc123/interfaces/7/"),
    ]
    assert transport.calls[2].params == {"op": ["unlink_subnet"], "id": ["21"]}
    assert transport.calls[3].params == {
        "op": ["link_subnet"],
        "subnet": ["3"],
        "ip_address": ["10.0.0.50"],
        "mode": ["static"],
    }


def test_bridge_without_links_configures_child(client, transport, sample_machine_data):
    # Arrange: br0 has no links, its child eth0 does
    transport.reply(sample_machine_data)
    transport.reply(_interface(7, "br0", children=["eth0"]))
    transport.reply([
        _interface(7, "br0", children=["eth0"]),
        _interface(8, "eth0", links=[{"id": 30, "mode": "auto", "subnet": SUBNET}]),
    ])

    # Act
    client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.51")

    # Assert: the child's link is rewritten on the child's path
    assert transport.calls[2].method == "GET"
    assert transport.calls[2].path == "/nodes/abc123/interfaces/"
    assert transport.calls[3].path == "/nodes/abc123/interfaces/8/"
    assert transport.calls[3].params == {"op": ["unlink_subnet"], "id": ["30"]}
    assert transport.calls[4].params["ip_address"] == ["10.0.0.51"]


def test_no_links_and_no_children_raises(client, transport, sample_machine_data):
    # Arrange
    transport.reply(sample_machine_data)
    transport.reply(_interface(7, "eth0"))

    # Act & Assert: nothing to reconfigure
    with pytest.raises(MAASConfigError, match="no links and no children"):
        client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.50")


def test_children_without_links_raises(client, transport, sample_machine_data):
    # Arrange
    transport.reply(sample_machine_data)
    transport.reply(_interface(7, "br0", children=["eth0"]))
    transport.reply([_interface(8, "eth0")])

    # Act & Assert
    with pytest.raises(MAASConfigError, match="no child interface with links"):
        client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.50")


def test_link_without_subnet_raises(client, transport):
    # Arrange
    transport.reply(_interface(7, "eth0", links=[{"id": 20, "mode": "link_up"}]))

    # Act & Assert
    with pytest.raises(MAASConfigError, match="no subnet"):
        client.network_interfaces.interface("abc123", "7").set_static_ip("10.0.0.50")
    assert len(transport.calls) == 1


def test_machine_without_boot_interface_raises(client, transport, sample_machine_data):
    # Arrange
    transport.reply({**sample_machine_data, "boot_interface": None})

    # Act & Assert
    with pytest.raises(MAASConfigError, match="no boot interface"):
        client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.50")


@pytest.mark.parametrize(
    "update, message",
    [
        (IPConfigurationUpdate(link_id="", mode="static", subnet_id="3", ip_address="10.0.0.5"), "link_id"),
        (IPConfigurationUpdate(link_id="1", mode="", subnet_id="3"), "mode"),
        (IPConfigurationUpdate(link_id="1", mode="dhcp"), "subnet_id"),
        (IPConfigurationUpdate(link_id="1", mode="static", subnet_id="3"), "ip_address"),
    ],
)
def test_update_ip_configuration_validates_before_any_call(client, transport, update, message):
    # Act & Assert: nothing is sent because validation fails first
    with pytest.raises(MAASConfigError, match=message):
        client.network_interfaces.interface("abc123", "7").update_ip_configuration(update)
    assert transport.calls == []


def test_link_subnet_without_ip_uses_dhcp(client, transport):
    # Act
    client.network_interfaces.interface("abc123", "7").link_subnet("3")

    # Assert
    assert transport.calls[0].params == {"op": ["link_subnet"], "subnet": ["3"], "mode": ["dhcp"]}


def test_set_dhcp_replaces_first_link(client, transport):
    # Arrange
    transport.reply(_interface(7, "eth0", links=[{"id": 20, "mode": "static", "subnet": SUBNET}]))

    # Act
    client.network_interfaces.interface("abc123", "7").set_dhcp("3")

    # Assert
    assert transport.calls[1].params == {"op": ["unlink_subnet"], "id": ["20"]}
    assert transport.calls[2].params == {"op": ["link_subnet"], "subnet": ["3"], "mode": ["dhcp"]}


def test_get_stamps_system_id(client, transport):
    # Arrange
    transport.reply([_interface(7, "eth0")])

    # Act
    interfaces = client.network_interfaces.get("abc123")

    # Assert: system_id is filled in by the controller
    assert interfaces[0].system_id == "abc123"
    assert interfaces[0].id == "7"


def test_parent_without_links_relinks_childs_dhcp_link(client, transport, sample_machine_data):
    # Arrange: eth0 has no links and one child br0 whose only link is dhcp
    transport.reply(sample_machine_data)
    transport.reply(_interface(7, "eth0", children=["br0"]))
    transport.reply([
        _interface(7, "eth0", children=["br0"]),
        _interface(9, "br0", links=[{"id": 40, "mode": "dhcp", "subnet": SUBNET}]),
    ])

    # Act
    client.network_interfaces.set_boot_interface_static_ip("abc123", "10.0.0.52")

    # Assert: br0's dhcp link is unlinked then relinked as static on the same subnet
    assert [(c.method, c.path) for c in transport.calls[3:]] == [
        ("POST", "/nodes/abc123/interfaces/9/"),
        ("POST", "/nodes/abc123/interfaces/9/"),
    ]
    assert transport.calls[3].params == {"op": ["unlink_subnet"], "id": ["40"]}
    assert transport.calls[4].params == {
        "op": ["link_subnet"],
        "subnet": ["3"],
        "ip_address": ["10.0.0.52"],
        "mode": ["static"],
    }
