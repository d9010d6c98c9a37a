import pytest

from models import InterfaceSample, Snapshot

NET_DEV_HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast"
    "|bytes    packets errs drop fifo colls carrier compressed\n"
)


def net_dev_row(name, rx_bytes, tx_bytes):
    rx = [rx_bytes, 10, 0, 0, 0, 0, 0, 0]
    tx = [tx_bytes, 20, 0, 0, 0, 0, 0, 0]
    return f"{name:>6}: " + " ".join(str(v) for v in rx + tx) + "\n"


def net_dev_text(rows):
    return NET_DEV_HEADER + "".join(net_dev_row(*row) for row in rows)


def make_snapshot(*samples):
    snapshot = Snapshot()
    for name, rx, tx in samples:
        snapshot.add(InterfaceSample.create(name, rx, tx))
    return snapshot


@pytest.fixture
def proc_net_dev(tmp_path):
    """Write a fake /proc/net/dev and return (path, writer) so tests can update it."""
    path = tmp_path / "net_dev"

    def write(rows):
        path.write_text(net_dev_text(rows))
        return str(path)

    return path, write


@pytest.fixture
def sysfs_root(tmp_path):
    root = tmp_path / "class_net"
    root.mkdir()
    for name in ("lo", "eth0", "wlan0"):
        (root / name).mkdir()
    return str(root)
