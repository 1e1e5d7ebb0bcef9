import hashlib
import socket
import time
from collections.abc import Callable
from typing import Any

import msgspec
import pytest

WAIT_TIMEOUT_S = 1.0


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add shared live-test options available across the full test suite."""
    try:
        parser.addoption(
            "--run-live",
            action="store_true",
            default=False,
            help="Run live tests that require a running node publishing on ZMQ",
        )
    except ValueError:
        # Option may already be registered by a nested conftest.
        pass


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line(
        "markers", "live: mark test as requiring a live ZMQ publisher"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip live tests unless explicitly enabled."""
    if config.getoption("--run-live"):
        return

    skip_live = pytest.mark.skip(reason="need --run-live option to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def wait_for() -> Callable[[Callable[[], bool], float, float], bool]:
    """Return a helper to poll for a condition instead of sleeping a fixed amount."""

    def _wait_for(
        predicate: Callable[[], bool],
        timeout_s: float = WAIT_TIMEOUT_S,
        interval_s: float = 0.01,
    ) -> bool:
        deadline = time.monotonic() + timeout_s
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval_s)
        return predicate()

    return _wait_for


@pytest.fixture
def free_tcp_endpoint() -> str:
    """Return a loopback endpoint on a port that was free a moment ago."""
    s = socket.socket()
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return f"tcp://127.0.0.1:{port}"


def _hex(seed: str) -> str:
    return hashlib.sha256(seed.encode()).hexdigest()


def _tagged_output(seed: str, amount: int = 0) -> dict[str, Any]:
    return {
        "amount": amount,
        "to_tagged_key": {"key": _hex(f"{seed}-key"), "view_tag": _hex(seed)[:2]},
    }


CHAIN_MAIN_MIN: dict[str, Any] = {
    "first_height": 3246810,
    "first_prev_id": _hex("prev-3246809"),
    "ids": [_hex("block-3246810"), _hex("block-3246811")],
}

TXPOOL_ADD_MIN: list[dict[str, Any]] = [
    {"id": _hex("tx-1"), "blob_size": 1533, "weight": 1533, "fee": 30660000},
    {"id": _hex("tx-2"), "blob_size": 2236, "weight": 2236, "fee": 44720000},
]

CHAIN_MAIN: list[dict[str, Any]] = [
    {
        "major_version": 16,
        "minor_version": 16,
        "timestamp": 1726973843,
        "prev_id": _hex("prev-3246818"),
        "nonce": 537273946,
        "miner_tx": {
            "version": 2,
            "unlock_time": 3246878,
            "inputs": [{"gen": {"height": 3246818}}],
            "outputs": [_tagged_output("coinbase", amount=618188010000)],
            "extra": "01" + _hex("coinbase-extra") + "020800000000",
            "signatures": [],
            "ringct": {"type": 0, "encrypted": [], "commitments": [], "fee": 0},
        },
        "tx_hashes": [_hex("tx-1"), _hex("tx-2")],
    }
]

TXPOOL_ADD: list[dict[str, Any]] = [
    {
        "version": 2,
        "unlock_time": 0,
        "inputs": [
            {
                "to_key": {
                    "amount": 0,
                    "key_offsets": [82773133, 30793552, 578202, 3112, 1561],
                    "key_image": _hex("key-image"),
                }
            }
        ],
        "outputs": [_tagged_output("out-0"), _tagged_output("out-1")],
        "extra": "01" + _hex("tx-extra"),
        "signatures": [],
        "ringct": {
            "type": 6,
            "encrypted": [
                {"mask": "0" * 64, "amount": "a956be1858615454"},
                {"mask": "0" * 64, "amount": "72972be61af1210b"},
            ],
            "commitments": [_hex("commitment-0"), _hex("commitment-1")],
            "fee": 30660000,
            "prunable": {
                "range_proofs": [],
                "bulletproofs": [],
                "bulletproofs_plus": [
                    {
                        "V": [],
                        "A": _hex("bp-A"),
                        "A1": _hex("bp-A1"),
                        "B": _hex("bp-B"),
                        "r1": _hex("bp-r1"),
                        "s1": _hex("bp-s1"),
                        "d1": _hex("bp-d1"),
                        "L": [_hex(f"bp-L{i}") for i in range(7)],
                        "R": [_hex(f"bp-R{i}") for i in range(7)],
                    }
                ],
                "mlsags": [],
                "clsags": [
                    {
                        "s": [_hex(f"clsag-s{i}") for i in range(16)],
                        "c1": _hex("clsag-c1"),
                        "D": _hex("clsag-D"),
                    }
                ],
                "pseudo_outs": [_hex("pseudo-out-0")],
            },
        },
    }
]

MINER_DATA: dict[str, Any] = {
    "major_version": 16,
    "height": 3246819,
    "prev_id": _hex("block-3246818"),
    "seed_hash": _hex("seed"),
    "difficulty": "0x2cd2a39b5f2",
    "median_weight": 300000,
    "already_generated_coins": 18372500000000000000,
    "tx_backlog": [{"id": _hex("tx-1"), "weight": 1533, "fee": 30660000}],
}

SAMPLES: dict[str, Any] = {
    "json-minimal-chain_main": CHAIN_MAIN_MIN,
    "json-minimal-txpool_add": TXPOOL_ADD_MIN,
    "json-full-chain_main": CHAIN_MAIN,
    "json-full-txpool_add": TXPOOL_ADD,
    "json-full-miner_data": MINER_DATA,
}


def encode_sample(value: Any) -> str:
    return msgspec.json.encode(value).decode()


@pytest.fixture
def samples() -> dict[str, Any]:
    """Decoded sample payload per wire label."""
    return msgspec.json.decode(msgspec.json.encode(SAMPLES))


@pytest.fixture
def sample_bodies() -> dict[str, str]:
    """Encoded sample JSON body per wire label."""
    return {label: encode_sample(value) for label, value in SAMPLES.items()}
